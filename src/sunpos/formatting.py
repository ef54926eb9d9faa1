"""Human-readable rendering of angles and durations."""


def deg_to_angle(deg: float) -> str:
    """Format decimal degrees as degrees, arcminutes and arcseconds, e.g. 0° 32' 09.582"."""
    sign = "-" if deg < 0 else ""
    total = round(abs(deg) * 3600.0, 3)
    degrees = int(total // 3600)
    minutes = int((total - degrees * 3600) // 60)
    seconds = total - degrees * 3600 - minutes * 60
    return f"{sign}{degrees}° {minutes:02d}' {seconds:06.3f}\""


def deg_to_time(deg: float) -> str:
    """Format an angle in degrees as hours, minutes and seconds of time."""
    return sec_to_string((deg % 360.0) / 15.0 * 3600.0)


def sec_to_string(seconds: float) -> str:
    """Format a duration in seconds, e.g. 496.58 -> '0h 8m 16.58s'."""
    total = round(seconds, 2)
    hours = int(total // 3600)
    minutes = int((total - hours * 3600) // 60)
    rest = total - hours * 3600 - minutes * 60
    return f"{hours}h {minutes}m {rest:.2f}s"
