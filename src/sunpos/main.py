import argparse
import logging
import sys
from datetime import datetime, timezone

from . import __version__
from .config.settings import get_log_level
from .earth.provider import EARTH_MODELS, get_earth_model
from .errors import NoEventError, SunposError, TimeParseError, handle_error
from .formatting import deg_to_angle, deg_to_time, sec_to_string
from .models import Location
from .objects.sun import Sun
from .timescale.toi import TimeOfInterest

EVENTS = (
    ("Rise (upper limb)", "get_rise_upper_limb"),
    ("Rise (center)", "get_rise"),
    ("Transit", "get_transit"),
    ("Set (center)", "get_set"),
    ("Set (upper limb)", "get_set_upper_limb"),
)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Report the position of the Sun and its rise, transit and set times."
    )
    parser.add_argument(
        "--utc-time",
        type=str,
        default=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        help="ISO-8601 UTC timestamp (default: current time)",
    )
    parser.add_argument(
        "--lat",
        type=float,
        required=True,
        help="Observer latitude in degrees, positive north",
    )
    parser.add_argument(
        "--lon",
        type=float,
        required=True,
        help="Observer longitude in degrees, positive east",
    )
    parser.add_argument(
        "--elevation",
        type=float,
        default=0.0,
        help="Observer elevation in meters (default: 0)",
    )
    parser.add_argument(
        "--earth-model",
        type=str,
        choices=list(EARTH_MODELS),
        default=None,
        help="Earth orbital model (default: SUNPOS_EARTH_MODEL or vsop87)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log solver iterations and ephemeris loading",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"sunpos {__version__}",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_log_level()
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def format_utc(toi: TimeOfInterest) -> str:
    """Calendar date and time rounded to the nearest second."""
    t = toi.time
    return (
        f"{t.year:04d}-{t.month:02d}-{t.day:02d} "
        f"{t.hour:02d}:{t.minute:02d}:{t.second:02d} UTC"
    )


def format_event(sun: Sun, method_name: str, location: Location) -> str:
    try:
        toi = getattr(sun, method_name)(location)
    except NoEventError:
        return "no event"
    return format_utc(toi)


def build_report(sun: Sun, location: Location) -> list[str]:
    """Build the report lines for one instant and location.

    Args:
        sun: Sun at the time of interest
        location: Observer location

    Returns:
        Lines of text, without trailing newlines
    """
    ecliptic = sun.get_apparent_geocentric_ecliptic_spherical_coordinates()
    equatorial = sun.get_apparent_geocentric_equatorial_spherical_coordinates()
    topocentric = sun.get_topocentric_equatorial_spherical_coordinates(location)
    horizontal = sun.get_apparent_topocentric_horizontal_coordinates(location)

    lines = [
        f"Sun at {format_utc(sun.toi)} "
        f"(JD {sun.jd:.6f})",
        f"  Location: {location.lat:.6f}°, {location.lon:.6f}°, {location.elevation:.1f} m",
        "",
        "Apparent geocentric:",
        f"  Ecliptic longitude: {deg_to_angle(ecliptic.lon)}",
        f"  Ecliptic latitude: {deg_to_angle(ecliptic.lat)}",
        f"  Right ascension: {deg_to_time(equatorial.right_ascension)}",
        f"  Declination: {deg_to_angle(equatorial.declination)}",
        f"  Radius vector: {ecliptic.radius_vector:.8f} AU",
        "",
        "Topocentric:",
        f"  Right ascension: {deg_to_time(topocentric.right_ascension)}",
        f"  Declination: {deg_to_angle(topocentric.declination)}",
        f"  Azimuth: {horizontal.azimuth:.5f}°",
        f"  Altitude (refracted): {horizontal.altitude:.5f}°",
        "",
        "Distance and appearance:",
        f"  Distance: {sun.get_distance_to_earth():.0f} km",
        f"  Topocentric distance: {sun.get_topocentric_distance_to_earth(location):.0f} km",
        f"  Light time: {sec_to_string(sun.get_light_time())}",
        f"  Angular diameter: {deg_to_angle(sun.get_angular_diameter())}",
        f"  Apparent magnitude: {sun.get_apparent_magnitude():.2f}",
        "",
        "Events:",
    ]
    for label, method_name in EVENTS:
        lines.append(f"  {label}: {format_event(sun, method_name, location)}")
    return lines


def report_position(
    utc_time: str,
    lat: float,
    lon: float,
    elevation: float = 0.0,
    earth_model: str | None = None,
) -> int:
    """Print the Sun's position report.

    Args:
        utc_time: ISO-8601 UTC timestamp
        lat: Observer latitude in degrees
        lon: Observer longitude in degrees
        elevation: Observer elevation in meters
        earth_model: Earth orbital model name (None for configured default)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        try:
            toi = TimeOfInterest.from_iso(utc_time)
        except TimeParseError as e:
            return handle_error(e, "parsing UTC time")

        location = Location(lat=lat, lon=lon, elevation=elevation)
        sun = Sun(toi, earth=get_earth_model(earth_model))

        for line in build_report(sun, location):
            print(line)

        return 0

    except SunposError as error:
        return handle_error(error)

    except Exception as e:
        return handle_error(e, "computing the Sun's position")


def main(argv=None):
    """CLI entry point."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    exit_code = report_position(
        utc_time=args.utc_time,
        lat=args.lat,
        lon=args.lon,
        elevation=args.elevation,
        earth_model=args.earth_model,
    )

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
