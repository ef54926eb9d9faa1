"""Rigorous precession of ecliptic coordinates (Meeus 21.5)."""

import math

from ..models.coordinates import EclipticSphericalCoordinates
from .conversions import normalize_degrees

ARCSEC = 1.0 / 3600.0


def precess_ecliptic(
    coords: EclipticSphericalCoordinates, from_T: float, to_T: float
) -> EclipticSphericalCoordinates:
    """Move ecliptic coordinates from one mean equinox to another.

    Args:
        coords: Ecliptic coordinates referred to the starting equinox
        from_T: Starting epoch, Julian centuries from J2000
        to_T: Final epoch, Julian centuries from J2000

    Returns:
        Ecliptic coordinates referred to the final equinox
    """
    if from_T == to_T:
        return coords

    T = from_T
    t = to_T - from_T

    eta = (
        (47.0029 - 0.06603 * T + 0.000598 * T * T) * t
        + (-0.03302 + 0.000598 * T) * t * t
        + 0.000060 * t * t * t
    ) * ARCSEC
    pi = 174.876384 + (
        3289.4789 * T
        + 0.60622 * T * T
        - (869.8089 + 0.50491 * T) * t
        + 0.03536 * t * t
    ) * ARCSEC
    p = (
        (5029.0966 + 2.22226 * T - 0.000042 * T * T) * t
        + (1.11113 - 0.000042 * T) * t * t
        - 0.000006 * t * t * t
    ) * ARCSEC

    eta_rad = math.radians(eta)
    lon = math.radians(coords.lon)
    lat = math.radians(coords.lat)
    pi_rad = math.radians(pi)

    a = math.cos(eta_rad) * math.cos(lat) * math.sin(pi_rad - lon) - math.sin(
        eta_rad
    ) * math.sin(lat)
    b = math.cos(lat) * math.cos(pi_rad - lon)
    c = math.cos(eta_rad) * math.sin(lat) + math.sin(eta_rad) * math.cos(
        lat
    ) * math.sin(pi_rad - lon)

    return EclipticSphericalCoordinates(
        lon=normalize_degrees(p + pi - math.degrees(math.atan2(a, b))),
        lat=math.degrees(math.asin(max(-1.0, min(1.0, c)))),
        radius_vector=coords.radius_vector,
    )
