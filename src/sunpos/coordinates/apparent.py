"""Corrections turning geometric positions into apparent ones."""

import math

from ..config.settings import STANDARD_PRESSURE_MBAR, STANDARD_TEMPERATURE_C
from ..models.coordinates import EclipticSphericalCoordinates, HorizontalCoordinates
from .conversions import normalize_degrees
from .nutation import nutation_in_longitude

# Constant of aberration, arcseconds
ABERRATION_CONSTANT = 20.49552

# Below this altitude the refraction formula diverges
MIN_REFRACTION_ALTITUDE = -1.0


def sun_true_longitude(T: float) -> float:
    """Geometric longitude of the Sun, mean equinox of date (Meeus ch. 25)."""
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T * T
    M = math.radians(357.52911 + 35999.05029 * T - 0.0001537 * T * T)
    C = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M)
        + (0.019993 - 0.000101 * T) * math.sin(2 * M)
        + 0.000289 * math.sin(3 * M)
    )
    return normalize_degrees(L0 + C)


def earth_orbit_eccentricity(T: float) -> float:
    return 0.016708634 - 0.000042037 * T - 0.0000001267 * T * T


def earth_perihelion_longitude(T: float) -> float:
    return 102.93735 + 1.71946 * T + 0.00046 * T * T


def correct_effect_of_aberration(
    coords: EclipticSphericalCoordinates, T: float
) -> EclipticSphericalCoordinates:
    """Annual aberration in ecliptic coordinates (Meeus 23.2)."""
    kappa = ABERRATION_CONSTANT / 3600.0
    e = earth_orbit_eccentricity(T)
    pi = math.radians(earth_perihelion_longitude(T))
    sun_lon = math.radians(sun_true_longitude(T))
    lon = math.radians(coords.lon)
    lat = math.radians(coords.lat)

    cos_lat = math.cos(lat)
    if abs(cos_lat) < 1e-12:
        delta_lon = 0.0
    else:
        delta_lon = (
            -kappa * math.cos(sun_lon - lon) + e * kappa * math.cos(pi - lon)
        ) / cos_lat
    delta_lat = (
        -kappa * math.sin(lat) * (math.sin(sun_lon - lon) - e * math.sin(pi - lon))
    )

    return EclipticSphericalCoordinates(
        lon=normalize_degrees(coords.lon + delta_lon),
        lat=coords.lat + delta_lat,
        radius_vector=coords.radius_vector,
    )


def correct_effect_of_nutation(
    coords: EclipticSphericalCoordinates, T: float
) -> EclipticSphericalCoordinates:
    """Add nutation in longitude; latitude is unaffected."""
    return EclipticSphericalCoordinates(
        lon=normalize_degrees(coords.lon + nutation_in_longitude(T)),
        lat=coords.lat,
        radius_vector=coords.radius_vector,
    )


def get_refraction(
    altitude: float,
    pressure_mbar: float = STANDARD_PRESSURE_MBAR,
    temperature_c: float = STANDARD_TEMPERATURE_C,
) -> float:
    """Atmospheric refraction in degrees for a true (airless) altitude.

    Saemundsson's formula, scaled for pressure and temperature. Returns 0
    for altitudes below MIN_REFRACTION_ALTITUDE.
    """
    if altitude < MIN_REFRACTION_ALTITUDE:
        return 0.0

    arcminutes = 1.02 / math.tan(math.radians(altitude + 10.3 / (altitude + 5.11)))
    arcminutes *= (pressure_mbar / STANDARD_PRESSURE_MBAR) * (
        283.0 / (273.0 + temperature_c)
    )
    return arcminutes / 60.0


def correct_effect_of_refraction(
    coords: HorizontalCoordinates,
    pressure_mbar: float = STANDARD_PRESSURE_MBAR,
    temperature_c: float = STANDARD_TEMPERATURE_C,
) -> HorizontalCoordinates:
    refraction = get_refraction(coords.altitude, pressure_mbar, temperature_c)
    return HorizontalCoordinates(
        azimuth=coords.azimuth,
        altitude=min(90.0, coords.altitude + refraction),
        radius_vector=coords.radius_vector,
    )
