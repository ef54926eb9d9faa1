"""Conversions between coordinate frames.

All angles are in degrees. Ecliptic and equatorial longitudes are returned
in [0, 360), azimuth is measured from north through east.
"""

import math

import numpy as np

from ..config.settings import AU_KM, EARTH_AXIS_RATIO, EARTH_EQUATORIAL_RADIUS_KM
from ..models.coordinates import (
    EclipticSphericalCoordinates,
    EquatorialSphericalCoordinates,
    HorizontalCoordinates,
    RectangularCoordinates,
)
from ..models.location import Location


def normalize_degrees(angle: float) -> float:
    """Fold an angle into [0, 360)."""
    angle = angle % 360.0
    # -1e-17 % 360.0 rounds to 360.0
    return 0.0 if angle == 360.0 else angle


def normalize_180(angle: float) -> float:
    """Fold an angle into [-180, 180)."""
    return (angle + 180.0) % 360.0 - 180.0


def _asin_degrees(value: float) -> float:
    return math.degrees(math.asin(max(-1.0, min(1.0, value))))


def _unit_vector(lon: float, lat: float) -> np.ndarray:
    lon_rad = math.radians(lon)
    lat_rad = math.radians(lat)
    return np.array(
        [
            math.cos(lat_rad) * math.cos(lon_rad),
            math.cos(lat_rad) * math.sin(lon_rad),
            math.sin(lat_rad),
        ]
    )


def _vector_to_angles(vector: np.ndarray) -> tuple[float, float, float]:
    x, y, z = (float(component) for component in vector)
    radius_vector = math.sqrt(x * x + y * y + z * z)
    lon = normalize_degrees(math.degrees(math.atan2(y, x)))
    lat = math.degrees(math.atan2(z, math.hypot(x, y)))
    return lon, lat, radius_vector


def spherical_to_rectangular(
    coords: EclipticSphericalCoordinates,
) -> RectangularCoordinates:
    vector = coords.radius_vector * _unit_vector(coords.lon, coords.lat)
    return RectangularCoordinates.from_array(vector)


def rectangular_to_spherical(
    coords: RectangularCoordinates,
) -> EclipticSphericalCoordinates:
    lon, lat, radius_vector = _vector_to_angles(coords.as_array())
    return EclipticSphericalCoordinates(lon=lon, lat=lat, radius_vector=radius_vector)


def ecliptic_to_equatorial(
    coords: EclipticSphericalCoordinates, obliquity: float
) -> EquatorialSphericalCoordinates:
    """Rotate ecliptic coordinates into the equatorial frame.

    Args:
        coords: Ecliptic longitude, latitude and radius vector
        obliquity: Obliquity of the ecliptic in degrees (mean or true)

    Returns:
        Right ascension, declination and the unchanged radius vector
    """
    lon = math.radians(coords.lon)
    lat = math.radians(coords.lat)
    eps = math.radians(obliquity)

    right_ascension = math.atan2(
        math.sin(lon) * math.cos(lat) * math.cos(eps) - math.sin(lat) * math.sin(eps),
        math.cos(lon) * math.cos(lat),
    )
    declination = _asin_degrees(
        math.sin(lat) * math.cos(eps)
        + math.cos(lat) * math.sin(eps) * math.sin(lon)
    )

    return EquatorialSphericalCoordinates(
        right_ascension=normalize_degrees(math.degrees(right_ascension)),
        declination=declination,
        radius_vector=coords.radius_vector,
    )


def equatorial_to_ecliptic(
    coords: EquatorialSphericalCoordinates, obliquity: float
) -> EclipticSphericalCoordinates:
    ra = math.radians(coords.right_ascension)
    dec = math.radians(coords.declination)
    eps = math.radians(obliquity)

    lon = math.atan2(
        math.sin(ra) * math.cos(dec) * math.cos(eps) + math.sin(dec) * math.sin(eps),
        math.cos(ra) * math.cos(dec),
    )
    lat = _asin_degrees(
        math.sin(dec) * math.cos(eps)
        - math.cos(dec) * math.sin(eps) * math.sin(ra)
    )

    return EclipticSphericalCoordinates(
        lon=normalize_degrees(math.degrees(lon)),
        lat=lat,
        radius_vector=coords.radius_vector,
    )


def heliocentric_to_geocentric(
    body: EclipticSphericalCoordinates, earth: EclipticSphericalCoordinates
) -> EclipticSphericalCoordinates:
    """Shift the origin of a heliocentric position to the Earth's center.

    Both inputs must share the same ecliptic and equinox. The subtraction is
    done on rectangular vectors so longitude wraparound cannot bias it.
    """
    body_vector = spherical_to_rectangular(body).as_array()
    earth_vector = spherical_to_rectangular(earth).as_array()
    return rectangular_to_spherical(
        RectangularCoordinates.from_array(body_vector - earth_vector)
    )


def earth_to_sun(earth: EclipticSphericalCoordinates) -> EclipticSphericalCoordinates:
    """Geocentric position of the Sun from the heliocentric position of the Earth."""
    return EclipticSphericalCoordinates(
        lon=normalize_degrees(earth.lon + 180.0),
        lat=-earth.lat,
        radius_vector=earth.radius_vector,
    )


def observer_geocentric_vector(
    location: Location, local_sidereal_time: float
) -> np.ndarray:
    """Observer position from the Earth's center, equatorial of date, in AU.

    Accounts for the Earth's flattening and the observer's elevation
    (Meeus ch. 11).
    """
    lat = math.radians(location.lat)
    u = math.atan2(EARTH_AXIS_RATIO * math.sin(lat), math.cos(lat))
    height = location.elevation / (EARTH_EQUATORIAL_RADIUS_KM * 1000.0)

    rho_sin_lat = EARTH_AXIS_RATIO * math.sin(u) + height * math.sin(lat)
    rho_cos_lat = math.cos(u) + height * math.cos(lat)

    theta = math.radians(local_sidereal_time)
    scale = EARTH_EQUATORIAL_RADIUS_KM / AU_KM
    return scale * np.array(
        [rho_cos_lat * math.cos(theta), rho_cos_lat * math.sin(theta), rho_sin_lat]
    )


def equatorial_to_topocentric(
    coords: EquatorialSphericalCoordinates,
    location: Location,
    local_sidereal_time: float,
) -> EquatorialSphericalCoordinates:
    """Apply diurnal parallax to geocentric equatorial coordinates.

    Args:
        coords: Geocentric equatorial coordinates (radius vector in AU)
        location: Observer location
        local_sidereal_time: Local sidereal time in degrees

    Returns:
        Topocentric right ascension, declination and distance in AU
    """
    body_vector = coords.radius_vector * _unit_vector(
        coords.right_ascension, coords.declination
    )
    topocentric = body_vector - observer_geocentric_vector(location, local_sidereal_time)
    right_ascension, declination, radius_vector = _vector_to_angles(topocentric)

    return EquatorialSphericalCoordinates(
        right_ascension=right_ascension,
        declination=declination,
        radius_vector=radius_vector,
    )


def equatorial_to_horizontal(
    coords: EquatorialSphericalCoordinates,
    location: Location,
    local_sidereal_time: float,
) -> HorizontalCoordinates:
    hour_angle = math.radians(local_sidereal_time - coords.right_ascension)
    dec = math.radians(coords.declination)
    lat = math.radians(location.lat)

    # Measured from south, westward
    azimuth = math.atan2(
        math.sin(hour_angle) * math.cos(dec),
        math.cos(hour_angle) * math.cos(dec) * math.sin(lat)
        - math.sin(dec) * math.cos(lat),
    )
    altitude = _asin_degrees(
        math.sin(lat) * math.sin(dec)
        + math.cos(lat) * math.cos(dec) * math.cos(hour_angle)
    )

    return HorizontalCoordinates(
        azimuth=normalize_degrees(math.degrees(azimuth) + 180.0),
        altitude=altitude,
        radius_vector=coords.radius_vector,
    )
