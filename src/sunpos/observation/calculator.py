"""Observable quantities derived from a body's distance."""

import math

from ..config.settings import AU_KM, SPEED_OF_LIGHT_KM_S
from ..errors import InvalidCoordinateError


def get_distance(radius_vector: float) -> float:
    """Convert a radius vector in AU to kilometers."""
    if radius_vector < 0:
        raise InvalidCoordinateError("radius_vector", radius_vector)
    return radius_vector * AU_KM


def get_light_time(distance_km: float) -> float:
    """Light travel time in seconds over distance_km."""
    return distance_km / SPEED_OF_LIGHT_KM_S


def get_angular_diameter(distance_km: float, diameter_km: float) -> float:
    """Apparent angular diameter in degrees of a sphere seen from distance_km.

    Args:
        distance_km: Distance from the observer to the body's center
        diameter_km: Linear diameter of the body

    Returns:
        Angular diameter in degrees
    """
    if distance_km <= 0:
        raise InvalidCoordinateError("distance_km", distance_km)
    return math.degrees(2.0 * math.atan(diameter_km / (2.0 * distance_km)))
