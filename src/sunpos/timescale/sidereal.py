"""Greenwich and local sidereal time (Meeus, Astronomical Algorithms ch. 12)."""

import math

from ..config.settings import J2000
from ..coordinates.nutation import nutation_in_longitude, true_obliquity
from .toi import TimeOfInterest


def mean_sidereal_time(toi: TimeOfInterest) -> float:
    """Greenwich mean sidereal time in degrees, in [0, 360)."""
    T = toi.T
    theta0 = (
        280.46061837
        + 360.98564736629 * (toi.jd - J2000)
        + 0.000387933 * T * T
        - T * T * T / 38710000.0
    )
    return theta0 % 360.0


def apparent_sidereal_time(toi: TimeOfInterest) -> float:
    """Greenwich apparent sidereal time in degrees (mean corrected for nutation)."""
    T = toi.T
    delta_psi = nutation_in_longitude(T)
    epsilon = math.radians(true_obliquity(T))
    return (mean_sidereal_time(toi) + delta_psi * math.cos(epsilon)) % 360.0


def local_apparent_sidereal_time(toi: TimeOfInterest, longitude: float) -> float:
    """Local apparent sidereal time for an east-positive longitude, in degrees."""
    return (apparent_sidereal_time(toi) + longitude) % 360.0
