"""Times of rise, transit and set (Meeus, Astronomical Algorithms ch. 15).

The body's apparent equatorial position is sampled at 0h UT on the day
before, the day of, and the day after the date of interest, and quadratic
interpolation between those samples drives a short fixed-point refinement
of each event time.
"""

from dataclasses import dataclass
import logging
import math
from typing import Callable, Optional
import warnings

from ..config.settings import (
    SIDEREAL_DEGREES_PER_DAY,
    SOLVER_MAX_CORRECTION_DAYS,
    SOLVER_MAX_ITERATIONS,
    SOLVER_TOLERANCE_DAYS,
)
from ..coordinates.conversions import normalize_180, normalize_degrees
from ..errors import ConvergenceWarning, NoEventError
from ..models.coordinates import EquatorialSphericalCoordinates
from ..models.location import Location
from ..timescale.sidereal import apparent_sidereal_time
from ..timescale.toi import TimeOfInterest

logger = logging.getLogger(__name__)

PositionFunction = Callable[[float], EquatorialSphericalCoordinates]


@dataclass(frozen=True)
class EventSolution:
    jd: float
    iterations: int
    converged: bool

    @property
    def toi(self) -> TimeOfInterest:
        return TimeOfInterest.from_julian_day(self.jd)


@dataclass(frozen=True)
class DailySamples:
    """Positions at 0h UT of three consecutive days and sidereal time at the middle one."""

    right_ascensions: tuple[float, float, float]
    declinations: tuple[float, float, float]
    sidereal_time: float

    def at(self, n: float) -> tuple[float, float]:
        """Interpolated right ascension and declination at day fraction n."""
        alpha = interpolate(*self.right_ascensions, n)
        delta = interpolate(*self.declinations, n)
        return normalize_degrees(alpha), delta


def interpolate(y1: float, y2: float, y3: float, n: float) -> float:
    """Quadratic interpolation from three equidistant values (Meeus 3.3)."""
    a = y2 - y1
    b = y3 - y2
    c = b - a
    return y2 + n / 2.0 * (a + b + n * c)


def unwrap_right_ascensions(
    ra1: float, ra2: float, ra3: float
) -> tuple[float, float, float]:
    """Shift neighbouring right ascensions so none differs from ra2 by over 180°."""
    return (
        ra2 + normalize_180(ra1 - ra2),
        ra2,
        ra2 + normalize_180(ra3 - ra2),
    )


def sample_positions(position: PositionFunction, jd0: float) -> DailySamples:
    before, today, after = (position(jd0 + offset) for offset in (-1.0, 0.0, 1.0))
    right_ascensions = unwrap_right_ascensions(
        before.right_ascension, today.right_ascension, after.right_ascension
    )
    declinations = (before.declination, today.declination, after.declination)
    theta0 = apparent_sidereal_time(TimeOfInterest.from_julian_day(jd0))
    return DailySamples(right_ascensions, declinations, theta0)


def get_altitude(hour_angle: float, declination: float, latitude: float) -> float:
    H = math.radians(hour_angle)
    dec = math.radians(declination)
    lat = math.radians(latitude)
    sin_h = math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.cos(H)
    return math.degrees(math.asin(max(-1.0, min(1.0, sin_h))))


def get_cos_hour_angle(
    declination: float, latitude: float, standard_altitude: float
) -> float:
    """Cosine of the hour angle at which the body crosses standard_altitude.

    Values outside [-1, 1] mean the crossing does not happen.
    """
    dec = math.radians(declination)
    lat = math.radians(latitude)
    h0 = math.radians(standard_altitude)
    denominator = math.cos(lat) * math.cos(dec)
    if denominator == 0.0:
        # Observer at a pole: the altitude is constant over the day
        return math.inf if math.sin(h0) > math.sin(lat) * math.sin(dec) else -math.inf
    return (math.sin(h0) - math.sin(lat) * math.sin(dec)) / denominator


def _approximate_transit(samples: DailySamples, location: Location) -> float:
    alpha = samples.right_ascensions[1]
    return ((alpha - location.lon - samples.sidereal_time) / 360.0) % 1.0


def _refine(
    samples: DailySamples,
    location: Location,
    m: float,
    standard_altitude: Optional[float] = None,
) -> tuple[float, int, bool]:
    """Iterate an event's day fraction m until the correction drops below tolerance.

    Transit when standard_altitude is None, rise or set otherwise.
    """
    for iteration in range(1, SOLVER_MAX_ITERATIONS + 1):
        theta = samples.sidereal_time + SIDEREAL_DEGREES_PER_DAY * m
        alpha, delta = samples.at(m)
        hour_angle = normalize_180(theta + location.lon - alpha)

        if standard_altitude is None:
            delta_m = -hour_angle / 360.0
        else:
            altitude = get_altitude(hour_angle, delta, location.lat)
            denominator = (
                360.0
                * math.cos(math.radians(delta))
                * math.cos(math.radians(location.lat))
                * math.sin(math.radians(hour_angle))
            )
            if abs(denominator) < 1e-12:
                denominator = math.copysign(1e-12, denominator)
            delta_m = (altitude - standard_altitude) / denominator
            delta_m = max(
                -SOLVER_MAX_CORRECTION_DAYS, min(SOLVER_MAX_CORRECTION_DAYS, delta_m)
            )

        m = (m + delta_m) % 1.0
        logger.debug("iteration %d: m=%.8f, correction=%.3e", iteration, m, delta_m)

        if abs(delta_m) < SOLVER_TOLERANCE_DAYS:
            return m, iteration, True

    return m, SOLVER_MAX_ITERATIONS, False


def _solution(event: str, jd0: float, m: float, iterations: int, converged: bool):
    if not converged:
        warnings.warn(
            f"{event} time did not converge within {iterations} iterations "
            f"for the day starting at JD {jd0}; returning last estimate",
            ConvergenceWarning,
            stacklevel=3,
        )
    return EventSolution(jd=jd0 + m, iterations=iterations, converged=converged)


def solve_transit(
    position: PositionFunction, location: Location, jd0: float
) -> EventSolution:
    """Find the UT Julian Day of the upper meridian transit on the day starting at jd0.

    Args:
        position: Apparent geocentric equatorial position as a function of Julian Day
        location: Observer location
        jd0: Julian Day at 0h UT of the date of interest

    Returns:
        EventSolution with the transit Julian Day
    """
    samples = sample_positions(position, jd0)
    m0 = _approximate_transit(samples, location)
    m, iterations, converged = _refine(samples, location, m0)
    return _solution("transit", jd0, m, iterations, converged)


def _solve_horizon_crossing(
    event: str,
    sign: int,
    position: PositionFunction,
    location: Location,
    jd0: float,
    standard_altitude: float,
) -> EventSolution:
    samples = sample_positions(position, jd0)
    cos_h0 = get_cos_hour_angle(samples.declinations[1], location.lat, standard_altitude)

    if abs(cos_h0) > 1.0:
        logger.debug("no %s on JD %s: cos H0 = %.4f", event, jd0, cos_h0)
        raise NoEventError(event, jd0, location.lat, cos_h0)

    h0 = math.degrees(math.acos(cos_h0))
    m0 = _approximate_transit(samples, location)
    m = (m0 + sign * h0 / 360.0) % 1.0

    m, iterations, converged = _refine(samples, location, m, standard_altitude)
    return _solution(event, jd0, m, iterations, converged)


def solve_rise(
    position: PositionFunction,
    location: Location,
    jd0: float,
    standard_altitude: float,
) -> EventSolution:
    """Find the UT Julian Day at which the body rises through standard_altitude.

    Raises:
        NoEventError: If the body does not cross standard_altitude that day
    """
    return _solve_horizon_crossing(
        "rise", -1, position, location, jd0, standard_altitude
    )


def solve_set(
    position: PositionFunction,
    location: Location,
    jd0: float,
    standard_altitude: float,
) -> EventSolution:
    """Find the UT Julian Day at which the body sets through standard_altitude.

    Raises:
        NoEventError: If the body does not cross standard_altitude that day
    """
    return _solve_horizon_crossing(
        "set", 1, position, location, jd0, standard_altitude
    )
