"""Nutation and obliquity of the ecliptic (IAU 1980 theory, Meeus ch. 22)."""

from functools import lru_cache
import math

# Multiples of the fundamental arguments D, M, M', F, Omega, followed by the
# sine coefficient for delta psi and the cosine coefficient for delta epsilon,
# each as (constant, T) in units of 0.0001 arcseconds.
NUTATION_TERMS = (
    ((0, 0, 0, 0, 1), (-171996, -174.2), (92025, 8.9)),
    ((-2, 0, 0, 2, 2), (-13187, -1.6), (5736, -3.1)),
    ((0, 0, 0, 2, 2), (-2274, -0.2), (977, -0.5)),
    ((0, 0, 0, 0, 2), (2062, 0.2), (-895, 0.5)),
    ((0, 1, 0, 0, 0), (1426, -3.4), (54, -0.1)),
    ((0, 0, 1, 0, 0), (712, 0.1), (-7, 0)),
    ((-2, 1, 0, 2, 2), (-517, 1.2), (224, -0.6)),
    ((0, 0, 0, 2, 1), (-386, -0.4), (200, 0)),
    ((0, 0, 1, 2, 2), (-301, 0), (129, -0.1)),
    ((-2, -1, 0, 2, 2), (217, -0.5), (-95, 0.3)),
    ((-2, 0, 1, 0, 0), (-158, 0), (0, 0)),
    ((-2, 0, 0, 2, 1), (129, 0.1), (-70, 0)),
    ((0, 0, -1, 2, 2), (123, 0), (-53, 0)),
    ((2, 0, 0, 0, 0), (63, 0), (0, 0)),
    ((0, 0, 1, 0, 1), (63, 0.1), (-33, 0)),
    ((2, 0, -1, 2, 2), (-59, 0), (26, 0)),
    ((0, 0, -1, 0, 1), (-58, -0.1), (32, 0)),
    ((0, 0, 1, 2, 1), (-51, 0), (27, 0)),
    ((-2, 0, 2, 0, 0), (48, 0), (0, 0)),
    ((0, 0, -2, 2, 1), (46, 0), (-24, 0)),
    ((2, 0, 0, 2, 2), (-38, 0), (16, 0)),
    ((0, 0, 2, 2, 2), (-31, 0), (13, 0)),
    ((0, 0, 2, 0, 0), (29, 0), (0, 0)),
    ((-2, 0, 1, 2, 2), (29, 0), (-12, 0)),
    ((0, 0, 0, 2, 0), (26, 0), (0, 0)),
    ((-2, 0, 0, 2, 0), (-22, 0), (0, 0)),
    ((0, 0, -1, 2, 1), (21, 0), (-10, 0)),
    ((0, 2, 0, 0, 0), (17, -0.1), (0, 0)),
    ((2, 0, -1, 0, 1), (16, 0), (-8, 0)),
    ((-2, 2, 0, 2, 2), (-16, 0.1), (7, 0)),
    ((0, 1, 0, 0, 1), (-15, 0), (9, 0)),
    ((-2, 0, 1, 0, 1), (-13, 0), (7, 0)),
    ((0, -1, 0, 0, 1), (-12, 0), (6, 0)),
    ((0, 0, 2, -2, 0), (11, 0), (0, 0)),
    ((2, 0, -1, 2, 1), (-10, 0), (5, 0)),
    ((2, 0, 1, 2, 2), (-8, 0), (3, 0)),
    ((0, 1, 0, 2, 2), (7, 0), (-3, 0)),
    ((-2, 1, 1, 0, 0), (-7, 0), (0, 0)),
    ((0, -1, 0, 2, 2), (-7, 0), (3, 0)),
    ((2, 0, 0, 2, 1), (-7, 0), (3, 0)),
    ((2, 0, 1, 0, 0), (6, 0), (0, 0)),
    ((-2, 0, 2, 2, 2), (6, 0), (-3, 0)),
    ((-2, 0, 1, 2, 1), (6, 0), (-3, 0)),
    ((2, 0, -2, 0, 1), (-6, 0), (3, 0)),
    ((2, 0, 0, 0, 1), (-6, 0), (3, 0)),
    ((0, -1, 1, 0, 0), (5, 0), (0, 0)),
    ((-2, -1, 0, 2, 1), (-5, 0), (3, 0)),
    ((-2, 0, 0, 0, 1), (-5, 0), (3, 0)),
    ((0, 0, 2, 2, 1), (-5, 0), (3, 0)),
    ((-2, 0, 2, 0, 1), (4, 0), (0, 0)),
    ((-2, 1, 0, 2, 1), (4, 0), (0, 0)),
    ((0, 0, 1, -2, 0), (4, 0), (0, 0)),
    ((-1, 0, 1, 0, 0), (-4, 0), (0, 0)),
    ((-2, 1, 0, 0, 0), (-4, 0), (0, 0)),
    ((1, 0, 0, 0, 0), (-4, 0), (0, 0)),
    ((0, 0, 1, 2, 0), (3, 0), (0, 0)),
    ((0, 0, -2, 2, 2), (-3, 0), (0, 0)),
    ((-1, -1, 1, 0, 0), (-3, 0), (0, 0)),
    ((0, 1, 1, 0, 0), (-3, 0), (0, 0)),
    ((0, -1, 1, 2, 2), (-3, 0), (0, 0)),
    ((2, -1, -1, 2, 2), (-3, 0), (0, 0)),
    ((0, 0, 3, 2, 2), (-3, 0), (0, 0)),
    ((2, -1, 0, 2, 2), (-3, 0), (0, 0)),
)


def fundamental_arguments(T: float) -> tuple[float, float, float, float, float]:
    """Return D, M, M', F and Omega in degrees for Julian centuries T."""
    T2 = T * T
    T3 = T2 * T
    # Mean elongation of the Moon from the Sun
    D = 297.85036 + 445267.111480 * T - 0.0019142 * T2 + T3 / 189474.0
    # Mean anomaly of the Sun
    M = 357.52772 + 35999.050340 * T - 0.0001603 * T2 - T3 / 300000.0
    # Mean anomaly of the Moon
    M_moon = 134.96298 + 477198.867398 * T + 0.0086972 * T2 + T3 / 56250.0
    # Moon's argument of latitude
    F = 93.27191 + 483202.017538 * T - 0.0036825 * T2 + T3 / 327270.0
    # Longitude of the ascending node of the Moon's mean orbit
    omega = 125.04452 - 1934.136261 * T + 0.0020708 * T2 + T3 / 450000.0
    return D, M, M_moon, F, omega


@lru_cache(maxsize=1024)
def _nutation(T: float) -> tuple[float, float]:
    arguments = fundamental_arguments(T)

    delta_psi = 0.0
    delta_epsilon = 0.0
    for multiples, (psi, psi_t), (eps, eps_t) in NUTATION_TERMS:
        argument = math.radians(sum(k * a for k, a in zip(multiples, arguments)))
        delta_psi += (psi + psi_t * T) * math.sin(argument)
        delta_epsilon += (eps + eps_t * T) * math.cos(argument)

    # 0.0001 arcseconds to degrees
    return delta_psi / 36_000_000.0, delta_epsilon / 36_000_000.0


def nutation_in_longitude(T: float) -> float:
    """Nutation in longitude (delta psi) in degrees."""
    return _nutation(T)[0]


def nutation_in_obliquity(T: float) -> float:
    """Nutation in obliquity (delta epsilon) in degrees."""
    return _nutation(T)[1]


def mean_obliquity(T: float) -> float:
    """Mean obliquity of the ecliptic in degrees (Meeus 22.2)."""
    seconds = 21.448 - 46.8150 * T - 0.00059 * T * T + 0.001813 * T * T * T
    return 23.0 + 26.0 / 60.0 + seconds / 3600.0


def true_obliquity(T: float) -> float:
    """Mean obliquity corrected for nutation in obliquity, in degrees."""
    return mean_obliquity(T) + nutation_in_obliquity(T)
