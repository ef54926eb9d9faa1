from .conversions import (
    earth_to_sun,
    ecliptic_to_equatorial,
    equatorial_to_ecliptic,
    equatorial_to_horizontal,
    equatorial_to_topocentric,
    heliocentric_to_geocentric,
    rectangular_to_spherical,
    spherical_to_rectangular,
)
from .apparent import (
    correct_effect_of_aberration,
    correct_effect_of_nutation,
    correct_effect_of_refraction,
)
from .precession import precess_ecliptic

__all__ = [
    "earth_to_sun",
    "ecliptic_to_equatorial",
    "equatorial_to_ecliptic",
    "equatorial_to_horizontal",
    "equatorial_to_topocentric",
    "heliocentric_to_geocentric",
    "rectangular_to_spherical",
    "spherical_to_rectangular",
    "correct_effect_of_aberration",
    "correct_effect_of_nutation",
    "correct_effect_of_refraction",
    "precess_ecliptic",
]
