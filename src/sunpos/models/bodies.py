from dataclasses import dataclass

from ..config.settings import (
    STANDARD_ALTITUDE_SUN_CENTER_REFRACTION,
    STANDARD_ALTITUDE_SUN_UPPER_LIMB_REFRACTION,
)


@dataclass(frozen=True)
class Body:
    name: str
    diameter_km: float
    apparent_magnitude: float
    standard_altitude: float
    upper_limb_standard_altitude: float


BODIES = {
    "sun": Body(
        name="Sun",
        diameter_km=1_392_684.0,
        apparent_magnitude=-26.74,
        standard_altitude=STANDARD_ALTITUDE_SUN_CENTER_REFRACTION,
        upper_limb_standard_altitude=STANDARD_ALTITUDE_SUN_UPPER_LIMB_REFRACTION,
    ),
}
