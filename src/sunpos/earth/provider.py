from typing import Optional, Protocol

from ..config.settings import get_earth_model_name
from ..errors import EarthModelError
from ..models.coordinates import EclipticSphericalCoordinates
from ..timescale.toi import TimeOfInterest


class EarthModel(Protocol):
    """Source of the Earth's heliocentric position."""

    name: str

    def get_heliocentric_ecliptic_spherical_j2000_coordinates(
        self, toi: TimeOfInterest
    ) -> EclipticSphericalCoordinates: ...

    def get_heliocentric_ecliptic_spherical_date_coordinates(
        self, toi: TimeOfInterest
    ) -> EclipticSphericalCoordinates: ...


EARTH_MODELS = ("vsop87", "skyfield")


def get_earth_model(name: Optional[str] = None) -> EarthModel:
    """Get an Earth orbital model by name.

    Args:
        name: Model name (case-insensitive); defaults to SUNPOS_EARTH_MODEL

    Returns:
        A fresh model instance

    Raises:
        EarthModelError: If the name is not recognized
    """
    model_name = (name or get_earth_model_name()).lower()

    if model_name == "vsop87":
        from .vsop87 import VSOP87Earth

        return VSOP87Earth()

    if model_name == "skyfield":
        from .ephemeris import SkyfieldEarth

        return SkyfieldEarth()

    raise EarthModelError(model_name, list(EARTH_MODELS))
