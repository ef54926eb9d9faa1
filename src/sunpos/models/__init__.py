from .bodies import Body, BODIES
from .location import Location
from .coordinates import (
    EclipticSphericalCoordinates,
    EquatorialSphericalCoordinates,
    HorizontalCoordinates,
    RectangularCoordinates,
)

__all__ = [
    "Body",
    "BODIES",
    "Location",
    "RectangularCoordinates",
    "EclipticSphericalCoordinates",
    "EquatorialSphericalCoordinates",
    "HorizontalCoordinates",
]
