from dataclasses import dataclass
import math

import numpy as np

from ..errors import InvalidCoordinateError


def _check_radius_vector(radius_vector: float) -> None:
    if not math.isfinite(radius_vector) or radius_vector < 0:
        raise InvalidCoordinateError("radius_vector", radius_vector)


@dataclass(frozen=True)
class RectangularCoordinates:
    x: float
    y: float
    z: float

    def __post_init__(self):
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidCoordinateError(name, value)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, vector: np.ndarray) -> "RectangularCoordinates":
        return cls(x=float(vector[0]), y=float(vector[1]), z=float(vector[2]))


@dataclass(frozen=True)
class EclipticSphericalCoordinates:
    lon: float
    lat: float
    radius_vector: float

    def __post_init__(self):
        _check_radius_vector(self.radius_vector)


@dataclass(frozen=True)
class EquatorialSphericalCoordinates:
    right_ascension: float
    declination: float
    radius_vector: float

    def __post_init__(self):
        _check_radius_vector(self.radius_vector)


@dataclass(frozen=True)
class HorizontalCoordinates:
    azimuth: float
    altitude: float
    radius_vector: float

    def __post_init__(self):
        _check_radius_vector(self.radius_vector)
