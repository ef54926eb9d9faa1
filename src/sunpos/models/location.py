from dataclasses import dataclass
import math

from ..errors import InvalidLocationError

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


@dataclass(frozen=True)
class Location:
    """Observer on the Earth's surface.

    Latitude is positive north, longitude positive east, elevation in
    meters above the reference ellipsoid.
    """

    lat: float
    lon: float
    elevation: float = 0.0

    def __post_init__(self):
        _check_range("latitude", self.lat, LATITUDE_RANGE)
        _check_range("longitude", self.lon, LONGITUDE_RANGE)
        if not math.isfinite(self.elevation):
            raise InvalidLocationError(
                "elevation", self.elevation, (-math.inf, math.inf)
            )


def _check_range(field: str, value: float, valid_range: tuple[float, float]) -> None:
    low, high = valid_range
    if not math.isfinite(value) or not (low <= value <= high):
        raise InvalidLocationError(field, value, valid_range)
