import math

import numpy as np
import pytest

from sunpos.errors import InvalidCoordinateError, InvalidLocationError
from sunpos.models import (
    BODIES,
    EclipticSphericalCoordinates,
    EquatorialSphericalCoordinates,
    HorizontalCoordinates,
    Location,
    RectangularCoordinates,
)


def test_location_defaults_to_sea_level():
    location = Location(lat=52.519, lon=13.408)
    assert location.elevation == 0.0


@pytest.mark.parametrize("lat", [-90.0, 0.0, 90.0])
def test_location_accepts_latitude_bounds(lat):
    assert Location(lat=lat, lon=0.0).lat == lat


@pytest.mark.parametrize("lat", [-90.01, 91.0, math.nan])
def test_location_rejects_bad_latitude(lat):
    with pytest.raises(InvalidLocationError) as exc_info:
        Location(lat=lat, lon=0.0)
    assert exc_info.value.field == "latitude"


@pytest.mark.parametrize("lon", [-180.5, 181.0, math.inf])
def test_location_rejects_bad_longitude(lon):
    with pytest.raises(InvalidLocationError) as exc_info:
        Location(lat=0.0, lon=lon)
    assert exc_info.value.field == "longitude"


def test_location_rejects_non_finite_elevation():
    with pytest.raises(InvalidLocationError):
        Location(lat=0.0, lon=0.0, elevation=math.nan)


def test_location_is_immutable():
    location = Location(lat=10.0, lon=20.0)
    with pytest.raises(AttributeError):
        location.lat = 11.0


@pytest.mark.parametrize(
    "cls",
    [EclipticSphericalCoordinates, EquatorialSphericalCoordinates, HorizontalCoordinates],
)
def test_negative_radius_vector_rejected(cls):
    with pytest.raises(InvalidCoordinateError):
        cls(10.0, 20.0, -1.0)


def test_zero_radius_vector_allowed():
    coords = EclipticSphericalCoordinates(lon=0.0, lat=0.0, radius_vector=0.0)
    assert coords.radius_vector == 0.0


def test_rectangular_rejects_non_finite():
    with pytest.raises(InvalidCoordinateError):
        RectangularCoordinates(x=1.0, y=math.nan, z=0.0)


def test_rectangular_array_conversion():
    coords = RectangularCoordinates.from_array(np.array([1.0, -2.0, 0.5]))
    assert coords == RectangularCoordinates(1.0, -2.0, 0.5)
    np.testing.assert_array_equal(coords.as_array(), [1.0, -2.0, 0.5])


def test_sun_body_constants():
    sun = BODIES["sun"]
    assert sun.name == "Sun"
    assert sun.diameter_km == 1_392_684.0
    assert sun.apparent_magnitude == -26.74
    assert sun.standard_altitude == pytest.approx(-0.5833)
    assert sun.upper_limb_standard_altitude == pytest.approx(-0.8333)
    assert sun.upper_limb_standard_altitude < sun.standard_altitude
