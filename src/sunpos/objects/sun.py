from typing import Optional

from ..coordinates.conversions import earth_to_sun
from ..earth.provider import EarthModel
from ..models.bodies import BODIES
from ..models.coordinates import EclipticSphericalCoordinates
from ..timescale.toi import TimeOfInterest
from .astronomical_object import AstronomicalObject


class Sun(AstronomicalObject):
    """The Sun as seen from the Earth.

    The Sun sits at the origin of the heliocentric frame, so its geocentric
    position is the Earth's heliocentric position turned around.
    """

    body = BODIES["sun"]

    def __init__(
        self,
        toi: Optional[TimeOfInterest] = None,
        earth: Optional[EarthModel] = None,
    ):
        super().__init__(toi, "sun", earth)

    def get_heliocentric_ecliptic_spherical_j2000_coordinates(
        self,
    ) -> EclipticSphericalCoordinates:
        return EclipticSphericalCoordinates(lon=0.0, lat=0.0, radius_vector=0.0)

    def get_heliocentric_ecliptic_spherical_date_coordinates(
        self,
    ) -> EclipticSphericalCoordinates:
        return EclipticSphericalCoordinates(lon=0.0, lat=0.0, radius_vector=0.0)

    def get_geocentric_ecliptic_spherical_j2000_coordinates(
        self,
    ) -> EclipticSphericalCoordinates:
        coords = self.earth.get_heliocentric_ecliptic_spherical_j2000_coordinates(
            self.toi
        )
        return earth_to_sun(coords)

    def get_geocentric_ecliptic_spherical_date_coordinates(
        self,
    ) -> EclipticSphericalCoordinates:
        coords = self.earth.get_heliocentric_ecliptic_spherical_date_coordinates(
            self.toi
        )
        return earth_to_sun(coords)
