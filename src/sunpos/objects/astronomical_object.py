"""Position and event queries shared by every body.

A concrete body supplies its heliocentric ecliptic coordinates and its
physical constants; everything else (frame changes, apparent corrections,
topocentric reduction, distances and rise/transit/set) is derived here.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..coordinates.apparent import (
    correct_effect_of_aberration,
    correct_effect_of_nutation,
    correct_effect_of_refraction,
)
from ..coordinates.conversions import (
    ecliptic_to_equatorial,
    equatorial_to_horizontal,
    equatorial_to_topocentric,
    heliocentric_to_geocentric,
    spherical_to_rectangular,
)
from ..coordinates.nutation import true_obliquity
from ..earth.provider import EarthModel, get_earth_model
from ..models.bodies import Body
from ..models.coordinates import (
    EclipticSphericalCoordinates,
    EquatorialSphericalCoordinates,
    HorizontalCoordinates,
    RectangularCoordinates,
)
from ..models.location import Location
from ..observation.calculator import (
    get_angular_diameter,
    get_distance,
    get_light_time,
)
from ..solver.rise_set_transit import (
    EventSolution,
    solve_rise,
    solve_set,
    solve_transit,
)
from ..timescale.sidereal import local_apparent_sidereal_time
from ..timescale.toi import TimeOfInterest


class AstronomicalObject(ABC):
    """Base class for a body seen from the Earth.

    Subclasses must set ``body`` and accept ``(toi, earth=...)`` as their
    constructor arguments: ``at()`` rebuilds the object that way to sample
    positions on neighbouring days for rise, transit and set.
    """

    body: Body

    def __init__(
        self,
        toi: Optional[TimeOfInterest] = None,
        name: str = "",
        earth: Optional[EarthModel] = None,
    ):
        self.toi = toi or TimeOfInterest.now()
        self.name = name
        self.earth = earth or get_earth_model()

    @property
    def T(self) -> float:
        return self.toi.T

    @property
    def jd(self) -> float:
        return self.toi.jd

    @property
    def jd0(self) -> float:
        return self.toi.jd0

    def at(self, toi: TimeOfInterest) -> "AstronomicalObject":
        """The same body, sharing this object's Earth model, at another instant."""
        return type(self)(toi, earth=self.earth)

    # Heliocentric

    @abstractmethod
    def get_heliocentric_ecliptic_spherical_j2000_coordinates(
        self,
    ) -> EclipticSphericalCoordinates: ...

    @abstractmethod
    def get_heliocentric_ecliptic_spherical_date_coordinates(
        self,
    ) -> EclipticSphericalCoordinates: ...

    def get_heliocentric_ecliptic_rectangular_j2000_coordinates(
        self,
    ) -> RectangularCoordinates:
        coords = self.get_heliocentric_ecliptic_spherical_j2000_coordinates()
        return spherical_to_rectangular(coords)

    def get_heliocentric_ecliptic_rectangular_date_coordinates(
        self,
    ) -> RectangularCoordinates:
        coords = self.get_heliocentric_ecliptic_spherical_date_coordinates()
        return spherical_to_rectangular(coords)

    # Geocentric

    def get_geocentric_ecliptic_spherical_j2000_coordinates(
        self,
    ) -> EclipticSphericalCoordinates:
        body = self.get_heliocentric_ecliptic_spherical_j2000_coordinates()
        earth = self.earth.get_heliocentric_ecliptic_spherical_j2000_coordinates(
            self.toi
        )
        return heliocentric_to_geocentric(body, earth)

    def get_geocentric_ecliptic_spherical_date_coordinates(
        self,
    ) -> EclipticSphericalCoordinates:
        body = self.get_heliocentric_ecliptic_spherical_date_coordinates()
        earth = self.earth.get_heliocentric_ecliptic_spherical_date_coordinates(
            self.toi
        )
        return heliocentric_to_geocentric(body, earth)

    def get_geocentric_ecliptic_rectangular_j2000_coordinates(
        self,
    ) -> RectangularCoordinates:
        coords = self.get_geocentric_ecliptic_spherical_j2000_coordinates()
        return spherical_to_rectangular(coords)

    def get_geocentric_ecliptic_rectangular_date_coordinates(
        self,
    ) -> RectangularCoordinates:
        coords = self.get_geocentric_ecliptic_spherical_date_coordinates()
        return spherical_to_rectangular(coords)

    def get_geocentric_equatorial_spherical_j2000_coordinates(
        self,
    ) -> EquatorialSphericalCoordinates:
        coords = self.get_geocentric_ecliptic_spherical_j2000_coordinates()
        return ecliptic_to_equatorial(coords, true_obliquity(self.T))

    def get_geocentric_equatorial_spherical_date_coordinates(
        self,
    ) -> EquatorialSphericalCoordinates:
        coords = self.get_geocentric_ecliptic_spherical_date_coordinates()
        return ecliptic_to_equatorial(coords, true_obliquity(self.T))

    # Apparent geocentric

    def get_apparent_geocentric_ecliptic_spherical_coordinates(
        self,
    ) -> EclipticSphericalCoordinates:
        coords = self.get_geocentric_ecliptic_spherical_date_coordinates()
        coords = correct_effect_of_aberration(coords, self.T)
        coords = correct_effect_of_nutation(coords, self.T)
        return coords

    def get_apparent_geocentric_ecliptic_rectangular_coordinates(
        self,
    ) -> RectangularCoordinates:
        coords = self.get_apparent_geocentric_ecliptic_spherical_coordinates()
        return spherical_to_rectangular(coords)

    def get_apparent_geocentric_equatorial_spherical_coordinates(
        self,
    ) -> EquatorialSphericalCoordinates:
        coords = self.get_apparent_geocentric_ecliptic_spherical_coordinates()
        return ecliptic_to_equatorial(coords, true_obliquity(self.T))

    # Topocentric

    def get_topocentric_equatorial_spherical_coordinates(
        self, location: Location
    ) -> EquatorialSphericalCoordinates:
        coords = self.get_apparent_geocentric_equatorial_spherical_coordinates()
        lst = local_apparent_sidereal_time(self.toi, location.lon)
        return equatorial_to_topocentric(coords, location, lst)

    def get_topocentric_horizontal_coordinates(
        self, location: Location
    ) -> HorizontalCoordinates:
        """Horizontal position from the apparent geocentric direction.

        Azimuth and altitude are not reduced for parallax; the radius vector
        is the topocentric distance.
        """
        coords = self.get_apparent_geocentric_equatorial_spherical_coordinates()
        lst = local_apparent_sidereal_time(self.toi, location.lon)
        horizontal = equatorial_to_horizontal(coords, location, lst)
        topocentric = self.get_topocentric_equatorial_spherical_coordinates(location)
        return HorizontalCoordinates(
            azimuth=horizontal.azimuth,
            altitude=horizontal.altitude,
            radius_vector=topocentric.radius_vector,
        )

    def get_apparent_topocentric_horizontal_coordinates(
        self, location: Location
    ) -> HorizontalCoordinates:
        coords = self.get_topocentric_horizontal_coordinates(location)
        return correct_effect_of_refraction(coords)

    # Distance and appearance

    def get_distance_to_earth(self) -> float:
        coords = self.get_geocentric_ecliptic_spherical_date_coordinates()
        return get_distance(coords.radius_vector)

    def get_apparent_distance_to_earth(self) -> float:
        coords = self.get_apparent_geocentric_ecliptic_spherical_coordinates()
        return get_distance(coords.radius_vector)

    def get_topocentric_distance_to_earth(self, location: Location) -> float:
        coords = self.get_topocentric_equatorial_spherical_coordinates(location)
        return get_distance(coords.radius_vector)

    def get_light_time(self) -> float:
        return get_light_time(self.get_distance_to_earth())

    def get_angular_diameter(self) -> float:
        distance = self.get_apparent_distance_to_earth()
        return get_angular_diameter(distance, self.body.diameter_km)

    def get_topocentric_angular_diameter(self, location: Location) -> float:
        distance = self.get_topocentric_distance_to_earth(location)
        return get_angular_diameter(distance, self.body.diameter_km)

    def get_apparent_magnitude(self) -> float:
        return self.body.apparent_magnitude

    def get_topocentric_apparent_magnitude(
        self, location: Optional[Location] = None
    ) -> float:
        return self.body.apparent_magnitude

    # Rise, transit and set

    def _apparent_position_at(self, jd: float) -> EquatorialSphericalCoordinates:
        toi = TimeOfInterest.from_julian_day(jd)
        return self.at(toi).get_apparent_geocentric_equatorial_spherical_coordinates()

    def solve_event(
        self,
        event: str,
        location: Location,
        standard_altitude: Optional[float] = None,
    ) -> EventSolution:
        """Solve for 'rise', 'transit' or 'set' on this object's UT date.

        The returned EventSolution reports whether the refinement converged.

        Raises:
            NoEventError: If the body does not rise or set that day
            ValueError: If event is not recognized
        """
        if standard_altitude is None:
            standard_altitude = self.body.standard_altitude

        if event == "transit":
            return solve_transit(self._apparent_position_at, location, self.jd0)
        if event == "rise":
            return solve_rise(
                self._apparent_position_at, location, self.jd0, standard_altitude
            )
        if event == "set":
            return solve_set(
                self._apparent_position_at, location, self.jd0, standard_altitude
            )
        raise ValueError(f"Unknown event: {event}")

    def get_transit(self, location: Location) -> TimeOfInterest:
        return self.solve_event("transit", location).toi

    def get_rise(
        self, location: Location, standard_altitude: Optional[float] = None
    ) -> TimeOfInterest:
        return self.solve_event("rise", location, standard_altitude).toi

    def get_rise_upper_limb(self, location: Location) -> TimeOfInterest:
        return self.get_rise(location, self.body.upper_limb_standard_altitude)

    def get_set(
        self, location: Location, standard_altitude: Optional[float] = None
    ) -> TimeOfInterest:
        return self.solve_event("set", location, standard_altitude).toi

    def get_set_upper_limb(self, location: Location) -> TimeOfInterest:
        return self.get_set(location, self.body.upper_limb_standard_altitude)
