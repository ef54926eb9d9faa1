"""Earth orbital model backed by a JPL development ephemeris through skyfield."""

import logging
from pathlib import Path
from typing import Optional

from skyfield.api import Loader
from skyfield.framelib import ecliptic_J2000_frame

from ..config.settings import get_ephemeris_path
from ..coordinates.conversions import normalize_degrees
from ..coordinates.precession import precess_ecliptic
from ..errors import EphemerisUnavailableError
from ..models.coordinates import EclipticSphericalCoordinates
from ..timescale.toi import TimeOfInterest

logger = logging.getLogger(__name__)


class SkyfieldEarth:
    """Heliocentric Earth positions from a DE ephemeris file.

    The ephemeris is opened on the first query, downloading it into the
    configured data directory if it is not there yet.
    """

    name = "skyfield"

    def __init__(self, ephemeris_path: Optional[Path] = None):
        self.ephemeris_path = Path(ephemeris_path or get_ephemeris_path())
        self._ephemeris = None
        self._timescale = None

    def _load(self):
        if self._ephemeris is None:
            loader = Loader(str(self.ephemeris_path.parent))
            try:
                self._ephemeris = loader(self.ephemeris_path.name)
            except (OSError, ValueError) as e:
                raise EphemerisUnavailableError(str(self.ephemeris_path), str(e))
            self._timescale = loader.timescale(builtin=True)
            logger.info("Loaded ephemeris %s", self.ephemeris_path)
        return self._ephemeris, self._timescale

    def get_heliocentric_ecliptic_spherical_j2000_coordinates(
        self, toi: TimeOfInterest
    ) -> EclipticSphericalCoordinates:
        ephemeris, ts = self._load()
        # Julian Days are used as dynamical time throughout, as for VSOP87
        t = ts.tt_jd(toi.jd)
        position = (ephemeris["earth"] - ephemeris["sun"]).at(t)
        lat, lon, distance = position.frame_latlon(ecliptic_J2000_frame)
        return EclipticSphericalCoordinates(
            lon=normalize_degrees(float(lon.degrees)),
            lat=float(lat.degrees),
            radius_vector=float(distance.au),
        )

    def get_heliocentric_ecliptic_spherical_date_coordinates(
        self, toi: TimeOfInterest
    ) -> EclipticSphericalCoordinates:
        coords = self.get_heliocentric_ecliptic_spherical_j2000_coordinates(toi)
        return precess_ecliptic(coords, from_T=0.0, to_T=toi.T)
