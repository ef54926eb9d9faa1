__version__ = "0.1.0"

from .models import Location
from .objects.sun import Sun
from .timescale.toi import TimeOfInterest

__all__ = ["Location", "Sun", "TimeOfInterest", "__version__"]
