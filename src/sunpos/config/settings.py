"""
Project settings (constants + small helpers).
Units: degrees, days, kilometers (km), astronomical units (AU), seconds (s).
"""
from __future__ import annotations

import os
from pathlib import Path

# Epochs
J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

# Physical constants
AU_KM = 149597870.7
SPEED_OF_LIGHT_KM_S = 299792.458
EARTH_EQUATORIAL_RADIUS_KM = 6378.14
EARTH_AXIS_RATIO = 0.99664719  # polar / equatorial radius

# Standard altitudes for rise and set (degrees)
STANDARD_ALTITUDE_STARS_PLANETS_REFRACTION = -0.5667
STANDARD_ALTITUDE_SUN_CENTER_REFRACTION = -0.5833
STANDARD_ALTITUDE_SUN_UPPER_LIMB_REFRACTION = -0.8333

# Rise/set/transit solver
SOLVER_MAX_ITERATIONS = 5
SOLVER_TOLERANCE_DAYS = 1e-5
SOLVER_MAX_CORRECTION_DAYS = 0.1
SIDEREAL_DEGREES_PER_DAY = 360.985647

# Atmosphere at the observer (refraction)
STANDARD_PRESSURE_MBAR = 1010.0
STANDARD_TEMPERATURE_C = 10.0

# Earth orbital model selection
DEFAULT_EARTH_MODEL = "vsop87"
DEFAULT_EPHEMERIS = "de421.bsp"
DEFAULT_DATA_DIR = Path.home() / ".sunpos"
DEFAULT_LOG_LEVEL = "WARNING"


def get_earth_model_name() -> str:
    return os.environ.get("SUNPOS_EARTH_MODEL", DEFAULT_EARTH_MODEL).strip().lower()


def get_data_dir() -> Path:
    return Path(os.environ.get("SUNPOS_DATA_DIR", str(DEFAULT_DATA_DIR))).expanduser()


def get_ephemeris_path() -> Path:
    """Location of the JPL ephemeris used by the skyfield Earth model."""
    return get_data_dir() / os.environ.get("SUNPOS_EPHEMERIS", DEFAULT_EPHEMERIS)


def get_log_level() -> str:
    return os.environ.get("SUNPOS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
