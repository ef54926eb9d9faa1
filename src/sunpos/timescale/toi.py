"""Time of interest: the instant every position query is evaluated at."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
import math

from ..config.settings import DAYS_PER_CENTURY, J2000
from ..errors import TimeParseError

# Add to datetime.date.toordinal() to get the Julian Day at 0h UT.
JD_OFFSET = 1721424.5
SEC_IN_DAY = 86400.0


@dataclass(frozen=True)
class CalendarTime:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


@dataclass(frozen=True)
class TimeOfInterest:
    """An instant in UT, stored as a Julian Day.

    Everything else (centuries since J2000, midnight, calendar form) is
    derived from ``jd`` so the representations cannot drift apart.
    """

    jd: float

    @property
    def T(self) -> float:
        """Julian centuries elapsed since J2000.0."""
        return (self.jd - J2000) / DAYS_PER_CENTURY

    @property
    def jd0(self) -> float:
        """Julian Day at 0h UT of the same calendar date."""
        return math.floor(self.jd - 0.5) + 0.5

    @property
    def datetime(self) -> datetime:
        days_after_origin = self.jd - JD_OFFSET
        day_number = math.floor(days_after_origin)
        microseconds = round((days_after_origin - day_number) * SEC_IN_DAY * 1e6)
        midnight = datetime.combine(
            date.fromordinal(day_number), time.min, tzinfo=timezone.utc
        )
        return midnight + timedelta(microseconds=microseconds)

    @property
    def time(self) -> CalendarTime:
        """Calendar form rounded to the nearest whole second."""
        days_after_origin = self.jd - JD_OFFSET
        day_number = math.floor(days_after_origin)
        seconds = round((days_after_origin - day_number) * SEC_IN_DAY)
        dt = datetime.combine(date.fromordinal(day_number), time.min) + timedelta(
            seconds=seconds
        )
        return CalendarTime(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    @classmethod
    def from_julian_day(cls, jd: float) -> "TimeOfInterest":
        return cls(jd=float(jd))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "TimeOfInterest":
        """Build from a datetime; naive datetimes are taken as UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        utc = dt.astimezone(timezone.utc)
        midnight = datetime.combine(utc.date(), time.min, tzinfo=timezone.utc)
        fraction = (utc - midnight) / timedelta(days=1)
        return cls(jd=JD_OFFSET + utc.date().toordinal() + fraction)

    @classmethod
    def from_time(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0,
    ) -> "TimeOfInterest":
        midnight = datetime(year, month, day, tzinfo=timezone.utc)
        offset = timedelta(hours=hour, minutes=minute, seconds=second)
        return cls.from_datetime(midnight + offset)

    @classmethod
    def from_iso(cls, utc_time: str) -> "TimeOfInterest":
        """
        Parse an ISO-8601 UTC timestamp (e.g. "2020-10-22T06:15:00Z").

        Raises:
            TimeParseError: If utc_time cannot be parsed
        """
        if utc_time.endswith("Z"):
            utc_time = utc_time[:-1] + "+00:00"

        try:
            dt = datetime.fromisoformat(utc_time)
        except ValueError:
            raise TimeParseError(utc_time)

        return cls.from_datetime(dt)

    @classmethod
    def now(cls) -> "TimeOfInterest":
        return cls.from_datetime(datetime.now(timezone.utc))
