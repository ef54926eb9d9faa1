from datetime import datetime, timedelta, timezone

import pytest

from sunpos.errors import TimeParseError
from sunpos.timescale.sidereal import (
    apparent_sidereal_time,
    local_apparent_sidereal_time,
    mean_sidereal_time,
)
from sunpos.timescale.toi import TimeOfInterest


class TestTimeOfInterest:
    def test_j2000_epoch(self):
        toi = TimeOfInterest.from_time(2000, 1, 1, 12, 0, 0)
        assert toi.jd == pytest.approx(2451545.0, abs=1e-9)
        assert toi.T == pytest.approx(0.0, abs=1e-12)

    def test_known_julian_day(self):
        # Meeus example 7.a: 1957 October 4.81
        toi = TimeOfInterest.from_datetime(
            datetime(1957, 10, 4, tzinfo=timezone.utc) + timedelta(days=0.81)
        )
        assert toi.jd == pytest.approx(2436116.31, abs=1e-8)

    def test_jd0_is_previous_midnight(self):
        toi = TimeOfInterest.from_time(2020, 10, 22, 6, 15, 0)
        assert toi.jd0 == 2459144.5
        assert toi.jd0 <= toi.jd < toi.jd0 + 1

    def test_jd0_at_midnight(self):
        toi = TimeOfInterest.from_time(2020, 10, 22)
        assert toi.jd0 == toi.jd

    def test_calendar_time(self):
        time = TimeOfInterest.from_time(2020, 10, 22, 6, 15, 0).time
        assert (time.year, time.month, time.day) == (2020, 10, 22)
        assert (time.hour, time.minute, time.second) == (6, 15, 0)

    def test_calendar_time_rounds_with_carry(self):
        toi = TimeOfInterest.from_time(2020, 12, 31, 23, 59, 59.7)
        time = toi.time
        assert (time.year, time.month, time.day) == (2021, 1, 1)
        assert (time.hour, time.minute, time.second) == (0, 0, 0)

    def test_datetime_round_trip(self):
        dt = datetime(2021, 3, 20, 9, 37, 12, tzinfo=timezone.utc)
        result = TimeOfInterest.from_datetime(dt).datetime
        assert abs(result - dt) < timedelta(milliseconds=1)
        assert result.tzinfo == timezone.utc

    def test_naive_datetime_treated_as_utc(self):
        naive = TimeOfInterest.from_datetime(datetime(2020, 1, 1, 12))
        aware = TimeOfInterest.from_datetime(datetime(2020, 1, 1, 12, tzinfo=timezone.utc))
        assert naive.jd == aware.jd

    def test_offset_datetime_converted_to_utc(self):
        plus_two = timezone(timedelta(hours=2))
        local = TimeOfInterest.from_datetime(datetime(2020, 1, 1, 14, tzinfo=plus_two))
        utc = TimeOfInterest.from_time(2020, 1, 1, 12)
        assert local.jd == pytest.approx(utc.jd, abs=1e-9)

    def test_from_iso_with_z_suffix(self):
        toi = TimeOfInterest.from_iso("2020-10-22T06:15:00Z")
        assert toi.jd == pytest.approx(TimeOfInterest.from_time(2020, 10, 22, 6, 15).jd)

    @pytest.mark.parametrize("bad", ["", "yesterday", "2020-13-01T00:00:00Z"])
    def test_from_iso_rejects_garbage(self, bad):
        with pytest.raises(TimeParseError):
            TimeOfInterest.from_iso(bad)

    def test_now_is_recent(self):
        before = datetime.now(timezone.utc)
        toi = TimeOfInterest.now()
        assert abs(toi.datetime - before) < timedelta(seconds=5)


class TestSiderealTime:
    def test_mean_sidereal_time_meeus_12a(self):
        # 1987 April 10, 0h UT: 13h10m46.3668s
        toi = TimeOfInterest.from_time(1987, 4, 10)
        expected = (13 + 10 / 60 + 46.3668 / 3600) * 15
        assert mean_sidereal_time(toi) == pytest.approx(expected, abs=1e-5)

    def test_apparent_sidereal_time_meeus_12a(self):
        # Apparent sidereal time the same instant: 13h10m46.1351s
        toi = TimeOfInterest.from_time(1987, 4, 10)
        expected = (13 + 10 / 60 + 46.1351 / 3600) * 15
        assert apparent_sidereal_time(toi) == pytest.approx(expected, abs=2e-5)

    def test_local_sidereal_time_adds_east_longitude(self):
        toi = TimeOfInterest.from_time(2020, 10, 22, 6, 15)
        gast = apparent_sidereal_time(toi)
        assert local_apparent_sidereal_time(toi, 13.408) == pytest.approx(
            (gast + 13.408) % 360.0
        )

    def test_sidereal_time_range(self):
        for hour in range(0, 24, 3):
            toi = TimeOfInterest.from_time(2020, 6, 1, hour)
            assert 0.0 <= apparent_sidereal_time(toi) < 360.0
            assert 0.0 <= local_apparent_sidereal_time(toi, -179.9) < 360.0
