import pytest
from unittest.mock import patch

from sunpos.errors import NoEventError
from sunpos.main import (
    build_report,
    format_event,
    format_utc,
    main,
    parse_args,
    report_position,
)
from sunpos.models import Location
from sunpos.objects.sun import Sun
from sunpos.timescale.toi import TimeOfInterest

BERLIN = ["--utc-time", "2020-10-22T06:15:00Z", "--lat", "52.519", "--lon", "13.408"]


def test_parse_args():
    args = parse_args(BERLIN + ["--elevation", "34", "--earth-model", "vsop87"])
    assert args.utc_time == "2020-10-22T06:15:00Z"
    assert args.lat == 52.519
    assert args.lon == 13.408
    assert args.elevation == 34.0
    assert args.earth_model == "vsop87"
    assert args.verbose is False


def test_parse_args_defaults():
    args = parse_args(["--lat", "0", "--lon", "0"])
    assert args.utc_time.endswith("Z")
    assert args.elevation == 0.0
    assert args.earth_model is None


def test_parse_args_requires_location():
    with pytest.raises(SystemExit):
        parse_args(["--utc-time", "2020-10-22T06:15:00Z"])


def test_parse_args_rejects_unknown_model():
    with pytest.raises(SystemExit):
        parse_args(BERLIN + ["--earth-model", "ptolemy"])


def test_report_position_success(capsys):
    exit_code = report_position("2020-10-22T06:15:00Z", 52.519, 13.408, earth_model="vsop87")

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Sun at 2020-10-22 06:15:00 UTC" in out
    assert "Light time: 0h 8m 16.58s" in out
    assert "Transit: 2020-10-22 10:50" in out
    assert "Apparent magnitude: -26.74" in out


def test_report_position_bad_time(capsys):
    exit_code = report_position("not-a-time", 52.519, 13.408)

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Invalid UTC time format" in err


def test_report_position_bad_latitude(capsys):
    exit_code = report_position("2020-10-22T06:15:00Z", 95.0, 13.408)

    assert exit_code == 1
    assert "Invalid latitude" in capsys.readouterr().err


def test_report_polar_night_has_no_rise(capsys):
    exit_code = report_position("2020-12-21T12:00:00Z", 78.22, 15.65, earth_model="vsop87")

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Rise (center): no event" in out
    assert "Set (upper limb): no event" in out
    assert "Transit: 2020-12-21" in out


def test_format_utc_rounds_to_nearest_second():
    # The Julian Day for 06:15:00 lands a few microseconds before the minute
    toi = TimeOfInterest.from_time(2020, 10, 22, 6, 15, 0)
    assert format_utc(toi) == "2020-10-22 06:15:00 UTC"

    late = TimeOfInterest.from_time(2020, 12, 31, 23, 59, 59.6)
    assert format_utc(late) == "2021-01-01 00:00:00 UTC"


def test_format_event_no_event():
    sun = Sun(TimeOfInterest.from_time(2020, 10, 22))
    with patch.object(Sun, "get_rise", side_effect=NoEventError("rise", sun.jd0, 89.0, 2.0)):
        assert format_event(sun, "get_rise", Location(lat=89.0, lon=0.0)) == "no event"


def test_build_report_lists_every_event():
    sun = Sun(TimeOfInterest.from_time(2020, 10, 22, 6, 15))
    lines = build_report(sun, Location(lat=52.519, lon=13.408))
    events = lines[lines.index("Events:") + 1 :]
    assert len(events) == 5


@patch("sunpos.main.report_position", return_value=0)
def test_main_exits_with_report_code(mock_report):
    with pytest.raises(SystemExit) as exc_info:
        main(BERLIN + ["--verbose"])

    assert exc_info.value.code == 0
    mock_report.assert_called_once_with(
        utc_time="2020-10-22T06:15:00Z",
        lat=52.519,
        lon=13.408,
        elevation=0.0,
        earth_model=None,
    )


@patch("sunpos.main.report_position", return_value=1)
def test_main_propagates_failure(mock_report):
    with pytest.raises(SystemExit) as exc_info:
        main(BERLIN)

    assert exc_info.value.code == 1
