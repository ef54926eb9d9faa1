import pytest

from sunpos.coordinates.conversions import normalize_180
from sunpos.errors import ConvergenceWarning, NoEventError
from sunpos.models import EquatorialSphericalCoordinates, Location
from sunpos.solver import rise_set_transit
from sunpos.solver.rise_set_transit import (
    get_altitude,
    get_cos_hour_angle,
    interpolate,
    sample_positions,
    solve_rise,
    solve_set,
    solve_transit,
    unwrap_right_ascensions,
)
from sunpos.timescale.sidereal import (
    apparent_sidereal_time,
    local_apparent_sidereal_time,
)
from sunpos.timescale.toi import TimeOfInterest

JD0 = 2459144.5  # 2020-10-22 0h UT


def fixed_position(right_ascension, declination):
    """A body that does not move against the stars."""

    def position(jd):
        return EquatorialSphericalCoordinates(
            right_ascension=right_ascension, declination=declination, radius_vector=1.0
        )

    return position


def hour_angle_at(jd, location, right_ascension):
    lst = local_apparent_sidereal_time(TimeOfInterest(jd), location.lon)
    return normalize_180(lst - right_ascension)


def test_interpolate_meeus_3a():
    # Distance of Mars, 1992 November 7, 8 and 9 at 0h TD
    result = interpolate(0.884226, 0.877366, 0.870531, 4.35 / 24)
    assert result == pytest.approx(0.876125, abs=1e-6)


def test_interpolate_hits_samples():
    assert interpolate(1.0, 2.0, 5.0, -1.0) == pytest.approx(1.0)
    assert interpolate(1.0, 2.0, 5.0, 0.0) == pytest.approx(2.0)
    assert interpolate(1.0, 2.0, 5.0, 1.0) == pytest.approx(5.0)


def test_unwrap_right_ascensions_across_zero():
    assert unwrap_right_ascensions(359.0, 1.0, 3.0) == pytest.approx((-1.0, 1.0, 3.0))
    assert unwrap_right_ascensions(357.0, 359.0, 1.0) == pytest.approx((357.0, 359.0, 361.0))


def test_sample_positions_interpolates_across_zero():
    def position(jd):
        ra = (359.0 + (jd - JD0)) % 360.0
        return EquatorialSphericalCoordinates(right_ascension=ra, declination=0.0, radius_vector=1.0)

    samples = sample_positions(position, JD0)
    alpha, _ = samples.at(0.5)
    assert alpha == pytest.approx(359.5)
    alpha, _ = samples.at(1.0)
    assert alpha == pytest.approx(0.0, abs=1e-9)


def test_get_altitude():
    assert get_altitude(0.0, 30.0, 30.0) == pytest.approx(90.0)
    assert get_altitude(90.0, 0.0, 0.0) == pytest.approx(0.0, abs=1e-12)


def test_get_cos_hour_angle_bounds():
    assert get_cos_hour_angle(0.0, 0.0, 0.0) == pytest.approx(0.0, abs=1e-15)
    assert get_cos_hour_angle(-5.0, 89.0, -0.5833) > 1.0
    assert get_cos_hour_angle(5.0, 89.0, -0.5833) < -1.0


class TestTransit:
    def test_fixed_body_transits_at_zero_hour_angle(self):
        location = Location(lat=52.519, lon=13.408)
        solution = solve_transit(fixed_position(150.0, 10.0), location, JD0)
        assert solution.converged
        assert JD0 <= solution.jd < JD0 + 1
        assert hour_angle_at(solution.jd, location, 150.0) == pytest.approx(0.0, abs=1e-2)

    def test_transit_moves_earlier_for_east_longitude(self):
        position = fixed_position(150.0, 10.0)
        greenwich = solve_transit(position, Location(lat=0.0, lon=0.0), JD0).jd
        east = solve_transit(position, Location(lat=0.0, lon=30.0), JD0).jd
        # 30 degrees east transits about two sidereal hours earlier
        assert (greenwich - east) * 24 == pytest.approx(2.0 * 0.99727, abs=1e-3)

    def test_transit_exists_for_circumpolar_body(self):
        solution = solve_transit(fixed_position(80.0, 85.0), Location(lat=89.0, lon=0.0), JD0)
        assert JD0 <= solution.jd < JD0 + 1


class TestRiseSet:
    def test_fixed_body_on_equator(self):
        location = Location(lat=0.0, lon=0.0)
        position = fixed_position(200.0, 0.0)
        rise = solve_rise(position, location, JD0, 0.0)
        set_ = solve_set(position, location, JD0, 0.0)

        assert rise.converged and set_.converged
        assert hour_angle_at(rise.jd, location, 200.0) == pytest.approx(-90.0, abs=1e-2)
        assert hour_angle_at(set_.jd, location, 200.0) == pytest.approx(90.0, abs=1e-2)

    def test_never_rises(self):
        location = Location(lat=89.0, lon=0.0)
        with pytest.raises(NoEventError) as exc_info:
            solve_rise(fixed_position(100.0, -5.0), location, JD0, -0.5833)
        assert exc_info.value.event == "rise"
        assert exc_info.value.cos_hour_angle > 1.0
        assert "below the horizon" in str(exc_info.value)

    def test_never_sets(self):
        location = Location(lat=89.0, lon=0.0)
        with pytest.raises(NoEventError) as exc_info:
            solve_set(fixed_position(100.0, 5.0), location, JD0, -0.5833)
        assert exc_info.value.cos_hour_angle < -1.0
        assert "above the horizon" in str(exc_info.value)

    def test_south_pole_midnight_sun(self):
        with pytest.raises(NoEventError):
            solve_rise(fixed_position(100.0, -20.0), Location(lat=-90.0, lon=0.0), JD0, -0.8333)


def test_non_convergence_warns(monkeypatch):
    monkeypatch.setattr(rise_set_transit, "SOLVER_MAX_ITERATIONS", 1)
    theta0 = apparent_sidereal_time(TimeOfInterest(JD0))
    # Transit near midday, where the first estimate is furthest off
    position = fixed_position((theta0 + 180.0) % 360.0, 0.0)

    with pytest.warns(ConvergenceWarning):
        solution = solve_transit(position, Location(lat=0.0, lon=0.0), JD0)

    assert not solution.converged
    assert solution.iterations == 1


def test_event_solution_toi():
    solution = rise_set_transit.EventSolution(jd=JD0 + 0.5, iterations=2, converged=True)
    assert solution.toi.time.hour == 12
