"""Tests for the Sun's position, the Kepler solver and the equation of time."""

from __future__ import annotations

import logging
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from solar_tools import sun
from solar_tools.models import CivilDate, CivilDateTime
from solar_tools.time_utils import (
    add_days,
    gst_from_ut,
    julian_day,
    julian_day_from_ut,
    time_from_decimal_hours,
)


def test_solve_kepler_reference_value() -> None:
    """M = 3.527781 rad, e = 0.016713 gives E = 3.521582 rad."""
    ecc_anomaly = sun.solve_kepler(3.527781, 0.016713)
    assert ecc_anomaly == pytest.approx(3.521582, abs=2e-6)
    assert ecc_anomaly - 0.016713 * math.sin(ecc_anomaly) == pytest.approx(3.527781, abs=1e-9)


@pytest.mark.parametrize('degrees', range(0, 360))
def test_solve_kepler_converges_for_solar_eccentricity(degrees: int) -> None:
    """Newton iteration converges quickly for every mean anomaly."""
    mean_anomaly = math.radians(degrees)
    ecc_anomaly = sun.solve_kepler(mean_anomaly, 0.0167, max_iterations=10)
    assert ecc_anomaly - 0.0167 * math.sin(ecc_anomaly) == pytest.approx(mean_anomaly, abs=1e-9)


def test_solve_kepler_raises_when_not_converged(caplog: pytest.LogCaptureFixture) -> None:
    """Exceeding the iteration cap logs an error and raises RuntimeError."""
    with caplog.at_level(logging.ERROR, logger='solar_tools.sun'):
        with pytest.raises(RuntimeError, match='did not converge'):
            sun.solve_kepler(1.0, 0.0167, tolerance=0.0, max_iterations=1)
    assert any('did not converge' in r.message for r in caplog.records)


def test_true_anomaly_at_perigee_and_apogee() -> None:
    """True anomaly equals the eccentric anomaly at 0 and 180 degrees."""
    assert sun.true_anomaly(0.0, 0.0167) == pytest.approx(0.0)
    assert abs(sun.true_anomaly(math.pi, 0.0167)) == pytest.approx(180.0)


def test_orbital_elements_at_epoch() -> None:
    """At 1900 January 0.5 the elements equal their constant terms."""
    mean_longitude, perigee, eccentricity = sun.sun_orbital_elements(2415020.0)
    assert sun.centuries_since_j1900(2415020.0) == 0.0
    assert mean_longitude == pytest.approx(279.6966778)
    assert perigee == pytest.approx(281.2208444)
    assert eccentricity == pytest.approx(0.01675104)


def test_ecliptic_position_of_the_sun_in_may() -> None:
    """Early May puts the Sun about 45 degrees along the ecliptic."""
    coord = sun.ecliptic_position_of_the_sun(CivilDate(2022, 5, 6))
    assert 45.0 < coord.lng < 46.0
    assert coord.lat == 0.0


def test_ecliptic_longitude_advances_daily() -> None:
    """Longitude stays in [0, 360) and advances about a degree a day."""
    start = julian_day(CivilDate(2021, 1, 1))
    previous, _ = sun.sun_longitude_and_mean_anomaly(start)
    for offset in range(1, 366):
        lng, mean_anomaly = sun.sun_longitude_and_mean_anomaly(start + offset)
        assert 0.0 <= lng < 360.0
        assert 0.0 <= mean_anomaly < 360.0
        assert 0.9 < (lng - previous) % 360.0 < 1.1
        previous = lng


def test_equatorial_position_of_the_sun() -> None:
    """1988 July 27 0h: alpha 8h26m04s, delta +19 deg 12.7'."""
    coord = sun.equatorial_position_of_the_sun(CivilDate(1988, 7, 27))
    assert coord.asc.to_decimal() == pytest.approx(8.43435, abs=2e-3)
    assert coord.dec.to_decimal() == pytest.approx(19.2120, abs=5e-3)


def test_equation_of_time_late_july() -> None:
    """Late July sundials run about six and a half minutes slow."""
    eot, overflow = sun.equation_of_time_from_ut(CivilDateTime(1980, 7, 27, 12))
    assert -0.112 < eot.to_decimal() < -0.102
    assert eot.sign == -1
    assert overflow == 0


def test_equation_of_time_early_november() -> None:
    """Early November sundials run about sixteen minutes fast."""
    eot, _overflow = sun.equation_of_time_from_ut(CivilDateTime(2021, 11, 3, 12))
    assert 16.0 < eot.to_decimal() * 60.0 < 16.8


def test_apparent_time_overflows_into_next_day() -> None:
    """23:55 UT on 3 November is already past apparent midnight."""
    ut = CivilDateTime(2021, 11, 3, 23, 55)
    eot, overflow = sun.equation_of_time_from_ut(ut)
    assert overflow == 1
    assert eot.to_decimal() > 0

    time, days = sun.apparent_solar_time_from_ut(ut)
    assert days == 1
    assert (time.whole, 10 <= time.minute <= 12) == (0, True)

    apparent = sun.apparent_datetime_from_ut(ut)
    assert (apparent.year, apparent.month, apparent.day) == (2021, 11, 4)


def test_apparent_time_overflows_into_previous_day() -> None:
    """Shortly after midnight in February apparent time is still the day before."""
    ut = CivilDateTime(2021, 2, 11, 0, 5)
    _eot, overflow = sun.equation_of_time_from_ut(ut)
    assert overflow == -1

    apparent = sun.apparent_datetime_from_ut(ut)
    assert (apparent.year, apparent.month, apparent.day) == (2021, 2, 10)
    assert apparent.hour == 23


def test_apparent_time_from_local() -> None:
    """09:00 at UTC+9 on New Year's Day is 23:56 apparent time the day before."""
    apparent = sun.apparent_time_from_local(CivilDateTime(2021, 1, 1, 9, 0), 9.0)
    assert (apparent.year, apparent.month, apparent.day) == (2020, 12, 31)
    assert apparent.hour == 23
    assert 55 <= apparent.minute <= 57


@given(
    st.integers(min_value=0, max_value=366 * 200),
    st.floats(min_value=0.0, max_value=86399.0, allow_nan=False, allow_infinity=False),
)
def test_apparent_datetime_offsets_by_equation_of_time(days: int, seconds: float) -> None:
    """Apparent date-time differs from UT by exactly the equation of time."""
    ut = CivilDateTime.combine(
        add_days(CivilDate(1900, 1, 1), days), time_from_decimal_hours(seconds / 3600.0)
    )
    eot, _overflow = sun.equation_of_time_from_ut(ut)
    apparent = sun.apparent_datetime_from_ut(ut)
    shift = julian_day_from_ut(apparent) - julian_day_from_ut(ut)
    assert shift == pytest.approx(eot.to_decimal() / 24.0, abs=1e-8)


def test_mean_time_from_apparent_inverts_apparent_time() -> None:
    """Mean time recovered from apparent time matches the starting UT."""
    for ut in (
        CivilDateTime(2021, 11, 3, 23, 55),
        CivilDateTime(2021, 2, 11, 0, 5),
        CivilDateTime(1980, 7, 27, 12, 0),
    ):
        apparent = sun.apparent_datetime_from_ut(ut)
        mean = sun.mean_time_from_apparent(apparent)
        assert julian_day_from_ut(mean) == pytest.approx(julian_day_from_ut(ut), abs=1e-6)


def test_equation_of_time_from_gst_matches_ut() -> None:
    """The same instant expressed as GST gives the same equation of time."""
    ut = CivilDateTime(1980, 7, 27, 12, 0)
    gst = CivilDateTime.combine(ut.date, gst_from_ut(ut))
    from_gst, _ = sun.equation_of_time_from_gst(gst)
    from_ut, _ = sun.equation_of_time_from_ut(ut)
    assert from_gst.to_decimal() == pytest.approx(from_ut.to_decimal(), abs=1e-6)
