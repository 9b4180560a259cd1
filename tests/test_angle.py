"""Tests for Angle values, carry_over and calibrate."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from solar_tools.angle import (
    Angle,
    AngleUnit,
    calibrate,
    carry_over,
    normalize_angle,
    reduce_degrees,
)


def test_carry_over_borrows_for_negative_values() -> None:
    """Negative values leave a non-negative remainder and a negative quotient."""
    assert carry_over(-59, 60) == (1, -1)
    assert carry_over(-60, 60) == (0, -1)
    assert carry_over(125, 60) == (5, 2)


def test_calibrate_wraps_past_midnight() -> None:
    """25 h calibrates to 1 h and reports one day of overflow."""
    angle, overflow = calibrate(Angle.hms(25, 0, 0))
    assert (angle.whole, angle.minute, angle.second) == (1, 0, 0)
    assert overflow == 1


def test_calibrate_wraps_before_midnight() -> None:
    """-1 h calibrates to 23 h on the previous day."""
    angle, overflow = calibrate(Angle.hms(-1, 0, 0))
    assert (angle.whole, angle.minute, angle.second) == (23, 0, 0)
    assert overflow == -1


def test_calibrate_mixed_out_of_range_components() -> None:
    """23:61:-2 folds into 00:00:58 the next day."""
    angle, overflow = calibrate(Angle.hms(23, 61, -2))
    assert (angle.whole, angle.minute) == (0, 0)
    assert angle.second == pytest.approx(58.0)
    assert overflow == 1


def test_calibrate_half_hour_before_midnight() -> None:
    """-0.5 h is 23h30m on the previous day."""
    angle, overflow = calibrate(Angle.hms(-0.5))
    assert (angle.whole, angle.minute, angle.second) == (23, 30, 0)
    assert overflow == -1


def test_calibrate_carries_sixty_and_more() -> None:
    """75 seconds and 60 minutes carry into the next unit."""
    angle, overflow = calibrate(Angle.hms(10, 60, 75))
    assert (angle.whole, angle.minute) == (11, 1)
    assert angle.second == pytest.approx(15.0)
    assert overflow == 0


def test_calibrate_zero_and_full_revolution() -> None:
    """Zero stays zero; exactly 24 h is zero with one day of overflow."""
    assert calibrate(Angle.hms(0)) == (Angle.hms(0), 0)
    angle, overflow = calibrate(Angle.hms(24))
    assert angle.to_decimal() == 0.0
    assert overflow == 1


def test_calibrate_is_idempotent() -> None:
    """Calibrating a calibrated angle changes nothing."""
    once, _ = calibrate(Angle.hms(-3, 125, 7.5))
    twice, overflow = calibrate(once)
    assert twice == once
    assert overflow == 0


def test_calibrate_degrees_uses_full_circle() -> None:
    """Degree angles wrap at 360 rather than 24."""
    angle, overflow = calibrate(Angle.dms(370, 0, 0))
    assert angle.unit is AngleUnit.DEGREES
    assert angle.whole == 10
    assert overflow == 1

    angle, overflow = calibrate(Angle.dms(23, 0, 0))
    assert angle.whole == 23
    assert overflow == 0


def test_calibrate_negative_sign_angle() -> None:
    """An explicit negative sign wraps like the equivalent negative value."""
    angle, overflow = calibrate(Angle.hms(0, 30, 0, sign=-1))
    assert (angle.whole, angle.minute) == (23, 30)
    assert angle.sign == 1
    assert overflow == -1


@given(st.floats(min_value=-1.0e4, max_value=1.0e4, allow_nan=False, allow_infinity=False))
def test_calibrate_preserves_value(value: float) -> None:
    """Calibrated value plus overflow days reproduces the input."""
    angle, overflow = calibrate(Angle.hms(value))
    assert 0 <= angle.whole < 24
    assert 0 <= angle.minute < 60
    assert 0 <= angle.second < 60
    assert angle.to_decimal() + overflow * 24.0 == pytest.approx(value, abs=1e-6)


@given(
    st.floats(min_value=-1.0e6, max_value=1.0e6, allow_nan=False, allow_infinity=False),
    st.floats(min_value=-1.0e4, max_value=1.0e4, allow_nan=False, allow_infinity=False),
    st.floats(min_value=-1.0e4, max_value=1.0e4, allow_nan=False, allow_infinity=False),
    st.sampled_from([1, -1]),
    st.sampled_from(list(AngleUnit)),
)
def test_calibrate_any_components(
    whole: float, minute: float, second: float, sign: int, unit: AngleUnit
) -> None:
    """Negative and out-of-range components in either unit calibrate consistently."""
    raw = Angle(whole, minute, second, unit, sign)
    angle, overflow = calibrate(raw)
    assert angle.unit is unit
    assert angle.sign == 1
    assert 0 <= angle.whole < unit.revolution
    assert 0 <= angle.minute < 60
    assert 0 <= angle.second < 60
    assert angle.to_decimal() + overflow * unit.revolution == pytest.approx(
        raw.to_decimal(), rel=1e-12, abs=1e-6
    )

    again, again_overflow = calibrate(angle)
    assert again_overflow == 0
    assert again.to_decimal() == pytest.approx(angle.to_decimal(), abs=1e-9)


def test_reduce_degrees() -> None:
    """Degrees reduce into [0, 360)."""
    assert reduce_degrees(-30.0) == pytest.approx(330.0)
    assert reduce_degrees(720.5) == pytest.approx(0.5)
    assert reduce_degrees(360.0) == 0.0


def test_from_decimal_keeps_sign_separate() -> None:
    """Negative decimals keep non-negative components and sign -1."""
    angle = Angle.from_decimal(-1.5)
    assert angle.sign == -1
    assert (angle.whole, angle.minute) == (1, 30)
    assert angle.second == pytest.approx(0.0)
    assert angle.to_decimal() == pytest.approx(-1.5)


def test_from_decimal_does_not_wrap() -> None:
    """Values beyond one revolution stay intact."""
    angle = Angle.from_decimal(30.25)
    assert angle.whole == 30
    assert angle.minute == 15


def test_components_add_algebraically() -> None:
    """Out-of-range and negative components contribute with their own sign."""
    assert Angle.hms(1, -30, 0).to_decimal() == pytest.approx(0.5)
    assert Angle.dms(8, 13, 30, sign=-1).to_decimal() == pytest.approx(-8.225)


def test_to_unit_and_radians() -> None:
    """Hours convert to degrees at 15 per hour."""
    angle = Angle.hms(1, 30, 0)
    assert angle.to_unit(AngleUnit.DEGREES).to_decimal() == pytest.approx(22.5)
    assert angle.to_unit(AngleUnit.HOURS) is angle
    assert Angle.hms(6).to_radians() == pytest.approx(1.5707963267948966)
    assert Angle.dms(22, 30).to_unit(AngleUnit.HOURS).to_decimal() == pytest.approx(1.5)


def test_invalid_sign_rejected() -> None:
    """Sign must be +1 or -1."""
    with pytest.raises(ValueError, match='sign'):
        Angle(1, 0, 0, AngleUnit.HOURS, 0)


def test_normalize_angle_centres_on_zero() -> None:
    """normalize_angle returns values in (-max/2, max/2]."""
    assert normalize_angle(350.0, 360.0) == pytest.approx(-10.0)
    assert normalize_angle(180.0, 360.0) == pytest.approx(180.0)
    assert normalize_angle(-180.0, 360.0) == pytest.approx(180.0)
    assert normalize_angle(-725.0, 360.0) == pytest.approx(-5.0)
    assert normalize_angle(13.0, 24.0) == pytest.approx(-11.0)
