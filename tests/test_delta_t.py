"""Tests for Delta T polynomials."""

from __future__ import annotations

import pytest

from solar_tools.delta_t import delta_t_from_date, delta_t_from_decimal_year
from solar_tools.models import CivilDate


def test_delta_t_january_1986() -> None:
    """Mid-January 1986 falls in the 1986-2005 segment."""
    assert delta_t_from_date(CivilDate(1986, 1, 1)) == pytest.approx(54.8962, abs=1e-2)


def test_delta_t_around_2000() -> None:
    """Delta T was about 64 seconds at the turn of the millennium."""
    assert delta_t_from_decimal_year(2000.0) == pytest.approx(63.86)
    assert delta_t_from_date(CivilDate(2000, 1, 15)) == pytest.approx(63.87, abs=0.05)


def test_delta_t_long_term_parabola() -> None:
    """Outside -500..2150 the long-term parabola applies."""
    assert delta_t_from_decimal_year(2200.0) == pytest.approx(442.08)
    assert delta_t_from_decimal_year(-1000.0) == pytest.approx(-20.0 + 32.0 * 28.2**2)


@pytest.mark.parametrize('boundary', [1600.0, 1700.0, 1800.0, 1860.0, 1900.0, 1920.0, 1961.0, 1986.0, 2005.0, 2150.0])
def test_delta_t_segments_join_smoothly(boundary: float) -> None:
    """Adjacent segments agree to within a few seconds at their boundaries."""
    before = delta_t_from_decimal_year(boundary - 1e-6)
    after = delta_t_from_decimal_year(boundary)
    assert after == pytest.approx(before, abs=5.0)
