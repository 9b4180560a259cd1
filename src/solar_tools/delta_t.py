"""Delta T (ΔT = TT - UT) from NASA's polynomial expressions.

Earth's rotation is irregular, so Terrestrial Time drifts from UT. NASA gives
piecewise polynomials covering -1999 to +3000 with a parabolic extrapolation
outside that range:

    https://eclipse.gsfc.nasa.gov/SEcat5/deltatpoly.html

All functions take the decimal year y = year + (month - 0.5) / 12 and return
seconds.
"""

from __future__ import annotations

from collections.abc import Callable

from solar_tools.models import CivilDate
from solar_tools.time_utils import decimal_year_from_date


def _long_term(year: float) -> float:
    """Parabola used before -500 and after 2150."""
    u = (year - 1820.0) / 100.0
    return -20.0 + 32.0 * u**2


def _bc500_to_ad500(year: float) -> float:
    u = year / 100.0
    return (
        10583.6
        - 1014.41 * u
        + 33.78311 * u**2
        - 5.952053 * u**3
        - 0.1798452 * u**4
        + 0.022174192 * u**5
        + 0.0090316521 * u**6
    )


def _ad500_to_ad1600(year: float) -> float:
    u = (year - 1000.0) / 100.0
    return (
        1574.2
        - 556.01 * u
        + 71.23472 * u**2
        + 0.319781 * u**3
        - 0.8503463 * u**4
        - 0.005050998 * u**5
        + 0.0083572073 * u**6
    )


def _ad1600_to_ad1700(year: float) -> float:
    t = year - 1600.0
    return 120.0 - 0.9808 * t - 0.01532 * t**2 + t**3 / 7129.0


def _ad1700_to_ad1800(year: float) -> float:
    t = year - 1700.0
    return 8.83 + 0.1603 * t - 0.0059285 * t**2 + 0.00013336 * t**3 - t**4 / 1_174_000.0


def _ad1800_to_ad1860(year: float) -> float:
    t = year - 1800.0
    return (
        13.72
        - 0.332447 * t
        + 0.0068612 * t**2
        + 0.0041116 * t**3
        - 0.00037436 * t**4
        + 0.0000121272 * t**5
        - 0.0000001699 * t**6
        + 0.000000000875 * t**7
    )


def _ad1860_to_ad1900(year: float) -> float:
    t = year - 1860.0
    return (
        7.62
        + 0.5737 * t
        - 0.251754 * t**2
        + 0.01680668 * t**3
        - 0.0004473624 * t**4
        + t**5 / 233_174.0
    )


def _ad1900_to_ad1920(year: float) -> float:
    t = year - 1900.0
    return -2.79 + 1.494119 * t - 0.0598939 * t**2 + 0.0061966 * t**3 - 0.000197 * t**4


def _ad1920_to_ad1941(year: float) -> float:
    t = year - 1920.0
    return 21.20 + 0.84493 * t - 0.076100 * t**2 + 0.0020936 * t**3


def _ad1941_to_ad1961(year: float) -> float:
    t = year - 1950.0
    return 29.07 + 0.407 * t - t**2 / 233.0 + t**3 / 2547.0


def _ad1961_to_ad1986(year: float) -> float:
    t = year - 1975.0
    return 45.45 + 1.067 * t - t**2 / 260.0 - t**3 / 718.0


def _ad1986_to_ad2005(year: float) -> float:
    t = year - 2000.0
    return (
        63.86
        + 0.3345 * t
        - 0.060374 * t**2
        + 0.0017275 * t**3
        + 0.000651814 * t**4
        + 0.00002373599 * t**5
    )


def _ad2005_to_ad2050(year: float) -> float:
    t = year - 2000.0
    return 62.92 + 0.32217 * t + 0.005589 * t**2


def _ad2050_to_ad2150(year: float) -> float:
    return _long_term(year) - 0.5628 * (2150.0 - year)


# (exclusive upper bound of decimal year, expression)
_SEGMENTS: tuple[tuple[float, Callable[[float], float]], ...] = (
    (-500.0, _long_term),
    (500.0, _bc500_to_ad500),
    (1600.0, _ad500_to_ad1600),
    (1700.0, _ad1600_to_ad1700),
    (1800.0, _ad1700_to_ad1800),
    (1860.0, _ad1800_to_ad1860),
    (1900.0, _ad1860_to_ad1900),
    (1920.0, _ad1900_to_ad1920),
    (1941.0, _ad1920_to_ad1941),
    (1961.0, _ad1941_to_ad1961),
    (1986.0, _ad1961_to_ad1986),
    (2005.0, _ad1986_to_ad2005),
    (2050.0, _ad2005_to_ad2050),
    (2150.0, _ad2050_to_ad2150),
)


def delta_t_from_decimal_year(year: float) -> float:
    """ΔT in seconds for a decimal year."""
    for upper, expression in _SEGMENTS:
        if year < upper:
            return expression(year)
    return _long_term(year)


def delta_t_from_date(date: CivilDate) -> float:
    """ΔT in seconds for the middle of the date's month.

    Parameters:
        date: Calendar date (only year and month are used).

    Returns:
        TT - UT in seconds.
    """
    return delta_t_from_decimal_year(decimal_year_from_date(date))
