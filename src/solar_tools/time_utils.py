"""Calendar and time conversions: Julian Day, time zones, sidereal time.

Formulas follow Duffett-Smith, Practical Astronomy with your Calculator
(pp. 5-21). Every conversion that folds a time of day back into a date goes
through angle.calibrate and applies the reported overflow to the date.
"""

from __future__ import annotations

import logging
import math

import julian

from solar_tools.angle import Angle, calibrate, carry_over
from solar_tools.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DAYS_PER_JULIAN_YEAR,
    DEGREES_PER_HOUR_RA,
    GREGORIAN_REFORM,
    GREGORIAN_REFORM_DAY_NUMBER,
    GST_T0_COEFFS,
    HOURS_PER_DAY,
    J2000,
    JULIAN_DAY_OFFSET,
    MJD_OFFSET,
    MONTH_FACTOR,
    SECONDS_PER_DAY,
    SIDEREAL_PER_SOLAR,
    SOLAR_PER_SIDEREAL,
)
from solar_tools.models import CivilDate, CivilDateTime, Direction, Weekday

logger = logging.getLogger(__name__)


def is_julian_date(date: CivilDate) -> bool:
    """Return True if the date falls before the Gregorian reform (1582-10-15).

    The ten dropped days (1582-10-05 to 10-14) are treated as Julian.
    """
    return (date.year, date.month, date.day) < GREGORIAN_REFORM


def is_leap_year(year: int) -> bool:
    """Leap year in the civil calendar in force for that year."""
    if year <= GREGORIAN_REFORM[0]:
        return year % 4 == 0
    if year % 100 == 0:
        return year % 400 == 0
    return year % 4 == 0


def day_of_year(date: CivilDate) -> int:
    """Day number within the year, January 1st being 1 (Duffett-Smith p.5).

    Parameters:
        date: Calendar date (fraction of day dropped).

    Returns:
        Day number (1-366).
    """
    tmp = 62 if is_leap_year(date.year) else 63
    if date.month <= 2:
        number = (date.month - 1) * tmp // 2
    else:
        number = math.floor((date.month + 1) * 30.6) - tmp
    return int(number + date.day)


def julian_day(date: CivilDate) -> float:
    """Convert a calendar date to Julian Day (Duffett-Smith pp.6-7).

    Parameters:
        date: Calendar date; the day may be fractional.

    Returns:
        Julian Day (days since noon, 1 January 4713 BCE).
    """
    if date.month <= 2:
        y, m = date.year - 1, date.month + 12
    else:
        y, m = date.year, date.month

    if is_julian_date(date):
        logger.debug('Julian calendar date %d-%02d-%s', date.year, date.month, date.day)
        b = 0
    else:
        a = y // 100
        b = 2 - a + a // 4

    c = math.floor(DAYS_PER_JULIAN_YEAR * y)
    d = math.floor(MONTH_FACTOR * (m + 1))
    return b + c + d + date.day + JULIAN_DAY_OFFSET


def julian_day_from_ut(ut: CivilDateTime) -> float:
    """Julian Day of a date-time, the time of day added as a day fraction."""
    return julian_day(ut.date) + decimal_hours_from_time(ut.time) / HOURS_PER_DAY


def _ymd_from_day_number(number: int) -> tuple[int, int, int]:
    """Year, month, day for the civil day containing JD number - 0.5 to number + 0.5."""
    if number > GREGORIAN_REFORM_DAY_NUMBER:
        alpha = math.floor((number - 1_867_216.25) / 36_524.25)
        a = number + 1 + alpha - alpha // 4
    else:
        a = number
    b = a + 1524
    c = math.floor((b - 122.1) / DAYS_PER_JULIAN_YEAR)
    d = math.floor(DAYS_PER_JULIAN_YEAR * c)
    e = math.floor((b - d) / MONTH_FACTOR)

    day = b - d - math.floor(e * MONTH_FACTOR)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return year, month, day


def date_from_julian_day(jd: float) -> CivilDate:
    """Convert Julian Day to a calendar date with fractional day (Duffett-Smith p.8).

    Parameters:
        jd: Julian Day.

    Returns:
        CivilDate whose day carries the time of day as a fraction.
    """
    number = math.floor(jd + 0.5)
    fraction = jd + 0.5 - number
    year, month, day = _ymd_from_day_number(number)
    return CivilDate(year, month, day + fraction)


def calendar_date(jd: float) -> CivilDateTime:
    """Convert Julian Day to calendar date and time of day.

    A day fraction that rounds up to 24 h moves the date to the next day.

    Parameters:
        jd: Julian Day.

    Returns:
        CivilDateTime with calibrated hour, minute, second.
    """
    number = math.floor(jd + 0.5)
    fraction = jd + 0.5 - number
    time, overflow = calibrate(Angle.hms(0, 0, fraction * SECONDS_PER_DAY))
    year, month, day = _ymd_from_day_number(number + overflow)
    return CivilDateTime.combine(CivilDate(year, month, day), time)


def j2000_from_julian_day(jd: float) -> float:
    """Days since J2000.0 (2000 January 1.5)."""
    return jd - J2000


def j2000_from_ut(ut: CivilDateTime) -> float:
    return j2000_from_julian_day(julian_day_from_ut(ut))


def modified_julian_day_from_julian_day(jd: float) -> float:
    return jd - MJD_OFFSET


def modified_julian_day_from_ut(ut: CivilDateTime) -> float:
    return modified_julian_day_from_julian_day(julian_day_from_ut(ut))


def decimal_year_from_date(date: CivilDate) -> float:
    """Decimal year at the middle of the month: year + (month - 0.5) / 12."""
    return date.year + (date.month - 0.5) / 12.0


def day_of_the_week(date: CivilDate) -> Weekday:
    """Day of the week of a calendar date (Duffett-Smith p.9)."""
    jd = julian_day(CivilDate(date.year, date.month, math.floor(date.day)))
    return Weekday(math.floor(jd + 1.5) % 7)


def add_days(date: CivilDate, days: float) -> CivilDate:
    """Shift a calendar date by a number of days (across the calendar reform too)."""
    return date_from_julian_day(julian_day(date) + days)


def decimal_hours_from_time(time: Angle) -> float:
    """Convert hours, minutes, seconds to decimal hours (Duffett-Smith p.10)."""
    return time.to_decimal()


def time_from_decimal_hours(value: float) -> Angle:
    """Convert decimal hours to a signed, un-wrapped Angle (Duffett-Smith p.11)."""
    return Angle.from_decimal(value)


def normalize_datetime(dt: CivilDateTime) -> CivilDateTime:
    """Calibrate the time of day and carry whole days into the date.

    Example: 2021-01-31 23:61:-2 becomes 2021-02-01 00:00:58.
    """
    time, overflow = calibrate(dt.time)
    date = dt.date if overflow == 0 else add_days(dt.date, overflow)
    return CivilDateTime.combine(date, time)


def _shift_hours(dt: CivilDateTime, hours: float) -> CivilDateTime:
    shifted = CivilDateTime(dt.year, dt.month, dt.day, dt.hour + hours, dt.minute, dt.second)
    return normalize_datetime(shifted)


def ut_from_local(dt: CivilDateTime, zone: float) -> CivilDateTime:
    """Local civil time with a fixed UTC offset (hours, east positive) to UT.

    Daylight saving must already be removed from dt (Duffett-Smith pp.12-13).
    """
    return _shift_hours(dt, -zone)


def local_from_ut(ut: CivilDateTime, zone: float) -> CivilDateTime:
    """UT to local civil time with a fixed UTC offset (Duffett-Smith p.14)."""
    return _shift_hours(ut, zone)


def _gst_offset(date: CivilDate) -> float:
    """Sidereal time at 0h UT of the date (T0), hours in [0, 24)."""
    jd = julian_day(CivilDate(date.year, date.month, math.floor(date.day)))
    t = (jd - J2000) / DAYS_PER_JULIAN_CENTURY
    c0, c1, c2 = GST_T0_COEFFS
    t0, _ = carry_over(c0 + c1 * t + c2 * t * t, HOURS_PER_DAY)
    return t0


def gst_from_ut(ut: CivilDateTime) -> Angle:
    """Greenwich sidereal time for a UT instant (Duffett-Smith p.17).

    Sidereal wraps past 24 h do not move the civil date, so the overflow is
    not reported.
    """
    decimal = decimal_hours_from_time(ut.time) * SIDEREAL_PER_SOLAR + _gst_offset(ut.date)
    gst, _ = calibrate(Angle.hms(decimal))
    return gst


def ut_from_gst(gst: CivilDateTime) -> Angle:
    """UT on the same civil date for a Greenwich sidereal time (Duffett-Smith pp.18-19).

    Parameters:
        gst: Civil date with GST as its time of day.

    Returns:
        UT time of day on that date.
    """
    sidereal, _ = carry_over(decimal_hours_from_time(gst.time) - _gst_offset(gst.date), HOURS_PER_DAY)
    ut, _ = calibrate(Angle.hms(sidereal * SOLAR_PER_SIDEREAL))
    return ut


def _longitude_hours(longitude: float, direction: Direction) -> float:
    if direction is Direction.WEST:
        return -longitude / DEGREES_PER_HOUR_RA
    if direction is Direction.EAST:
        return longitude / DEGREES_PER_HOUR_RA
    raise ValueError(f'longitude direction must be east or west, got {direction.value!r}')


def lst_from_gst(gst: Angle, longitude: float, direction: Direction) -> Angle:
    """Local sidereal time from GST and geographic longitude (Duffett-Smith p.20).

    Parameters:
        gst: Greenwich sidereal time.
        longitude: Longitude magnitude in degrees.
        direction: Direction.EAST or Direction.WEST.

    Returns:
        LST in [0, 24) hours.

    Raises:
        ValueError: If direction is not east or west.
    """
    lst, _ = calibrate(Angle.hms(gst.to_decimal() + _longitude_hours(longitude, direction)))
    return lst


def gst_from_lst(lst: Angle, longitude: float, direction: Direction) -> Angle:
    """Greenwich sidereal time from LST and geographic longitude (Duffett-Smith p.21)."""
    gst, _ = calibrate(Angle.hms(lst.to_decimal() - _longitude_hours(longitude, direction)))
    return gst


def parse_datetime(string: str) -> CivilDateTime | None:
    """Parse a date/time string with rms-julian into a UT CivilDateTime.

    Parameters:
        string: Date/time string (any format accepted by rms-julian, e.g.
            "1985-10-26 01:35:00" or "2022-05-06T12:00"). A trailing "Z" is
            accepted.

    Returns:
        CivilDateTime, or None on parse failure.
    """
    candidate_strings = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        candidate_strings.append(stripped[:-1])
    for candidate in candidate_strings:
        try:
            result = julian.day_sec_from_string(candidate)
        except (ValueError, TypeError, LookupError, OSError):
            continue
        day, sec = int(result[0]), float(result[1])
        year, month, mday = julian.ymd_from_day(day)
        hour, minute, second = julian.hms_from_sec(sec)
        logger.debug('Parsed %r as day %d sec %.3f', candidate, day, sec)
        # A leap second (23:59:60) folds into the next day.
        return normalize_datetime(
            CivilDateTime(int(year), int(month), int(mday), int(hour), int(minute), float(second))
        )
    return None
