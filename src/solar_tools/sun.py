"""Position of the Sun and the equation of time (Duffett-Smith pp.86-99).

Orbital elements are Newcomb's polynomials in Julian centuries since
1900 January 0.5. The Sun's longitude comes from a bounded Kepler solve;
the equation of time is the mean longitude minus the apparent right
ascension, i.e. apparent minus mean solar time.
"""

from __future__ import annotations

import logging
import math

from solar_tools.angle import Angle, calibrate, normalize_angle, reduce_degrees
from solar_tools.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    HOURS_PER_DAY,
    J1900,
    KEPLER_MAX_ITERATIONS,
    KEPLER_TOLERANCE,
    SUN_ECCENTRICITY_COEFFS,
    SUN_MEAN_LONGITUDE_COEFFS,
    SUN_PERIGEE_LONGITUDE_COEFFS,
)
from solar_tools.coords import (
    equatorial_from_ecliptic_with_obliquity,
    mean_obliquity_from_julian_day,
)
from solar_tools.models import CivilDate, CivilDateTime, EclipticCoord, EquatorialCoord
from solar_tools.time_utils import (
    add_days,
    calendar_date,
    decimal_hours_from_time,
    julian_day,
    julian_day_from_ut,
    time_from_decimal_hours,
    ut_from_gst,
    ut_from_local,
)

logger = logging.getLogger(__name__)

# Fixed-point steps for mean_time_from_apparent.
_MEAN_TIME_ITERATIONS = 3


def _polynomial(coeffs: tuple[float, float, float], t: float) -> float:
    c0, c1, c2 = coeffs
    return c0 + c1 * t + c2 * t * t


def _moment_julian_day(moment: CivilDate | CivilDateTime) -> float:
    if isinstance(moment, CivilDateTime):
        return julian_day_from_ut(moment)
    return julian_day(moment)


def centuries_since_j1900(jd: float) -> float:
    """Julian centuries (T) since 1900 January 0.5."""
    return (jd - J1900) / DAYS_PER_JULIAN_CENTURY


def sun_orbital_elements(jd: float) -> tuple[float, float, float]:
    """Sun's mean longitude (εg), longitude of perigee (ϖg) and eccentricity (e).

    Parameters:
        jd: Julian Day.

    Returns:
        (mean_longitude, perigee_longitude, eccentricity); longitudes in
        degrees reduced to [0, 360).
    """
    t = centuries_since_j1900(jd)
    mean_longitude = reduce_degrees(_polynomial(SUN_MEAN_LONGITUDE_COEFFS, t))
    perigee = reduce_degrees(_polynomial(SUN_PERIGEE_LONGITUDE_COEFFS, t))
    eccentricity = _polynomial(SUN_ECCENTRICITY_COEFFS, t)
    return mean_longitude, perigee, eccentricity


def solve_kepler(
    mean_anomaly: float,
    eccentricity: float,
    *,
    tolerance: float = KEPLER_TOLERANCE,
    max_iterations: int = KEPLER_MAX_ITERATIONS,
) -> float:
    """Solve Kepler's equation E - e sin E = M by Newton iteration (Duffett-Smith p.90).

    Parameters:
        mean_anomaly: Mean anomaly (M), radians.
        eccentricity: Orbital eccentricity (e < 1).
        tolerance: Stop when successive E differ by less than this (radians).
        max_iterations: Iteration cap.

    Returns:
        Eccentric anomaly (E), radians.

    Raises:
        RuntimeError: If the iteration does not converge within the cap; this
            cannot happen for the Sun's eccentricity and indicates a bug.
    """
    ecc_anomaly = mean_anomaly
    for iteration in range(1, max_iterations + 1):
        delta = (ecc_anomaly - eccentricity * math.sin(ecc_anomaly) - mean_anomaly) / (
            1.0 - eccentricity * math.cos(ecc_anomaly)
        )
        ecc_anomaly -= delta
        if abs(delta) < tolerance:
            logger.debug('Kepler converged after %d iterations (M=%.9f)', iteration, mean_anomaly)
            return ecc_anomaly
    logger.error(
        'Kepler iteration did not converge: M=%r e=%r after %d iterations',
        mean_anomaly,
        eccentricity,
        max_iterations,
    )
    raise RuntimeError(
        f'Kepler iteration did not converge within {max_iterations} iterations '
        f'(M={mean_anomaly!r}, e={eccentricity!r})'
    )


def true_anomaly(ecc_anomaly: float, eccentricity: float) -> float:
    """True anomaly (ν) in degrees from eccentric anomaly (radians)."""
    factor = math.sqrt((1.0 + eccentricity) / (1.0 - eccentricity))
    return math.degrees(2.0 * math.atan(factor * math.tan(ecc_anomaly / 2.0)))


def sun_longitude_and_mean_anomaly(jd: float) -> tuple[float, float]:
    """Sun's ecliptic longitude (λ) and mean anomaly (M) at a Julian Day.

    Parameters:
        jd: Julian Day.

    Returns:
        (longitude, mean_anomaly), both degrees in [0, 360).
    """
    mean_longitude, perigee, eccentricity = sun_orbital_elements(jd)
    mean_anomaly = reduce_degrees(mean_longitude - perigee)
    ecc_anomaly = solve_kepler(math.radians(mean_anomaly), eccentricity)
    lng = reduce_degrees(true_anomaly(ecc_anomaly, eccentricity) + perigee)
    return lng, mean_anomaly


def ecliptic_position_of_the_sun(moment: CivilDate | CivilDateTime) -> EclipticCoord:
    """Sun's ecliptic coordinates for a date (0h UT) or a UT date-time.

    Parameters:
        moment: CivilDate (time from its fractional day) or CivilDateTime.

    Returns:
        EclipticCoord with longitude in [0, 360) and latitude 0.
    """
    lng, _mean_anomaly = sun_longitude_and_mean_anomaly(_moment_julian_day(moment))
    return EclipticCoord(lng=lng, lat=0.0)


def equatorial_position_of_the_sun(moment: CivilDate | CivilDateTime) -> EquatorialCoord:
    """Sun's right ascension (α) and declination (δ) (Duffett-Smith p.91)."""
    jd = _moment_julian_day(moment)
    lng, _mean_anomaly = sun_longitude_and_mean_anomaly(jd)
    return equatorial_from_ecliptic_with_obliquity(
        EclipticCoord(lng=lng), mean_obliquity_from_julian_day(jd)
    )


def _equation_of_time_hours(jd: float) -> float:
    """Apparent minus mean solar time in decimal hours, within ±12 h."""
    mean_longitude, _perigee, _eccentricity = sun_orbital_elements(jd)
    lng, _mean_anomaly = sun_longitude_and_mean_anomaly(jd)
    coord = equatorial_from_ecliptic_with_obliquity(
        EclipticCoord(lng=lng), mean_obliquity_from_julian_day(jd)
    )
    asc = coord.asc.to_decimal() * DEGREES_PER_HOUR_RA
    return normalize_angle(mean_longitude - asc, DEGREES_PER_CIRCLE) / DEGREES_PER_HOUR_RA


def _apparent_solar_time(ut: CivilDateTime) -> tuple[float, Angle, int]:
    eot = _equation_of_time_hours(julian_day_from_ut(ut))
    apparent, overflow = calibrate(Angle.hms(decimal_hours_from_time(ut.time) + eot))
    return eot, apparent, overflow


def equation_of_time_from_ut(ut: CivilDateTime) -> tuple[Angle, int]:
    """Equation of time at a UT instant.

    Parameters:
        ut: UT date-time.

    Returns:
        (eot, days_overflow): eot is apparent minus mean solar time as a
        signed Angle in hours; days_overflow is the whole-day wrap of the
        apparent solar time UT + eot (e.g. 1 when 23:55 UT plus 16 minutes
        runs past midnight), which callers must apply to the date.
    """
    eot, _apparent, overflow = _apparent_solar_time(ut)
    logger.debug('Equation of time at %s: %.6f h (overflow %d)', ut.iso_8601(), eot, overflow)
    return time_from_decimal_hours(eot), overflow


def equation_of_time_from_gst(gst: CivilDateTime) -> tuple[Angle, int]:
    """Equation of time at a Greenwich sidereal instant (Duffett-Smith pp.98-99).

    Parameters:
        gst: Civil date with GST as its time of day.

    Returns:
        Same as equation_of_time_from_ut for the UT on that date.
    """
    ut = CivilDateTime.combine(gst.date, ut_from_gst(gst))
    return equation_of_time_from_ut(ut)


def apparent_solar_time_from_ut(ut: CivilDateTime) -> tuple[Angle, int]:
    """Apparent (sundial) solar time at Greenwich for a UT instant.

    Returns:
        (time, days_overflow): time in [0, 24) hours and the signed number
        of days the apparent date differs from the UT date.
    """
    _eot, apparent, overflow = _apparent_solar_time(ut)
    return apparent, overflow


def apparent_datetime_from_ut(ut: CivilDateTime) -> CivilDateTime:
    """Apparent solar date-time at Greenwich, the day overflow applied to the date."""
    _eot, apparent, overflow = _apparent_solar_time(ut)
    date = ut.date if overflow == 0 else add_days(ut.date, overflow)
    return CivilDateTime.combine(date, apparent)


def apparent_time_from_local(dt: CivilDateTime, zone: float) -> CivilDateTime:
    """Local civil time (fixed UTC offset, hours east) to apparent solar date-time at Greenwich."""
    return apparent_datetime_from_ut(ut_from_local(dt, zone))


def mean_time_from_apparent(apparent: CivilDateTime) -> CivilDateTime:
    """UT for an apparent solar date-time at Greenwich (inverse of apparent_datetime_from_ut).

    Parameters:
        apparent: Apparent solar date-time.

    Returns:
        UT date-time; the date moves when the correction crosses midnight.
    """
    target = julian_day_from_ut(apparent)
    jd = target
    for _ in range(_MEAN_TIME_ITERATIONS):
        jd = target - _equation_of_time_hours(jd) / HOURS_PER_DAY
    return calendar_date(jd)
