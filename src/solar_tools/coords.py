"""Coordinate transformations: ecliptic, equatorial, horizon, galactic.

Formulas follow Duffett-Smith, Practical Astronomy with your Calculator
(pp. 35-51). Right ascensions and hour angles are Angles in hours;
declinations, altitudes and azimuths are Angles in degrees.
"""

from __future__ import annotations

import math

from solar_tools.angle import Angle, AngleUnit, calibrate, reduce_degrees
from solar_tools.constants import (
    ARCSEC_PER_DEGREE,
    DAYS_PER_JULIAN_CENTURY,
    DEGREES_PER_HOUR_RA,
    GALACTIC_NODE_LONGITUDE,
    GALACTIC_POLE_DEC,
    GALACTIC_POLE_RA,
    J2000,
    OBLIQUITY_J2000,
    OBLIQUITY_RATE_COEFFS,
)
from solar_tools.models import (
    CivilDate,
    CivilDateTime,
    Direction,
    EclipticCoord,
    EquatorialCoord,
    GalacticCoord,
    HorizonCoord,
)
from solar_tools.time_utils import gst_from_ut, julian_day, lst_from_gst


def mean_obliquity_from_julian_day(jd: float) -> float:
    """Mean obliquity of the ecliptic (ε) in degrees at a Julian Day."""
    t = (jd - J2000) / DAYS_PER_JULIAN_CENTURY
    c1, c2, c3 = OBLIQUITY_RATE_COEFFS
    delta = (c1 * t + c2 * t * t + c3 * t * t * t) / ARCSEC_PER_DEGREE
    return OBLIQUITY_J2000 - delta


def mean_obliquity_of_the_ecliptic(date: CivilDate) -> float:
    """Mean obliquity of the ecliptic (ε), the angle between equator and ecliptic.

    (Duffett-Smith p.41)

    Parameters:
        date: Calendar date.

    Returns:
        Obliquity in degrees.
    """
    return mean_obliquity_from_julian_day(julian_day(date))


def _obliquity(date: CivilDate | None) -> float:
    if date is None:
        return OBLIQUITY_J2000
    return mean_obliquity_of_the_ecliptic(date)


def equatorial_from_ecliptic_with_obliquity(coord: EclipticCoord, obliquity: float) -> EquatorialCoord:
    """Right ascension and declination for ecliptic λ, β and a given obliquity (degrees)."""
    eps = math.radians(obliquity)
    lat = math.radians(coord.lat)
    lng = math.radians(coord.lng)

    dec = math.asin(
        math.sin(lat) * math.cos(eps) + math.cos(lat) * math.sin(eps) * math.sin(lng)
    )
    y = math.sin(lng) * math.cos(eps) - math.tan(lat) * math.sin(eps)
    asc = reduce_degrees(math.degrees(math.atan2(y, math.cos(lng))))

    ra, _ = calibrate(Angle.hms(asc / DEGREES_PER_HOUR_RA))
    return EquatorialCoord(asc=ra, dec=Angle.from_decimal(math.degrees(dec), AngleUnit.DEGREES))


def equatorial_from_ecliptic(coord: EclipticCoord, date: CivilDate | None = None) -> EquatorialCoord:
    """Ecliptic latitude (β) and longitude (λ) to equatorial α, δ (Duffett-Smith pp.40-41).

    Parameters:
        coord: Ecliptic coordinate in degrees.
        date: Date for the obliquity of the ecliptic; None uses J2000.

    Returns:
        Equatorial coordinate.
    """
    return equatorial_from_ecliptic_with_obliquity(coord, _obliquity(date))


def ecliptic_from_equatorial(coord: EquatorialCoord, date: CivilDate | None = None) -> EclipticCoord:
    """Equatorial α, δ to ecliptic latitude (β) and longitude (λ) (Duffett-Smith p.42)."""
    eps = math.radians(_obliquity(date))
    asc = coord.asc.to_radians()
    dec = coord.dec.to_radians()

    lat = math.asin(math.sin(dec) * math.cos(eps) - math.cos(dec) * math.sin(eps) * math.sin(asc))
    y = math.sin(asc) * math.cos(eps) + math.tan(dec) * math.sin(eps)
    lng = reduce_degrees(math.degrees(math.atan2(y, math.cos(asc))))
    return EclipticCoord(lng=lng, lat=math.degrees(lat))


def hour_angle_from_ut(
    ut: CivilDateTime,
    asc: Angle,
    longitude: float,
    direction: Direction,
) -> Angle:
    """Hour angle (H) from UT, right ascension and observer longitude (Duffett-Smith p.35)."""
    lst = lst_from_gst(gst_from_ut(ut), longitude, direction)
    return right_ascension_from_lst_and_hour_angle(lst, asc)


def right_ascension_from_ut(
    ut: CivilDateTime,
    hour_angle: Angle,
    longitude: float,
    direction: Direction,
) -> Angle:
    """Right ascension (α) from UT, hour angle and observer longitude (Duffett-Smith p.35)."""
    lst = lst_from_gst(gst_from_ut(ut), longitude, direction)
    return right_ascension_from_lst_and_hour_angle(lst, hour_angle)


def right_ascension_from_lst_and_hour_angle(lst: Angle, hour_angle: Angle) -> Angle:
    """α = LST - H, wrapped into [0, 24) (Duffett-Smith p.39).

    The relation is symmetric, so it also gives H = LST - α.
    """
    asc, _ = calibrate(Angle.hms(lst.to_decimal() - hour_angle.to_decimal()))
    return asc


def horizon_from_equatorial(hour_angle: Angle, dec: Angle, latitude: float) -> HorizonCoord:
    """Hour angle and declination to altitude and azimuth (Duffett-Smith pp.36-37).

    Parameters:
        hour_angle: Hour angle (H), hours.
        dec: Declination (δ), degrees.
        latitude: Observer latitude (φ), degrees north.

    Returns:
        Horizon coordinate; azimuth measured from north through east.
    """
    ha = hour_angle.to_radians()
    decline = dec.to_radians()
    lat = math.radians(latitude)

    altitude = math.asin(
        math.sin(decline) * math.sin(lat) + math.cos(decline) * math.cos(lat) * math.cos(ha)
    )
    cos_azimuth = (math.sin(decline) - math.sin(lat) * math.sin(altitude)) / (
        math.cos(lat) * math.cos(altitude)
    )
    azimuth = math.acos(max(-1.0, min(1.0, cos_azimuth)))
    if math.sin(ha) >= 0.0:
        azimuth = 2.0 * math.pi - azimuth

    return HorizonCoord(
        alt=Angle.from_decimal(math.degrees(altitude), AngleUnit.DEGREES),
        azi=Angle.from_decimal(math.degrees(azimuth), AngleUnit.DEGREES),
    )


def equatorial_from_horizon(coord: HorizonCoord, latitude: float) -> tuple[Angle, Angle]:
    """Altitude and azimuth to hour angle and declination (Duffett-Smith pp.38-39).

    Parameters:
        coord: Horizon coordinate.
        latitude: Observer latitude (φ), degrees north.

    Returns:
        (hour_angle, declination): hours in [0, 24) and signed degrees.
    """
    altitude = coord.alt.to_radians()
    azimuth = coord.azi.to_radians()
    lat = math.radians(latitude)

    decline = math.asin(
        math.sin(altitude) * math.sin(lat) + math.cos(altitude) * math.cos(lat) * math.cos(azimuth)
    )
    cos_ha = (math.sin(altitude) - math.sin(lat) * math.sin(decline)) / (
        math.cos(lat) * math.cos(decline)
    )
    ha = math.acos(max(-1.0, min(1.0, cos_ha)))
    if math.sin(azimuth) >= 0.0:
        ha = 2.0 * math.pi - ha

    hour_angle, _ = calibrate(Angle.hms(math.degrees(ha) / DEGREES_PER_HOUR_RA))
    return hour_angle, Angle.from_decimal(math.degrees(decline), AngleUnit.DEGREES)


def galactic_from_equatorial(coord: EquatorialCoord) -> GalacticCoord:
    """Equatorial α, δ (B1950) to galactic latitude (b) and longitude (l) (Duffett-Smith p.43)."""
    dec = coord.dec.to_radians()
    asc_offset = coord.asc.to_radians() - math.radians(GALACTIC_POLE_RA)
    pole = math.radians(GALACTIC_POLE_DEC)

    sin_b = math.cos(dec) * math.cos(pole) * math.cos(asc_offset) + math.sin(dec) * math.sin(pole)
    b = math.asin(sin_b)
    y = math.sin(dec) - sin_b * math.sin(pole)
    x = math.cos(dec) * math.sin(asc_offset) * math.cos(pole)
    lng = reduce_degrees(math.degrees(math.atan2(y, x)) + GALACTIC_NODE_LONGITUDE)
    return GalacticCoord(lat=math.degrees(b), lng=lng)


def equatorial_from_galactic(coord: GalacticCoord) -> EquatorialCoord:
    """Galactic b, l to equatorial α, δ (B1950) (Duffett-Smith p.44)."""
    b = math.radians(coord.lat)
    node_offset = math.radians(coord.lng - GALACTIC_NODE_LONGITUDE)
    pole = math.radians(GALACTIC_POLE_DEC)

    sin_dec = math.cos(b) * math.cos(pole) * math.sin(node_offset) + math.sin(b) * math.sin(pole)
    dec = math.asin(sin_dec)
    y = math.cos(b) * math.cos(node_offset)
    x = math.sin(b) * math.cos(pole) - math.cos(b) * math.sin(pole) * math.sin(node_offset)
    asc = reduce_degrees(math.degrees(math.atan2(y, x)) + GALACTIC_POLE_RA)

    ra, _ = calibrate(Angle.hms(asc / DEGREES_PER_HOUR_RA))
    return EquatorialCoord(asc=ra, dec=Angle.from_decimal(math.degrees(dec), AngleUnit.DEGREES))


def angle_between(coord_0: EquatorialCoord, coord_1: EquatorialCoord) -> float:
    """Angular separation in degrees of two objects (Duffett-Smith p.51)."""
    dec_0 = coord_0.dec.to_radians()
    dec_1 = coord_1.dec.to_radians()
    d_asc = coord_0.asc.to_radians() - coord_1.asc.to_radians()
    cos_d = math.sin(dec_0) * math.sin(dec_1) + math.cos(dec_0) * math.cos(dec_1) * math.cos(d_asc)
    return math.degrees(math.acos(max(-1.0, min(1.0, cos_d))))
