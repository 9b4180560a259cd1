"""Angle parsing and formatting as sexagesimal strings."""

from __future__ import annotations

import re

from solar_tools.angle import Angle, AngleUnit


def parse_angle(string: str, unit: AngleUnit = AngleUnit.DEGREES) -> Angle | None:
    """Parse an angle given as degrees/hours, minutes, and seconds.

    Accepts three numbers (deg/h, m, s), two (deg/h, m), or one (deg/h).
    Minutes and seconds must be non-negative. A leading minus makes the
    whole angle negative ("-8 13 30" is -(8° 13' 30")).

    Parameters:
        string: Whitespace-separated numbers (e.g. "12 30 45" or "-5 30").
        unit: Unit of the first number.

    Returns:
        Angle with its sign in ``sign``, or None on parse failure.
    """
    s = string.strip()
    if len(s) == 0:
        return None
    parts = re.split(r'\s+', s)
    if len(parts) > 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    values += [0.0] * (3 - len(values))
    sign = -1 if s.startswith('-') else 1
    return Angle(abs(values[0]), values[1], values[2], unit, sign)


def format_angle(angle: Angle, ndecimal: int = 3) -> str:
    """Format an Angle as e.g. " 12h 30m 45.123s" or "-23d 26m 21.448s".

    Parameters:
        angle: Angle to format (need not be calibrated).
        ndecimal: Decimal places for seconds.

    Returns:
        Formatted string; separators are h/m/s for hours and d/m/s for degrees.
    """
    sep1 = 'h' if angle.unit is AngleUnit.HOURS else 'd'
    value = angle.to_decimal()
    negative = value < 0
    ntens = 10**ndecimal
    ims = round(abs(value) * 3600.0 * ntens)
    isec, ims = divmod(ims, ntens)
    imin, isec = divmod(isec, 60)
    ideg, imin = divmod(imin, 60)
    whole = f'-{ideg}' if negative else f'{ideg}'
    frac = f'.{ims:0{ndecimal}d}' if ndecimal > 0 else ''
    return f'{whole:>3}{sep1} {imin:02d}m {isec:02d}{frac}s'
