"""Sexagesimal angle/time values and overflow-aware calibration.

An Angle is either hours/minutes/seconds (one revolution = 24 h) or
degrees/arcminutes/arcseconds (one revolution = 360°). Raw components may be
out of range or individually negative; their flat value is
``sign * (whole + minute / 60 + second / 3600)``. Calibration folds the value
into canonical components in [0, revolution) and returns how many whole
revolutions were removed, so callers can shift calendar dates instead of
silently losing a day.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from solar_tools.constants import (
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR_RA,
    HOURS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class AngleUnit(enum.Enum):
    """Major unit of an Angle; the value is the size of one revolution."""

    HOURS = HOURS_PER_DAY
    DEGREES = DEGREES_PER_CIRCLE

    @property
    def revolution(self) -> float:
        """One full revolution in major units (24.0 or 360.0)."""
        return float(self.value)


@dataclass(frozen=True)
class Angle:
    """Hours (or degrees), minutes, seconds with an explicit sign.

    Attributes:
        whole: Hours or degrees.
        minute: Minutes of time or arc.
        second: Seconds of time or arc.
        unit: AngleUnit.HOURS or AngleUnit.DEGREES.
        sign: +1 or -1, applied to the sum of the components.
    """

    whole: float = 0
    minute: float = 0
    second: float = 0.0
    unit: AngleUnit = AngleUnit.HOURS
    sign: int = 1

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f'sign must be +1 or -1, got {self.sign!r}')

    @classmethod
    def hms(cls, hour: float = 0, minute: float = 0, second: float = 0.0, sign: int = 1) -> Angle:
        """Time of day or right ascension from hours, minutes, seconds."""
        return cls(hour, minute, second, AngleUnit.HOURS, sign)

    @classmethod
    def dms(cls, degree: float = 0, minute: float = 0, second: float = 0.0, sign: int = 1) -> Angle:
        """Angle from degrees, arcminutes, arcseconds."""
        return cls(degree, minute, second, AngleUnit.DEGREES, sign)

    @classmethod
    def from_decimal(cls, value: float, unit: AngleUnit = AngleUnit.HOURS) -> Angle:
        """Split a real value into canonical components without wrapping.

        The sign goes into ``sign``; whole, minute and second describe the
        magnitude, with minute and second in [0, 60).

        Parameters:
            value: Decimal hours or degrees (any sign, any magnitude).
            unit: Unit of value.

        Returns:
            Angle whose to_decimal() equals value.
        """
        sign = -1 if value < 0 else 1
        second, minutes = carry_over(abs(value) * SECONDS_PER_HOUR, SECONDS_PER_MINUTE)
        whole, minute = divmod(minutes, 60)
        return cls(whole, minute, second, unit, sign)

    def total_seconds(self) -> float:
        """Flat value in seconds of time (hours) or seconds of arc (degrees)."""
        return self.sign * (
            self.whole * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second
        )

    def to_decimal(self) -> float:
        """Flat value in decimal hours or degrees."""
        return self.total_seconds() / SECONDS_PER_HOUR

    def to_unit(self, unit: AngleUnit) -> Angle:
        """Convert between hours and degrees (15° per hour), keeping the sign."""
        if unit is self.unit:
            return self
        value = self.to_decimal()
        if unit is AngleUnit.DEGREES:
            value *= DEGREES_PER_HOUR_RA
        else:
            value /= DEGREES_PER_HOUR_RA
        return Angle.from_decimal(value, unit)

    def to_radians(self) -> float:
        """Flat value in radians (hours are converted at 15° per hour)."""
        return math.radians(self.to_unit(AngleUnit.DEGREES).to_decimal())


def carry_over(value: float, target: float) -> tuple[float, int]:
    """Split value into a remainder in [0, target) and a floor quotient.

    Negative values borrow from the quotient: ``carry_over(-59, 60)`` is
    ``(1.0, -1)`` and ``carry_over(-60, 60)`` is ``(0.0, -1)``.

    Parameters:
        value: Value to split.
        target: Positive modulus (e.g. 60 or 24).

    Returns:
        (remainder, quotient) with ``remainder + quotient * target == value``.
    """
    quotient, remainder = divmod(value, target)
    # divmod of a tiny negative value rounds the remainder up to target.
    if remainder >= target:
        remainder -= target
        quotient += 1
    return remainder, int(quotient)


def calibrate(angle: Angle) -> tuple[Angle, int]:
    """Normalize an Angle and report whole revolutions removed.

    Parameters:
        angle: Raw Angle; components may be negative or out of range.

    Returns:
        (normalized, overflow): normalized has sign +1, whole in
        [0, revolution), minute and second in [0, 60); overflow is the signed
        number of revolutions (days for hours) folded out, so that
        ``normalized.to_decimal() + overflow * revolution`` equals
        ``angle.to_decimal()``.
    """
    revolution = angle.unit.revolution * SECONDS_PER_HOUR
    seconds, overflow = carry_over(angle.total_seconds(), revolution)
    second, minutes = carry_over(seconds, SECONDS_PER_MINUTE)
    whole, minute = divmod(minutes, 60)
    return Angle(whole, minute, second, angle.unit), overflow


def reduce_degrees(value: float) -> float:
    """Reduce an angle in degrees into [0, 360)."""
    return carry_over(value, DEGREES_PER_CIRCLE)[0]


def normalize_angle(value: float, maximum: float) -> float:
    """Reduce value into (-maximum / 2, maximum / 2].

    Parameters:
        value: Angle in any range (degrees or hours).
        maximum: One revolution in the same unit.

    Returns:
        Equivalent angle centred on zero.
    """
    half = maximum / 2.0
    angle = math.fmod(value, maximum)
    if angle <= -half:
        angle += maximum
    elif angle > half:
        angle -= maximum
    return angle
