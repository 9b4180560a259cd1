"""Value types: civil dates and date-times, weekdays, coordinate pairs."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from datetime import datetime

from solar_tools.angle import Angle, AngleUnit


class Weekday(enum.IntEnum):
    """Day of the week, numbered from Sunday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


class Direction(enum.Enum):
    """Compass direction of a geographic longitude or latitude."""

    NORTH = 'north'
    EAST = 'east'
    SOUTH = 'south'
    WEST = 'west'


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f'month must be 1-12, got {month!r}')


@dataclass(frozen=True)
class CivilDate:
    """Calendar date; day may carry a fraction (17.25 is 17th at 06:00).

    Dates before 1582-10-15 are in the Julian calendar, later ones Gregorian.
    Years are astronomical (year 0 is 1 BCE).
    """

    year: int
    month: int
    day: float

    def __post_init__(self) -> None:
        _check_month(self.month)


@dataclass(frozen=True)
class CivilDateTime:
    """Calendar date and time of day in a single time reference (UT unless noted).

    Time components may be out of range before normalization
    (see time_utils.normalize_datetime).
    """

    year: int
    month: int
    day: int
    hour: float = 0
    minute: float = 0
    second: float = 0.0

    def __post_init__(self) -> None:
        _check_month(self.month)

    @property
    def date(self) -> CivilDate:
        return CivilDate(self.year, self.month, self.day)

    @property
    def time(self) -> Angle:
        return Angle.hms(self.hour, self.minute, self.second)

    @classmethod
    def combine(cls, date: CivilDate, time: Angle) -> CivilDateTime:
        """Join a date (fraction of day dropped) and a calibrated time of day."""
        return cls(
            date.year,
            date.month,
            int(math.floor(date.day)),
            time.whole,
            time.minute,
            time.second,
        )

    @classmethod
    def from_datetime(cls, value: datetime) -> CivilDateTime:
        """Convert a naive (UT) datetime; tzinfo, if any, is ignored."""
        return cls(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second + value.microsecond / 1e6,
        )

    def to_datetime(self) -> datetime:
        """Convert to a naive datetime (Gregorian years 1-9999, time assumed canonical)."""
        second = int(self.second)
        microsecond = min(round((self.second - second) * 1e6), 999_999)
        return datetime(
            self.year,
            self.month,
            self.day,
            int(self.hour),
            int(self.minute),
            second,
            microsecond,
        )

    def iso_8601(self) -> str:
        """Format as YYYY-MM-DDTHH:MM:SS (seconds truncated)."""
        return (
            f'{self.year:04d}-{self.month:02d}-{self.day:02d}'
            f'T{int(self.hour):02d}:{int(self.minute):02d}:{int(self.second):02d}'
        )


@dataclass(frozen=True)
class EclipticCoord:
    """Ecliptic longitude (λ) in [0, 360) and latitude (β), degrees."""

    lng: float
    lat: float = 0.0


@dataclass(frozen=True)
class EquatorialCoord:
    """Right ascension (α, hours) and declination (δ, signed degrees)."""

    asc: Angle
    dec: Angle

    def __post_init__(self) -> None:
        if self.asc.unit is not AngleUnit.HOURS or self.dec.unit is not AngleUnit.DEGREES:
            raise ValueError('right ascension must be in hours and declination in degrees')


@dataclass(frozen=True)
class HorizonCoord:
    """Altitude (a) and azimuth (A), degrees."""

    alt: Angle
    azi: Angle


@dataclass(frozen=True)
class GalacticCoord:
    """Galactic latitude (b) and longitude (l), degrees."""

    lat: float
    lng: float
