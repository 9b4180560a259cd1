"""Apparent position of the Sun and supporting time/angle quantities.

This package provides a small positional-astronomy engine:
- Angle/time values with overflow-aware calibration
- Julian Day conversion to and from civil date-times (Julian/Gregorian calendar)
- Equation of time and apparent/mean solar time conversions
- The Sun's ecliptic and equatorial position via a bounded Kepler solve

Formulas follow Duffett-Smith, Practical Astronomy with your Calculator.
"""

__all__: list[str] = []
