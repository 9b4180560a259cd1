"""Fixed constants: time units, epochs, calendar reform, solar orbital elements.

From Duffett-Smith, Practical Astronomy with your Calculator.
"""

# Time: seconds per unit (for calibration and sexagesimal)
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
HOURS_PER_DAY = 24.0

# Angle: degrees per circle and sexagesimal (DMS/arcmin/arcsec)
DEGREES_PER_CIRCLE = 360.0
ARCSEC_PER_DEGREE = 3600.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360° / 24 h

# Calendar
DAYS_PER_JULIAN_YEAR = 365.25
DAYS_PER_JULIAN_CENTURY = 36525.0
MONTH_FACTOR = 30.6001
JULIAN_DAY_OFFSET = 1_720_994.5  # JD of the calendar origin used by julian_day()
GREGORIAN_REFORM = (1582, 10, 15)  # first Gregorian date
GREGORIAN_REFORM_DAY_NUMBER = 2_299_160  # floor(JD + 0.5) of 1582-10-04, the last Julian calendar day
MJD_OFFSET = 2_400_000.5

# Epochs (Julian Day)
J2000 = 2_451_545.0  # 2000 January 1.5
J1900 = 2_415_020.0  # 1900 January 0.5

# Greenwich sidereal time: T0 polynomial (hours) and UT/sidereal rate
GST_T0_COEFFS = (6.697_374_558, 2_400.051_336, 0.000_025_862)
SIDEREAL_PER_SOLAR = 1.002_737_909
SOLAR_PER_SIDEREAL = 0.997_269_566_3

# Sun's orbital elements, polynomials in Julian centuries since J1900
SUN_MEAN_LONGITUDE_COEFFS = (279.696_677_8, 36_000.768_92, 0.000_302_5)
SUN_PERIGEE_LONGITUDE_COEFFS = (281.220_844_4, 1.719_175, 0.000_452_778)
SUN_ECCENTRICITY_COEFFS = (0.016_751_04, -0.000_041_8, -0.000_000_126)

# Mean obliquity of the ecliptic at J2000 (degrees) and its rates (arcsec)
OBLIQUITY_J2000 = 23.439_292
OBLIQUITY_RATE_COEFFS = (46.815, 0.000_6, -0.001_81)

# Galactic pole and node (degrees, B1950)
GALACTIC_POLE_RA = 192.25
GALACTIC_POLE_DEC = 27.4
GALACTIC_NODE_LONGITUDE = 33.0

# Kepler solver
KEPLER_TOLERANCE = 1e-6  # radians between successive iterates
KEPLER_MAX_ITERATIONS = 30
