from __future__ import annotations

import math


# ------------------------------------------------------------
# Epochs (Julian Day)
# ------------------------------------------------------------

J1970 = 2440588.0       # JD at 1970-01-01 12:00 UTC; midnight is J1970 - 0.5
J2000 = 2451545.0       # J2000.0
MJD_START = 2400000.5   # zero point of the Modified Julian Day
JULIAN_DAY_B1950_0 = 2433282.4235


# ------------------------------------------------------------
# Time units & year lengths (days)
# ------------------------------------------------------------

DAYMS = 86400000.0      # milliseconds per day
ONE_DAY_IN_SECONDS = 86400.0
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_MILLENNIUM = 365250.0

SIDEREAL_OVER_SOLAR_RATE = 1.0027379093
AVERAGE_JULIAN_YEAR = 365.25
AVERAGE_GREGORIAN_YEAR = 365.2425
AVERAGE_SIDEREAL_YEAR = 365.256363
AVERAGE_ANOMALISTIC_YEAR = 365.259635
AVERAGE_TROPICAL_YEAR = 365.242190
AVERAGE_ECLIPSE_YEAR = 346.620075
BESSELIAN_YEAR = 365.2421988
ONE_YEAR_IN_SECONDS = AVERAGE_GREGORIAN_YEAR * ONE_DAY_IN_SECONDS


# ------------------------------------------------------------
# Angle conversions
# ------------------------------------------------------------

DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi
RAD2H = 12.0 / math.pi
H2RAD = math.pi / 12.0
H2DEG = 360.0 / 24.0
DEG2H = 24.0 / 360.0


# ------------------------------------------------------------
# Earth & sky
# ------------------------------------------------------------

CONSTANT_OF_ABERRATION = 20.49552  # arcsec
ECLIPTIC_OBLIQUITY_J2000_0 = 23.4392911  # degrees
ECLIPTIC_OBLIQUITY_B1950_0 = 23.4457889  # degrees
GALACTIC_NORTH_POLE_ALPHA_B1950_0 = 192.25
GALACTIC_NORTH_POLE_DELTA_B1950_0 = 27.4
EARTH_EQUATORIAL_RADIUS = 6378.14  # km
EARTH_RADIUS_FLATTENING_FACTOR = 1.0 / 298.257
EARTH_MERIDIAN_ECCENTRICITY = math.sqrt(
    2.0 * EARTH_RADIUS_FLATTENING_FACTOR - EARTH_RADIUS_FLATTENING_FACTOR ** 2
)


# ------------------------------------------------------------
# Physics
# ------------------------------------------------------------

SPEED_OF_LIGHT = 299792.458  # km/s
ONE_UA_IN_KILOMETERS = 149597870.691
PC2UA = 206264.80624548031
PC2LY = 3.263797724738089
PLANCK_CONSTANT = 6.62606957e-34  # J s
BOLTZMANN_CONSTANT = 1.3806488e-23  # J/K
MSUN = 1.98855e30  # kg
MJUP = 1.8990e27
MNEP = 1.0243e26
MEARTH = 5.9736e24
HUBBLE_CONSTANT = 72.0
ABSOLUTE_ZERO_TEMPERATURE_CELSIUS = -273.15


# ------------------------------------------------------------
# Rise/set altitudes (degrees) & moon phases
# ------------------------------------------------------------

SUN_EVENTS_ALTITUDES = (-0.833, -6.0, -12.0, -18.0)
SUN_EXTENDED_EVENTS_ALTITUDES = (6.0, -0.3, -0.833, -6.0, -12.0, -18.0)
STANDARD_ALTITUDE_STARS = -0.5667
STANDARD_ALTITUDE_MOON = 0.125
STANDARD_ALTITUDE_SUN = -0.8333

MOON_SYNODIC_PERIOD = 29.53058770576  # days

# Upper bound (fraction of the synodic month) of each MoonPhase bucket, in enum order.
MOON_PHASE_UPPER_LIMITS = (
    0.033863193308711,
    0.216136806691289,
    0.283863193308711,
    0.466136806691289,
    0.533863193308711,
    0.716136806691289,
    0.783863193308711,
    0.966136806691289,
)
