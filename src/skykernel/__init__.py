"""skykernel public API.

Keep this surface small: users should mostly interact with functions re-exported here.
All angles are in degrees and longitudes are positive East unless noted.
"""

from .core.errors import MillisecondRangeError, SiderealAccuracyWarning, SkykernelError
from .core.types import (
    EquatorialCoordinates,
    GeographicCoordinates,
    MoonPhase,
    MoonPhaseQuarter,
)
from .reference.angles import normalize_degrees, normalize_hours
from .reference.constants import J1970, J2000, MJD_START
from .reference.moon_phases import phase_from_fraction, quarter_from_fraction
from .reference.sidereal import greenwich_mean_sidereal_time, local_sidereal_time
from .reference.spherical import angular_distance, parallactic_angle
from .reference.time_scales import (
    datetime_utc_to_jd,
    from_milliseconds,
    jd_to_datetime_utc,
    to_julian_century,
    to_julian_millennium,
    to_midnight_julian_day,
    to_milliseconds,
    to_modified_julian_day,
)

__all__ = [
    "J1970",
    "J2000",
    "MJD_START",
    "to_milliseconds",
    "from_milliseconds",
    "to_modified_julian_day",
    "to_midnight_julian_day",
    "to_julian_century",
    "to_julian_millennium",
    "datetime_utc_to_jd",
    "jd_to_datetime_utc",
    "normalize_hours",
    "normalize_degrees",
    "greenwich_mean_sidereal_time",
    "local_sidereal_time",
    "angular_distance",
    "parallactic_angle",
    "phase_from_fraction",
    "quarter_from_fraction",
    "EquatorialCoordinates",
    "GeographicCoordinates",
    "MoonPhase",
    "MoonPhaseQuarter",
    "SkykernelError",
    "MillisecondRangeError",
    "SiderealAccuracyWarning",
]
