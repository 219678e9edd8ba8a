"""
skykernel.reference.sidereal
----------------------------
Mean sidereal time (Meeus, Astronomical Algorithms, eq. 12.4).

The polynomial is an approximation that is good to well under a second of
time for a couple of centuries either side of J2000.0. Further out it keeps
returning a value but accuracy degrades; a SiderealAccuracyWarning is
emitted so that callers running long sweeps can notice.
"""

from __future__ import annotations

import warnings

from ..core.errors import SiderealAccuracyWarning
from .angles import normalize_degrees, normalize_hours
from .constants import DEG2H, J2000
from .time_scales import to_julian_century

# |T| (Julian centuries from J2000.0) beyond which the warning fires.
VALID_CENTURIES = 2.0


def _gmst_deg(jd: float, stacklevel: int) -> float:
    # stacklevel counts frames from our caller up to the user code to blame.
    T = to_julian_century(jd)
    if abs(T) > VALID_CENTURIES:
        warnings.warn(
            f"sidereal time polynomial used {T:.2f} centuries from J2000.0; accuracy is reduced",
            SiderealAccuracyWarning,
            stacklevel=stacklevel + 1,
        )

    # The rate term uses the full day count, not 36525*T, to keep sub-second accuracy.
    return (
        280.46061837
        + 360.98564736629 * (jd - J2000)
        + 0.000387933 * (T * T)
        - (T * T * T) / 38710000.0
    )


def greenwich_mean_sidereal_time(jd: float) -> float:
    """GMST in degrees, not wrapped."""
    return _gmst_deg(jd, 2)


def _lst_hours(jd: float, longitude_deg: float, stacklevel: int) -> float:
    gmst = _gmst_deg(jd, stacklevel + 1)
    return normalize_hours(normalize_degrees(gmst + longitude_deg) * DEG2H)


def local_sidereal_time(jd: float, longitude_deg: float) -> float:
    """
    Local mean sidereal time in hours [0,24).
    longitude_deg is positive East.
    """
    return _lst_hours(jd, longitude_deg, 2)
