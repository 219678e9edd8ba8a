from __future__ import annotations

from datetime import datetime, timedelta, timezone
import math

from ..core.errors import MillisecondRangeError
from .constants import (
    DAYMS,
    DAYS_PER_JULIAN_CENTURY,
    DAYS_PER_JULIAN_MILLENNIUM,
    J1970,
    J2000,
    MJD_START,
)


# ============================================================
# JD <-> millisecond timestamp (Unix epoch)
# ============================================================

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def to_milliseconds(jd: float) -> int:
    """
    Julian Date -> milliseconds since 1970-01-01 00:00:00 UTC.

      ms = round((JD + 0.5 - J1970) * 86 400 000)

    The result is kept within signed 64-bit range (about +-292 million
    years around 1970). Anything outside it, and NaN/inf, raises
    MillisecondRangeError instead of wrapping.
    """
    if not math.isfinite(jd):
        raise MillisecondRangeError(f"jd must be finite, got {jd!r}")
    ms = round((jd + 0.5 - J1970) * DAYMS)
    if ms < _INT64_MIN or ms > _INT64_MAX:
        raise MillisecondRangeError(f"jd={jd!r} is outside the 64-bit millisecond range")
    return int(ms)


def from_milliseconds(ms: int) -> float:
    """
    Milliseconds since the Unix epoch -> Julian Date.
    Exact inverse of to_milliseconds up to its 1 ms rounding.
    """
    return ms / DAYMS - 0.5 + J1970


# ============================================================
# JD derivatives
# ============================================================

def to_modified_julian_day(jd: float) -> float:
    """MJD = JD - 2400000.5"""
    return jd - MJD_START


def to_midnight_julian_day(jd: float) -> float:
    """
    JD of the most recent 0h UTC at or before jd.
    JD starts at noon, so midnights sit on integer + 0.5.
    """
    return math.floor(jd - 0.5) + 0.5


def to_julian_century(jd: float) -> float:
    """
    T = (JD - 2451545.0) / 36525
    Julian centuries from J2000.0.
    """
    return (jd - J2000) / DAYS_PER_JULIAN_CENTURY


def to_julian_millennium(jd: float) -> float:
    """Julian millennia (365250 days) from J2000.0."""
    return (jd - J2000) / DAYS_PER_JULIAN_MILLENNIUM


# ============================================================
# Aware datetime <-> JD, via the millisecond timeline
# ============================================================

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def datetime_utc_to_jd(dt: datetime) -> float:
    """
    Julian Date of an aware datetime. Any timezone is accepted; the offset
    is applied before counting from the Unix epoch. Naive datetimes are
    rejected because their instant is ambiguous.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return from_milliseconds((dt - _UNIX_EPOCH) / _ONE_MS)


def jd_to_datetime_utc(jd: float) -> datetime:
    """Aware UTC datetime for a Julian Date, rounded to the millisecond."""
    return _UNIX_EPOCH + to_milliseconds(jd) * _ONE_MS
