# tests/test_time_scales.py

import math
import random
from datetime import datetime, timedelta, timezone

import pytest

from skykernel.core.errors import MillisecondRangeError
from skykernel.reference import time_scales as ts
from skykernel.reference.constants import J1970, J2000


def test_known_epochs_milliseconds():
    # Unix epoch is 1970-01-01 00:00:00 UTC, i.e. J1970 - 0.5
    assert ts.to_milliseconds(J1970 - 0.5) == 0
    # J2000.0 is 2000-01-01 12:00:00 UTC
    assert ts.to_milliseconds(J2000) == 946728000000
    assert ts.from_milliseconds(946728000000) == J2000
    assert ts.from_milliseconds(0) == J1970 - 0.5


def test_milliseconds_before_epoch_are_negative():
    # 1969-12-31 00:00 UTC
    assert ts.to_milliseconds(J1970 - 1.5) == -86400000


def test_milliseconds_roundtrip():
    random.seed(42)
    for _ in range(1000):
        jd_in = random.uniform(2400000.5, 2500000.5)
        jd_out = ts.from_milliseconds(ts.to_milliseconds(jd_in))
        # 1 ms is ~1.157e-8 days
        assert jd_out == pytest.approx(jd_in, abs=1.2e-8)


def test_milliseconds_far_dates_do_not_wrap():
    # Well outside the old 32-bit window (+-68 years) but fine in 64 bits.
    jd = J2000 + 365250.0
    ms = ts.to_milliseconds(jd)
    assert ms > 2 ** 31
    assert ts.from_milliseconds(ms) == pytest.approx(jd, abs=1.2e-8)


@pytest.mark.parametrize("jd", [1e12, -1e12, math.inf, -math.inf, math.nan])
def test_milliseconds_out_of_range_raises(jd):
    with pytest.raises(MillisecondRangeError):
        ts.to_milliseconds(jd)


def test_range_error_is_an_overflow_error():
    with pytest.raises(OverflowError):
        ts.to_milliseconds(1e12)


def test_modified_julian_day():
    assert ts.to_modified_julian_day(2400000.5) == 0.0
    assert ts.to_modified_julian_day(J2000) == 51544.5


def test_midnight_known_values():
    # 2000-01-01 12:00 -> 2000-01-01 00:00
    assert ts.to_midnight_julian_day(J2000) == 2451544.5
    # exactly at midnight stays put
    assert ts.to_midnight_julian_day(2451544.5) == 2451544.5
    # just before midnight goes back a day
    assert ts.to_midnight_julian_day(2451544.49) == 2451543.5


def test_midnight_floor_property():
    random.seed(7)
    for _ in range(1000):
        jd = random.uniform(0.0, 5000000.0)
        m = ts.to_midnight_julian_day(jd)
        assert m - 0.5 == math.floor(m - 0.5)
        assert m <= jd < m + 1.0


def test_julian_century_and_millennium():
    assert ts.to_julian_century(J2000) == 0.0
    assert ts.to_julian_century(J2000 + 36525.0) == 1.0
    assert ts.to_julian_century(J2000 - 36525.0) == -1.0
    assert ts.to_julian_millennium(J2000) == 0.0
    assert ts.to_julian_millennium(J2000 + 365250.0) == 1.0


def test_meeus_example_12a_century():
    # 1987 April 10, 0h UT
    assert ts.to_julian_century(2446895.5) == pytest.approx(-0.127296372348, abs=1e-12)


def test_datetime_offset_is_applied():
    # 13:00 at UTC+01:00 is J2000.0
    cet = timezone(timedelta(hours=1))
    assert ts.datetime_utc_to_jd(datetime(2000, 1, 1, 13, tzinfo=cet)) == J2000
    assert ts.jd_to_datetime_utc(J2000) == datetime(2000, 1, 1, 12, tzinfo=timezone.utc)


def test_datetime_jd_known_epochs():
    assert ts.datetime_utc_to_jd(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2440587.5
    assert ts.datetime_utc_to_jd(datetime(2000, 1, 1, 12, tzinfo=timezone.utc)) == J2000


def test_datetime_jd_roundtrip():
    random.seed(42)
    for _ in range(1000):
        jd_in = random.uniform(2400000.5, 2500000.5)
        jd_out = ts.datetime_utc_to_jd(ts.jd_to_datetime_utc(jd_in))
        assert jd_out == pytest.approx(jd_in, abs=1e-8)


def test_datetime_requires_timezone():
    with pytest.raises(ValueError):
        ts.datetime_utc_to_jd(datetime(2000, 1, 1, 12))


def test_datetime_and_milliseconds_agree():
    dt = datetime(2026, 2, 24, 3, 4, 5, tzinfo=timezone.utc)
    jd = ts.datetime_utc_to_jd(dt)
    assert ts.to_milliseconds(jd) == int(dt.timestamp() * 1000)
