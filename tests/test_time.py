# tests/test_time.py

import pytest
from datetime import datetime, timedelta, timezone

from selene.core import time as ct
from selene.reference.constants import DEFAULT_CONSTANTS


def test_unix_epoch_is_jd_2440587_5():
    assert ct.millis_to_jd(0) == 2440587.5
    assert ct.jd_to_millis(2440587.5) == 0

def test_one_day_scale():
    assert ct.millis_to_jd(86_400_000) == 2440588.5
    assert ct.jd_to_millis(2440586.5) == -86_400_000

def test_jd_millis_roundtrip_to_the_millisecond():
    for ms in (0, 1, -1, 1_700_000_000_123, -180_799_692_520_000):
        assert ct.jd_to_millis(ct.millis_to_jd(ms)) == ms

def test_datetime_millis():
    dt = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
    ms = ct.datetime_to_millis(dt)
    assert ct.millis_to_jd(ms) == 2451545.0
    assert ct.millis_to_datetime(ms) == dt

def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        ct.datetime_to_millis(datetime(2000, 1, 1))

def test_julian_date_timezone_offset():
    tz = timezone(timedelta(hours=3))
    ms = 0
    assert ct.julian_date(ms, tz=tz) == 2440587.5
    assert ct.julian_date(ms, tz=tz, apply_timezone=True) == pytest.approx(2440587.5 + 3 / 24)

def test_offset_outside_datetime_range_is_clamped():
    tz = timezone(timedelta(hours=-5))
    ms = ct.jd_to_millis(DEFAULT_CONSTANTS.jd_start_of_time)
    assert ct.utc_offset_millis(ms, tz) == -5 * 3600 * 1000

def test_resolve_tz():
    assert ct.resolve_tz(timezone.utc) is timezone.utc
    assert ct.resolve_tz(None) is not None
