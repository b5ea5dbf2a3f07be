from __future__ import annotations

import time as _time
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo

from ..reference.constants import DEFAULT_CONSTANTS, MS_PER_DAY, SeleneConstants

TzLike = Union[tzinfo, str, None]

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)
# Instants representable as datetime (years 1..9999, one day of margin)
_MIN_MS = (datetime(1, 1, 2, tzinfo=timezone.utc) - _UNIX_EPOCH) // _ONE_MS
_MAX_MS = (datetime(9999, 12, 30, tzinfo=timezone.utc) - _UNIX_EPOCH) // _ONE_MS


def resolve_tz(tz: TzLike = None) -> tzinfo:
    """IANA name or tzinfo -> tzinfo. None means the process's local zone."""
    if tz is None:
        return datetime.now().astimezone().tzinfo
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def now_millis() -> int:
    return _time.time_ns() // 1_000_000


def millis_to_jd(ms: int, constants: SeleneConstants = DEFAULT_CONSTANTS) -> float:
    """Milliseconds since the Unix epoch -> Julian Date (UTC)."""
    return ms / MS_PER_DAY + constants.jd_unix_epoch


def jd_to_millis(jd: float, constants: SeleneConstants = DEFAULT_CONSTANTS) -> int:
    """Julian Date (UTC) -> milliseconds since the Unix epoch, nearest ms."""
    return int(round((jd - constants.jd_unix_epoch) * MS_PER_DAY))


def millis_to_datetime(ms: int, tz: Optional[tzinfo] = None) -> datetime:
    dt = _UNIX_EPOCH + timedelta(milliseconds=ms)
    return dt.astimezone(tz) if tz is not None else dt


def datetime_to_millis(dt: datetime) -> int:
    """Timezone-aware datetime -> milliseconds since the Unix epoch."""
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return (dt - _UNIX_EPOCH) // _ONE_MS


def utc_offset_millis(ms: int, tz: TzLike = None) -> int:
    """
    UTC offset of `tz` (DST included) at the instant `ms`. Instants outside the
    datetime range use the offset at the nearest representable instant.
    """
    zone = resolve_tz(tz)
    clamped = min(max(ms, _MIN_MS), _MAX_MS)
    offset = millis_to_datetime(clamped, zone).utcoffset()
    if offset is None:
        return 0
    return offset // _ONE_MS


def julian_date(
    ms: int,
    *,
    tz: TzLike = None,
    apply_timezone: bool = False,
    constants: SeleneConstants = DEFAULT_CONSTANTS,
) -> float:
    """JD of `ms`; with apply_timezone the local wall-clock offset is added."""
    jd = millis_to_jd(ms, constants)
    if apply_timezone:
        jd += utc_offset_millis(ms, tz) / MS_PER_DAY
    return jd
