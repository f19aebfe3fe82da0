"""DIS timestamp encoding.

The upper 31 bits count time past the hour in units of 3600 s / 2**31;
bit 0 is set for absolute (clock-synchronised) time and clear for relative.
"""

from __future__ import annotations

from datetime import datetime, timezone

from . import protocol

_TIMESTAMP_UNITS_MASK = protocol.TIMESTAMP_UNITS_PER_HOUR - 1


def now_as_dis_timestamp(now: datetime | None = None, *, absolute: bool = True) -> int:
    """Encode ``now`` (default: current UTC time) as a DIS timestamp.

    Naive datetimes are taken to be UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    else:
        now = now.astimezone(timezone.utc)

    micros_past_hour = (now.minute * 60 + now.second) * 1_000_000 + now.microsecond
    units = micros_past_hour * protocol.TIMESTAMP_UNITS_PER_HOUR // protocol.MICROSECONDS_PER_HOUR
    units = min(units, _TIMESTAMP_UNITS_MASK)
    return (units << 1) | int(absolute)


def split_dis_timestamp(timestamp: int) -> tuple[float, bool]:
    """Return ``(seconds_past_hour, absolute)`` for a raw timestamp."""
    units = (timestamp >> 1) & _TIMESTAMP_UNITS_MASK
    seconds = units * 3600 / protocol.TIMESTAMP_UNITS_PER_HOUR
    return seconds, bool(timestamp & 1)


def is_absolute(timestamp: int) -> bool:
    return bool(timestamp & 1)
