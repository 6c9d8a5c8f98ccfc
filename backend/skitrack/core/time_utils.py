import re
from datetime import datetime, timedelta, timezone
from typing import Annotated

from pydantic import BeforeValidator

# date-time per RFC 3339 section 5.6; 't' / ' ' separators and 'z' are allowed
_RFC3339_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})"
    r"(?:\.(\d+))?"
    r"([Zz]|[+-]\d{2}:\d{2})$"
)


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime in UTC.

    Accepts any number of fractional-second digits (truncated to
    microseconds). Raises ValueError for anything else, including
    timestamps without an explicit offset.
    Example: '2024-02-20T10:00:01.2Z' -> 2024-02-20 10:00:01.200000+00:00
    """
    if not isinstance(value, str):
        raise ValueError(f"Timestamp must be a string, got {type(value).__name__}")

    m = _RFC3339_RE.match(value.strip())
    if m is None:
        raise ValueError(f"Invalid RFC 3339 timestamp: {value!r}")

    year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
    fraction, offset = m.group(7), m.group(8)
    micro = int((fraction or "").ljust(6, "0")[:6])

    if offset in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        off_h, off_m = int(offset[1:3]), int(offset[4:6])
        if off_h > 23 or off_m > 59:
            raise ValueError(f"Invalid UTC offset in timestamp: {value!r}")
        tz = timezone(sign * timedelta(hours=off_h, minutes=off_m))

    # datetime() rejects out-of-range fields (month 13, Feb 30, second 60)
    try:
        dt = datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)
    except ValueError as e:
        raise ValueError(f"Invalid RFC 3339 timestamp: {value!r} ({e})") from e
    return dt.astimezone(timezone.utc)


def format_rfc3339(dt: datetime) -> str:
    """Format a datetime as fixed-width UTC RFC 3339 text.

    Naive datetimes are assumed to be UTC. The fixed width keeps
    lexicographic order equal to chronological order in the store.
    Example: 2024-02-20 10:00:01.2 UTC -> '2024-02-20T10:00:01.200000+00:00'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="microseconds")


def normalize_rfc3339(value: str) -> str:
    """Round-trip a timestamp string into the canonical stored form."""
    return format_rfc3339(parse_rfc3339(value))


# Request-body timestamp type: only RFC 3339 strings are accepted, where
# pydantic's plain datetime would also take unix numbers and naive values.
Rfc3339Datetime = Annotated[datetime, BeforeValidator(parse_rfc3339)]
