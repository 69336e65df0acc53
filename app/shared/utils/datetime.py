"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
"""

from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12
        - datetime.now(UTC) - correct but verbose

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at request and persistence boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    # Aware datetime - convert to UTC
    return dt.astimezone(UTC)


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into a UTC-aware datetime.

    Accepts a trailing "Z" and date-only values. Values without an offset
    are taken as UTC. An instant at the edge of the calendar that has no UTC
    representation (e.g. "9999-12-31T23:59:59-01:00") keeps its own offset;
    it is still aware and compares correctly.

    Args:
        value: ISO-8601 string (e.g. "2025-01-01T12:00:00Z")

    Returns:
        Aware datetime, in UTC whenever representable

    Raises:
        ValueError: If the value is not a valid ISO-8601 timestamp
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    try:
        return ensure_utc(parsed)
    except OverflowError:
        return parsed


def to_iso_utc(dt: datetime) -> str:
    """
    Format a datetime as an ISO-8601 UTC string with a "Z" suffix.

    Matches the format the platform and browsers emit
    (e.g. "2025-01-01T12:00:00.000Z").
    """
    utc = ensure_utc(dt)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def resolve_timezone(name: str | None) -> tzinfo:
    """
    Return the zone for an IANA name, or the server's local zone when name is empty.
    """
    if name:
        return ZoneInfo(name)
    return datetime.now().astimezone().tzinfo
