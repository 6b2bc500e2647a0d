"""
WORKLOG — Temporal helpers.

ISO rendering, time-zone resolution and parsing of the date bounds
accepted on the command line.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from worklog.exceptions import InvalidDateError


def ensure_aware(ts: datetime) -> datetime:
    """Interpret naive datetimes as UTC."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def parse_iso(value: str) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing ``Z``."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return ensure_aware(datetime.fromisoformat(value))


def to_iso_z(ts: datetime) -> str:
    """Render as UTC with millisecond precision, e.g. ``2025-01-15T12:00:00.000Z``."""
    utc = ensure_aware(ts).astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Resolve an IANA zone name. None/empty means local time.

    Raises:
        InvalidDateError: If the zone name is unknown.
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidDateError(f"Unknown time zone: {name!r}") from e


def localize(ts: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert to the given zone, or to the local zone when tz is None."""
    return ensure_aware(ts).astimezone(tz)


def parse_date_bound(value: str, tz: tzinfo | None = None, end_of_day: bool = False) -> datetime:
    """Parse a CLI date bound.

    Args:
        value: ``YYYY-MM-DD`` or a full ISO 8601 timestamp.
        tz: Zone used for date-only values and naive timestamps (None = local).
        end_of_day: For date-only values, return the last instant of the day
                    instead of midnight.

    Returns:
        An aware datetime.

    Raises:
        InvalidDateError: If the value is not a recognizable date.
    """
    value = value.strip()
    try:
        if len(value) == 10:
            day = date.fromisoformat(value)
            naive = datetime.combine(day, time.max if end_of_day else time.min)
            return _attach_zone(naive, tz)
        if value.endswith("Z"):
            return parse_iso(value)
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateError(f"Invalid date: {value!r} (expected YYYY-MM-DD or ISO 8601)") from e

    if parsed.tzinfo is None:
        return _attach_zone(parsed, tz)
    return parsed


def _attach_zone(naive: datetime, tz: tzinfo | None) -> datetime:
    if tz is None:
        # Local wall-clock time
        return naive.astimezone()
    return naive.replace(tzinfo=tz)
