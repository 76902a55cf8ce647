"""Wall-clock timestamps for response payloads.

Invariants:
    - Always UTC, ISO-8601, millisecond precision, "Z" suffix
      (e.g. 2025-01-31T12:00:00.123Z)
"""

from datetime import datetime, timezone


def format_timestamp(moment: datetime) -> str:
    """Render an aware datetime as a UTC ISO-8601 string ending in Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_timestamp() -> str:
    """Current UTC time, formatted for responses."""
    return format_timestamp(datetime.now(timezone.utc))
