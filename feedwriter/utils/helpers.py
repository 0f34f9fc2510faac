"""
Shared utility helpers.
"""

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC datetime (timezone-aware)."""
    return datetime.now(timezone.utc)


def to_utc_datetime(value: datetime | date | int | float | str) -> datetime:
    """
    Coerce a date-like value into a timezone-aware UTC datetime.

    Accepts:
      - datetime → converted to UTC (naive values are taken as UTC)
      - date     → midnight UTC
      - int/float → POSIX timestamp
      - str      → ISO-8601 ('2013-02-14', '2013-02-14T10:00:00+02:00', ...)

    Raises:
        ValueError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, bool):
        raise ValueError(f"Not a date: {value!r}")
    elif isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str):
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    else:
        raise ValueError(f"Not a date: {value!r}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
