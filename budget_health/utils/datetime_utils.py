"""Helpers for timestamp normalization."""

from datetime import date, datetime, time, timedelta


def coerce_datetime(value) -> datetime:
    """Normalize stored timestamps to naive local datetimes.

    SQLite stores timestamps as epoch seconds, ISO strings, or native values
    depending on the writer. Values carrying an offset (including a trailing
    ``Z``) are converted to local time and stripped of their tzinfo so they
    compare with the naive evaluation times used everywhere else.

    Args:
        value: Raw timestamp from SQL or adapters.

    Returns:
        datetime: Normalized naive timestamp.

    Raises:
        ValueError: If the value cannot be interpreted as a timestamp.
    """
    if isinstance(value, datetime):
        return _to_naive_local(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value)
    if isinstance(value, str):
        cleaned = value.strip()
        if cleaned.isdigit():
            return datetime.fromtimestamp(int(cleaned))
        if cleaned.endswith(("Z", "z")):
            cleaned = f"{cleaned[:-1]}+00:00"
        return _to_naive_local(datetime.fromisoformat(cleaned))
    raise ValueError(f"Unsupported timestamp value: {value!r}")


def _to_naive_local(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def days_between(start: datetime, end: datetime) -> int:
    """Return the whole number of days from start to end (floored)."""
    return (end - start) // timedelta(days=1)


__all__ = ["coerce_datetime", "days_between"]
