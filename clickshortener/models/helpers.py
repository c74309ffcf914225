from datetime import datetime, UTC


__all__ = ['parse_timestamp', 'format_timestamp']


def format_timestamp(value: datetime) -> str:
    """Serialize a datetime as an ISO-8601 string."""
    return value.isoformat()


def parse_timestamp(value: str) -> datetime:
    """Revive an ISO-8601 string into a timezone-aware datetime

    Accepts the trailing 'Z' designator and treats naive timestamps as UTC.

    Raises:
        TypeError: If value is not a string.
        ValueError: If value is not a valid ISO-8601 timestamp.

    Example:
        >>> parse_timestamp('2025-10-15T12:00:00.000Z')
        datetime.datetime(2025, 10, 15, 12, 0, tzinfo=datetime.timezone.utc)
    """
    if not isinstance(value, str):
        raise TypeError(f'Timestamp must be of type string (given type: {type(value)}).')

    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
