# app/timestamps.py
"""ISO-8601 timestamp helpers shared by storage and the API."""

import re
from datetime import datetime, timezone

from pydantic import TypeAdapter

# Lax datetime parsing reads bare numbers as Unix epochs
_NUMERIC = re.compile(r"\s*[+-]?\d+(\.\d*)?\s*")

_datetime_adapter = TypeAdapter(datetime)


def as_utc(value: datetime) -> datetime:
    """Convert to UTC; naive timestamps are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    text = as_utc(value).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 string into an aware UTC datetime.

    Raises:
        ValueError: If the string is not an ISO-8601 date or timestamp
            (pydantic's ``ValidationError`` is a ``ValueError``).
        OverflowError: If the instant cannot be represented in UTC.
    """
    if _NUMERIC.fullmatch(value):
        raise ValueError(f"not an ISO-8601 timestamp: {value!r}")
    return as_utc(_datetime_adapter.validate_python(value))
