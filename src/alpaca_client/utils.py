"""
Utility functions for Alpaca client.

Conversions between API wire values and Python values.
"""

import re
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Union
from urllib.parse import quote

_FRACTION_RE = re.compile(r"\.(\d+)")


def sanitize_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    """Remove None values and empty strings from dictionary."""
    return {
        key: value for key, value in data.items()
        if value is not None and value != ""
    }


def parse_datetime(value: Union[str, int, float, datetime]) -> datetime:
    """
    Parse an RFC 3339 timestamp as returned by the API.

    Accepts a trailing ``Z`` and fractions of any precision (market data
    timestamps carry nanoseconds); fractions are truncated to microseconds.
    Numbers are taken as Unix seconds.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
    return datetime.fromisoformat(text)


def parse_date(value: Union[str, date]) -> date:
    """Parse a ``YYYY-MM-DD`` date (a timestamp is cut to its date)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value[:10])


def format_datetime(value: datetime) -> str:
    """Format a datetime as RFC 3339; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def path_segment(value: Any) -> str:
    """Quote a value for use as a single URL path segment."""
    if isinstance(value, Enum):
        value = value.value
    return quote(str(value), safe="")

