"""Timestamp parsing for the reading table."""

from __future__ import annotations

import re
from datetime import datetime

from ..errors import ParseError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# strptime accepts "2018-1-5 8:42:0", so widths are checked first
_TIMESTAMP_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}")


def parse_timestamp(text: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` into a naive datetime.

    Raises:
        ParseError: on any deviation from the format or out-of-range fields

    Examples:
        >>> parse_timestamp("2018-11-27 08:42:00")
        datetime.datetime(2018, 11, 27, 8, 42)
    """
    if not _TIMESTAMP_RE.fullmatch(text):
        raise ParseError(text, f"expected {TIMESTAMP_FORMAT}")
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise ParseError(text, str(exc)) from exc


def format_timestamp(dt: datetime) -> str:
    """Format a reading timestamp at minute precision."""
    return dt.strftime("%Y-%m-%d %H:%M")
