"""Locale-tolerant decimal parsing."""

from __future__ import annotations

import re

from ..errors import ParseError

# 符号・数字・区切り文字（"." または ","）を最大1つ
_DECIMAL_RE = re.compile(r"[+-]?[0-9]*[.,]?[0-9]*")


def normalize_decimal(text: str) -> float:
    """Convert ``-10,6`` / ``-7.8`` style strings to float.

    Args:
        text: digits with an optional leading sign and at most one ``.`` or ``,``

    Returns:
        float: the parsed value

    Raises:
        ParseError: no digits, more than one separator, or stray characters
    """
    value = text.strip()
    if not _DECIMAL_RE.fullmatch(value):
        raise ParseError(text, "not a decimal number")
    if not any(ch.isdigit() for ch in value):
        raise ParseError(text, "no digits")
    return float(value.replace(",", "."))
