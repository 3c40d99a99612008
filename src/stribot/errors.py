"""Error types shared by the stribot core and its source adapters."""

from __future__ import annotations

from typing import Optional


class ExtractionError(Exception):
    """Base class for every failure surfaced by a temperature lookup."""

    kind = "extraction"


class TransportError(ExtractionError):
    """The HTTP request itself failed (connection, DNS, timeout...)."""

    kind = "transport"

    def __init__(self, url: str, cause: Exception) -> None:
        super().__init__(f"{url}: {cause}")
        self.url = url
        self.cause = cause


class StatusError(ExtractionError):
    """The server answered with a non-success status."""

    kind = "status"

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(f"HTTP status error. {url} returned {status_code}")
        self.url = url
        self.status_code = status_code


class NotFound(ExtractionError):
    """The expected pattern is absent from the body."""

    kind = "not_found"

    def __init__(self, what: str) -> None:
        super().__init__(f"HTML parsing error. {what} not found")
        self.what = what


class ParseError(ExtractionError):
    """Matched text does not decode to a valid number or timestamp."""

    kind = "parse"

    def __init__(self, text: str, reason: Optional[str] = None) -> None:
        message = f"HTML parsing error. cannot parse {text!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.text = text
        self.reason = reason


class EmptyInput(ExtractionError):
    """No reading survived row-level filtering."""

    kind = "empty"

    def __init__(self, message: str = "HTML parsing error. no temperature readings") -> None:
        super().__init__(message)
