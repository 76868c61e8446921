"""
Error types raised by sitewriter.

Every failure is raised to the immediate caller; nothing here is logged
or replaced by a default value.
"""
from __future__ import annotations

from typing import Any, Optional


class SitemapError(Exception):
    """Base class for all sitewriter errors."""


class InvalidUrlError(SitemapError, ValueError):
    """A location string is not an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        self.reason = reason
        message = f"Invalid URL: {url!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MissingRequiredFieldError(SitemapError):
    """A draft entry was finalized without a required field."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class OutOfRangeError(SitemapError, ValueError):
    """A priority or lastmod value lies outside its allowed bounds."""

    def __init__(self, value: Any, minimum: Any, maximum: Any) -> None:
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Value {value!r} is out of range [{minimum}, {maximum}]"
        )


class NaiveTimestampError(SitemapError, ValueError):
    """A datetime without tzinfo was given as lastmod."""


class SitemapEncodingError(SitemapError):
    """
    The document could not be encoded or the output sink rejected it.

    `entries_written` is the number of complete <url> blocks that reached
    the sink before the failure (0 for in-memory rendering).
    """

    def __init__(self, message: str, entries_written: int = 0, cause: Optional[BaseException] = None) -> None:
        self.entries_written = entries_written
        self.cause = cause
        super().__init__(message)


class InvalidEntryError(SitemapError, TypeError):
    """
    Something other than a UrlEntry was passed to the writer.

    Raised before any of that item reaches the sink; `entries_written`
    counts the complete <url> blocks already written.
    """

    def __init__(self, item: object, entries_written: int = 0) -> None:
        self.item = item
        self.entries_written = entries_written
        super().__init__(f"Expected UrlEntry, got {type(item).__name__}")
