# src/cnbrate/domain/errors.py
"""
Domain Errors - Feed Parsing and Upstream Fetch Exceptions

This module defines the exception taxonomy for the whole pipeline:
content-validation failures raised by the feed parser and opaque
upstream failures raised by the feed providers.

Files that USE this module:
- cnbrate.adapters.parsing.cnb_parser (raises FeedParsingError subclasses)
- cnbrate.adapters.providers.cnb (raises UpstreamFetchError subclasses)
- cnbrate.app (reports CnbRateError to the console)
- tests.* (asserts on error types and fields)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from enum import Enum  # Enumeration base for failure reasons
from typing import Optional  # Type hints for optional values


class CnbRateError(Exception):
    """Base exception for all pipeline errors."""
    pass


class ParseFailure(str, Enum):
    """Reason a feed could not be parsed."""

    EMPTY_INPUT = "empty_input"
    TOO_FEW_LINES = "too_few_lines"
    INVALID_HEADER = "invalid_header"
    WRONG_COLUMN_COUNT = "wrong_column_count"
    BAD_AMOUNT = "bad_amount"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    BAD_RATE = "bad_rate"
    NON_POSITIVE_RATE = "non_positive_rate"
    INVALID_CODE = "invalid_code"
    UNREADABLE_ROW = "unreadable_row"


class FeedParsingError(CnbRateError):
    """
    Raised when the raw feed text violates the expected format.

    Attributes:
        reason: ParseFailure describing the violation kind
        raw_row: Offending raw row text (row errors only)
        line_number: 1-based line number of the offending row (row errors only)
    """

    def __init__(
        self,
        message: str,
        reason: ParseFailure,
        raw_row: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.reason = reason
        self.raw_row = raw_row
        self.line_number = line_number


class EmptyInputError(FeedParsingError):
    """Raised when the feed is None, empty or whitespace only."""

    def __init__(self):
        super().__init__("Cannot parse empty or null data.", ParseFailure.EMPTY_INPUT)


class StructuralError(FeedParsingError):
    """Raised when the feed has too few lines or a wrong column header."""

    def __init__(
        self,
        message: str,
        reason: ParseFailure,
        got: Optional[int] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ):
        super().__init__(message, reason)
        self.got = got
        self.expected = expected
        self.actual = actual


class RowError(FeedParsingError):
    """
    Raised when a single data row is malformed.

    A row error is first produced without location; the parser then builds a
    located copy with :meth:`at` once the row's line number is known.
    """

    def __init__(
        self,
        detail: str,
        reason: ParseFailure,
        value: Optional[str] = None,
        raw_row: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        message = detail if line_number is None else f"Line {line_number}: {detail}"
        super().__init__(message, reason, raw_row=raw_row, line_number=line_number)
        self.detail = detail
        self.value = value

    def at(self, line_number: int, raw_row: str) -> "RowError":
        """Return a new RowError carrying the row's line number and raw text."""
        return RowError(
            self.detail,
            self.reason,
            value=self.value,
            raw_row=self.raw_row if self.raw_row is not None else raw_row,
            line_number=line_number,
        )


class UpstreamFetchError(CnbRateError):
    """Raised when the raw feed cannot be retrieved from the source."""
    pass


class FeedConnectionError(UpstreamFetchError):
    """Raised when the source cannot be reached."""
    pass


class FeedHttpStatusError(UpstreamFetchError):
    """Raised when the source answers with a non-success HTTP status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class FeedTimeoutError(UpstreamFetchError):
    """Raised when the request to the source times out."""
    pass


class EmptyFeedError(UpstreamFetchError):
    """Raised when the source answers with an empty body."""
    pass
