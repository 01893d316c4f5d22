# src/cnbrate/adapters/parsing/cnb_parser.py
"""
CNB Feed Parser - Pipe-Delimited Daily Rate Text

This module parses the Czech National Bank daily exchange rate feed into
RawRateRecord objects. The feed looks like:

    18 Oct 2026 #201
    Country|Currency|Amount|Code|Rate
    Australia|dollar|1|AUD|13.986
    Japan|yen|100|JPY|13.278

The first line (date and sequence number) is ignored, the second must be the
column header, every following non-blank line is a data row. Parsing is
fail-fast: the first violation aborts the whole parse.

Files that USE this module:
- cnbrate.application.rates_service (ExchangeRateService parses fetched text)
- tests.test_parser (unit tests)

Files that this module USES:
- cnbrate.domain.models (RawRateRecord)
- cnbrate.domain.errors (EmptyInputError, StructuralError, RowError)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
import re  # Regular expressions for locale-independent number formats
from decimal import Decimal  # Exact decimal arithmetic for rates
from typing import List, Optional  # Type hints for lists and optional values

from cnbrate.domain.errors import (
    EmptyInputError,
    ParseFailure,
    RowError,
    StructuralError,
)
from cnbrate.domain.models import RawRateRecord

log = logging.getLogger(__name__)

HEADER = "Country|Currency|Amount|Code|Rate"
SEPARATOR = "|"
COLUMN_COUNT = 5
HEADER_LINES = 2

# Amounts are 32-bit signed integers; longer digit strings never reach int()
MAX_AMOUNT = 2**31 - 1
MAX_AMOUNT_DIGITS = len(str(MAX_AMOUNT))

# ASCII digits only; int()/Decimal() would also accept underscores, exponents and
# non-Latin digits, which the feed never uses.
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")
_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)$")


def parse_row(line: str) -> RawRateRecord:
    """
    Parse a single data row into a RawRateRecord.

    Args:
        line: Trimmed data row, e.g. "USA|dollar|1|USD|20.774"

    Returns:
        RawRateRecord for the row

    Raises:
        RowError: If the row is malformed (raised without line number)
    """
    columns = line.split(SEPARATOR)
    if len(columns) != COLUMN_COUNT:
        raise RowError(
            f"Invalid number of columns. Expected {COLUMN_COUNT}, but got {len(columns)}.",
            ParseFailure.WRONG_COLUMN_COUNT,
            value=str(len(columns)),
            raw_row=line,
        )

    country, currency_name, amount_text, code, rate_text = (c.strip() for c in columns)

    if not _INTEGER_RE.match(amount_text) or len(amount_text.lstrip("+-")) > MAX_AMOUNT_DIGITS:
        raise RowError(
            f"Failed to parse Amount '{amount_text}' as integer.",
            ParseFailure.BAD_AMOUNT,
            value=amount_text,
            raw_row=line,
        )
    amount = int(amount_text)
    if abs(amount) > MAX_AMOUNT:
        raise RowError(
            f"Failed to parse Amount '{amount_text}' as integer.",
            ParseFailure.BAD_AMOUNT,
            value=amount_text,
            raw_row=line,
        )
    if amount <= 0:
        raise RowError(
            f"Amount must be positive, but got {amount}.",
            ParseFailure.NON_POSITIVE_AMOUNT,
            value=amount_text,
            raw_row=line,
        )

    if not _DECIMAL_RE.match(rate_text):
        raise RowError(
            f"Failed to parse Rate '{rate_text}' as decimal.",
            ParseFailure.BAD_RATE,
            value=rate_text,
            raw_row=line,
        )
    rate = Decimal(rate_text)
    if rate <= 0:
        raise RowError(
            f"Rate must be positive, but got {rate}.",
            ParseFailure.NON_POSITIVE_RATE,
            value=rate_text,
            raw_row=line,
        )

    if len(code) != 3:
        raise RowError(
            f"Invalid currency code '{code}'. Expected 3-letter code.",
            ParseFailure.INVALID_CODE,
            value=code,
            raw_row=line,
        )

    return RawRateRecord(
        country=country,
        currency_name=currency_name,
        amount=amount,
        code=code.upper(),
        rate=rate,
    )


class CnbFeedParser:
    """Parser for the CNB pipe-separated daily rate feed."""

    header = HEADER

    def parse(self, raw_text: Optional[str]) -> List[RawRateRecord]:
        """
        Parse raw feed text into rate records.

        Args:
            raw_text: Complete feed body as returned by the provider

        Returns:
            One RawRateRecord per data row, in input order

        Raises:
            EmptyInputError: If raw_text is None, empty or whitespace only
            StructuralError: If there are fewer than 3 lines or the header is wrong
            RowError: If any data row is malformed (carries line number and raw row)
        """
        if raw_text is None or not raw_text.strip():
            log.error("Cannot parse empty or null data")
            raise EmptyInputError()

        lines = [line.strip() for line in raw_text.split("\n")]
        lines = [line for line in lines if line]

        if len(lines) < 3:
            log.error("Invalid data format. Expected at least 3 lines, got %d", len(lines))
            raise StructuralError(
                "Invalid data format. Expected at least 3 lines (date header, "
                f"column headers, data), but got {len(lines)}.",
                ParseFailure.TOO_FEW_LINES,
                got=len(lines),
            )

        self._validate_header(lines[1])

        records: List[RawRateRecord] = []
        for index, line in enumerate(lines[HEADER_LINES:], start=HEADER_LINES + 1):
            records.append(self._parse_located(line, index))

        log.debug("Parsed %d rate records", len(records))
        return records

    def _validate_header(self, header_line: str) -> None:
        if header_line.casefold() != self.header.casefold():
            log.error("Invalid column headers. Expected '%s', got '%s'", self.header, header_line)
            raise StructuralError(
                f"Invalid column headers. Expected '{self.header}', but got '{header_line}'.",
                ParseFailure.INVALID_HEADER,
                expected=self.header,
                actual=header_line,
            )

    @staticmethod
    def _parse_located(line: str, line_number: int) -> RawRateRecord:
        """Parse one row, attaching line number and raw text to any failure."""
        try:
            return parse_row(line)
        except RowError as e:
            log.error("Failed to parse line %d: %s", line_number, e.detail)
            raise e.at(line_number, line) from e
        except Exception as e:
            log.error("Failed to parse line %d: %s", line_number, e)
            raise RowError(
                f"Failed to parse row: {e}",
                ParseFailure.UNREADABLE_ROW,
                raw_row=line,
                line_number=line_number,
            ) from e


_default_parser = CnbFeedParser()


def parse_feed(raw_text: Optional[str]) -> List[RawRateRecord]:
    """Parse raw feed text with a default CnbFeedParser."""
    return _default_parser.parse(raw_text)
