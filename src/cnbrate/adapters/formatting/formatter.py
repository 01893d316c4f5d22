# src/cnbrate/adapters/formatting/formatter.py
"""
Rate Formatter - Console Text Formatting

This module renders normalized exchange rates and pipeline errors as plain
console text.

Files that USE this module:
- cnbrate.app (prints rates and errors)
- tests.test_formatter (unit tests)

Files that this module USES:
- cnbrate.domain.models (ExchangeRate)
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from cnbrate.domain.models import ExchangeRate


def _fmt_value(value: Decimal, decimals: Optional[int]) -> str:
    """
    Format a rate value, optionally rounded half-up to a fixed number of places.

    Args:
        value: Rate value
        decimals: Decimal places, or None for the full value

    Returns:
        Value as text
    """
    if decimals is None:
        return str(value)
    if decimals < 0:
        raise ValueError("decimals must not be negative")
    return str(value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP))


def format_rate(rate: ExchangeRate, decimals: Optional[int] = None) -> str:
    """
    Format one exchange rate as "CZK/USD=0.0481".

    Args:
        rate: ExchangeRate to format
        decimals: Optional number of decimal places for display

    Returns:
        Single-line text
    """
    return f"{rate.source_currency}/{rate.target_currency}={_fmt_value(rate.value, decimals)}"


def format_rates(rates: Iterable[ExchangeRate], decimals: Optional[int] = None) -> str:
    """Format several rates, one per line."""
    return "\n".join(format_rate(rate, decimals) for rate in rates)


def format_error(error: BaseException) -> str:
    """Format a pipeline failure for the console."""
    return f"Could not retrieve exchange rates: '{error}'."
