# src/cnbrate/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Currencies
- Raw rate records parsed from the CNB feed
- Normalized exchange rates

Files that USE this module:
- cnbrate.adapters.parsing.cnb_parser (produces RawRateRecord)
- cnbrate.application.* (normalizer and service produce ExchangeRate)
- cnbrate.adapters.formatting.formatter (renders ExchangeRate)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from decimal import Decimal  # Exact decimal arithmetic for rates


@dataclass(frozen=True)
class Currency:
    """
    ISO-style currency identified by its code.

    The code is stored upper-case, so ``Currency("usd") == Currency("USD")``.
    """
    code: str

    def __post_init__(self) -> None:
        if self.code is None or not str(self.code).strip():
            raise ValueError("Currency code must not be empty")
        object.__setattr__(self, "code", str(self.code).strip().upper())

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class RawRateRecord:
    """
    One data row of the CNB daily feed.

    Attributes:
        country: Country name as published (e.g. "USA")
        currency_name: Currency name as published (e.g. "dollar")
        amount: Number of foreign units the rate applies to (positive)
        code: Upper-case three-character currency code
        rate: CZK paid for ``amount`` units of the currency (positive)
    """
    country: str
    currency_name: str
    amount: int
    code: str
    rate: Decimal


@dataclass(frozen=True)
class ExchangeRate:
    """
    Normalized exchange rate: 1 unit of source currency = value units of target.

    Attributes:
        source_currency: Domestic currency (always CZK for the CNB feed)
        target_currency: Requested foreign currency
        value: Units of target currency per one unit of source currency
    """
    source_currency: Currency
    target_currency: Currency
    value: Decimal

    def __str__(self) -> str:
        return f"{self.source_currency}/{self.target_currency}={self.value}"


DOMESTIC_CURRENCY = Currency("CZK")
