# src/cnbrate/application/normalizer.py
"""
Rate Normalizer - Filter and Invert Parsed Feed Records

The CNB feed states how many CZK buy ``amount`` units of a foreign currency.
This module turns the records the caller asked for into "1 CZK = X units"
exchange rates, with X = amount / rate computed in decimal arithmetic.

Currencies that were requested but are missing from the feed are silently
ignored; the feed legitimately omits many currencies.

Files that USE this module:
- cnbrate.application.rates_service (ExchangeRateService.get_exchange_rates)
- tests.test_normalizer (unit tests)

Files that this module USES:
- cnbrate.domain.models (Currency, RawRateRecord, ExchangeRate)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

from decimal import Context, Decimal  # Decimal division with explicit precision
from typing import FrozenSet, Iterable, List, Union  # Type hints

from cnbrate.domain.models import DOMESTIC_CURRENCY, Currency, ExchangeRate, RawRateRecord

# Same precision as the decimal module default, independent of the thread's context
RATE_CONTEXT = Context(prec=28)


def requested_codes(requested: Iterable[Union[str, Currency]]) -> FrozenSet[str]:
    """
    Build the case-insensitive lookup set for requested currencies.

    Args:
        requested: Currency codes (any case) or Currency objects

    Returns:
        Set of upper-cased, stripped codes; blank strings are skipped
    """
    codes = set()
    for item in requested:
        code = item.code if isinstance(item, Currency) else str(item).strip().upper()
        if code:
            codes.add(code)
    return frozenset(codes)


def normalize(
    records: Iterable[RawRateRecord],
    requested: Iterable[Union[str, Currency]],
    *,
    domestic: Currency = DOMESTIC_CURRENCY,
) -> List[ExchangeRate]:
    """
    Produce normalized exchange rates for the requested currencies.

    Output follows feed order. Requesting the same code in several cases
    yields a single rate because membership, not the request list, drives output.

    Args:
        records: Parsed feed records
        requested: Currency codes (any case) or Currency objects
        domestic: Source currency of every produced rate

    Returns:
        One ExchangeRate per matching record
    """
    wanted = requested_codes(requested)
    if not wanted:
        return []

    return [
        ExchangeRate(
            source_currency=domestic,
            target_currency=Currency(record.code),
            value=RATE_CONTEXT.divide(Decimal(record.amount), record.rate),
        )
        for record in records
        if record.code.upper() in wanted
    ]
