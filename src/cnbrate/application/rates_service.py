# src/cnbrate/application/rates_service.py
"""
Rates Service - Fetch, Parse and Normalize CNB Exchange Rates

This module wires the feed provider, the feed parser and the rate normalizer
into the single operation callers use: get the CZK-based rates for a set of
currency codes.

Files that USE this module:
- cnbrate.app (CLI calls ExchangeRateService.get_exchange_rates)
- tests.test_rates_service (unit tests)

Files that this module USES:
- cnbrate.adapters.providers (FeedProvider, CnbFeedProvider)
- cnbrate.adapters.parsing.cnb_parser (CnbFeedParser)
- cnbrate.application.normalizer (normalize)
- cnbrate.domain.models (Currency, ExchangeRate)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages
from typing import Iterable, List, Optional, Union  # Type hints

from cnbrate.adapters.parsing.cnb_parser import CnbFeedParser  # CNB text feed parser
from cnbrate.adapters.providers.base import FeedProvider  # Provider interface
from cnbrate.adapters.providers.cnb import CnbFeedProvider  # Default HTTP provider
from cnbrate.application.normalizer import normalize  # Filter and invert records
from cnbrate.domain.models import DOMESTIC_CURRENCY, Currency, ExchangeRate

log = logging.getLogger(__name__)


class ExchangeRateService:
    """
    High-level service returning rates explicitly published by the CNB.

    No calculated, inverse or cross rates are produced; currencies the feed
    does not list are silently ignored.
    """
    def __init__(self, provider: FeedProvider, parser: Optional[CnbFeedParser] = None):
        """
        Initialize the service.

        Args:
            provider: FeedProvider supplying raw feed text (required)
            parser: Optional parser (defaults to a new CnbFeedParser)

        Raises:
            ValueError: If provider is None
        """
        if provider is None:
            raise ValueError("provider is required")
        self.provider = provider
        self.parser = parser or CnbFeedParser()

    def get_exchange_rates(
        self, requested_currency_codes: Iterable[Union[str, Currency]]
    ) -> List[ExchangeRate]:
        """
        Fetch the feed and return normalized rates for the requested codes.

        Args:
            requested_currency_codes: Currency codes (any case) or Currency objects

        Returns:
            ExchangeRate list in feed order

        Raises:
            UpstreamFetchError: If the provider fails (propagated unchanged)
            FeedParsingError: If the feed is malformed (propagated unchanged)
        """
        requested = list(requested_currency_codes)
        log.debug("Retrieving exchange rates for %d requested currencies", len(requested))

        raw_text = self.provider.fetch_raw_feed()
        records = self.parser.parse(raw_text)
        rates = normalize(records, requested, domestic=DOMESTIC_CURRENCY)

        log.debug("Matched %d of %d feed records", len(rates), len(records))
        return rates


def get_exchange_rates(
    requested_currency_codes: Iterable[Union[str, Currency]],
) -> List[ExchangeRate]:
    """Fetch rates using a CnbFeedProvider configured from settings."""
    return ExchangeRateService(CnbFeedProvider()).get_exchange_rates(requested_currency_codes)
