# src/cnbrate/adapters/providers/base.py
"""
Base Provider Interface for Raw Feed Providers

This module defines the abstract base class for all feed providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- cnbrate.adapters.providers.cnb (CnbFeedProvider implements FeedProvider)
- cnbrate.application.rates_service (depends on FeedProvider)
- tests.test_rates_service (stub providers)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod

class FeedProvider(ABC):
    @abstractmethod
    def fetch_raw_feed(self) -> str:
        """Return the raw feed body, or raise UpstreamFetchError."""
        raise NotImplementedError
