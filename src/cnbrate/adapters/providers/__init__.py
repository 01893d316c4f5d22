# src/cnbrate/adapters/providers/__init__.py
"""
Provider Adapters - External Feed Clients

This package contains adapters that download raw rate feeds.
All providers implement the FeedProvider interface.
"""

from cnbrate.adapters.providers.base import FeedProvider
from cnbrate.adapters.providers.cnb import CnbFeedProvider

__all__ = [
    "FeedProvider",
    "CnbFeedProvider",
]
