# src/cnbrate/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains domain models and the error taxonomy.
No dependencies on infrastructure or external systems.
"""

from cnbrate.domain.models import (
    DOMESTIC_CURRENCY,
    Currency,
    ExchangeRate,
    RawRateRecord,
)
from cnbrate.domain.errors import (
    CnbRateError,
    EmptyFeedError,
    EmptyInputError,
    FeedConnectionError,
    FeedHttpStatusError,
    FeedParsingError,
    FeedTimeoutError,
    ParseFailure,
    RowError,
    StructuralError,
    UpstreamFetchError,
)

__all__ = [
    "Currency",
    "RawRateRecord",
    "ExchangeRate",
    "DOMESTIC_CURRENCY",
    "CnbRateError",
    "ParseFailure",
    "FeedParsingError",
    "EmptyInputError",
    "StructuralError",
    "RowError",
    "UpstreamFetchError",
    "FeedConnectionError",
    "FeedHttpStatusError",
    "FeedTimeoutError",
    "EmptyFeedError",
]
