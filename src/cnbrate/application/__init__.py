# src/cnbrate/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains application services that orchestrate domain logic.
No direct I/O dependencies - uses adapters through interfaces.
"""

from cnbrate.application.normalizer import normalize, requested_codes
from cnbrate.application.rates_service import ExchangeRateService, get_exchange_rates

__all__ = [
    "normalize",
    "requested_codes",
    "ExchangeRateService",
    "get_exchange_rates",
]
