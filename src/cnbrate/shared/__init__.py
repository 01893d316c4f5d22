# src/cnbrate/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from cnbrate.shared.logging_conf import setup_logging
from cnbrate.shared.validators import (
    parse_currency_list,
    validate_currency_code,
    validate_http_url,
)

__all__ = [
    "setup_logging",
    "parse_currency_list",
    "validate_currency_code",
    "validate_http_url",
]
