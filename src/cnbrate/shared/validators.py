# src/cnbrate/shared/validators.py
"""
Input Validation Utilities - Configuration and Request Validation

This module provides validation helpers for configuration values and
user-supplied currency codes.

Files that USE this module:
- cnbrate.config.settings (uses validation functions in Settings field validators)
- cnbrate.adapters.providers.cnb (validates the feed URL)
- cnbrate.app (validates command line currency codes)

Files that this module USES:
- None (pure utility functions)
"""
import re
import urllib.parse
from typing import List, Optional


def validate_currency_code(code: Optional[str]) -> bool:
    """
    Validate a currency code (three ASCII letters, any case).

    Args:
        code: Currency code to validate

    Returns:
        True if valid, False otherwise
    """
    if not code:
        return False
    return bool(re.match(r'^[A-Za-z]{3}$', code.strip()))


def validate_http_url(url: Optional[str]) -> bool:
    """
    Validate that a URL uses http or https and has a host.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    if not url:
        return False
    parsed = urllib.parse.urlparse(url.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def parse_currency_list(value: Optional[str]) -> List[str]:
    """
    Split a comma or whitespace separated list of currency codes.

    Args:
        value: Raw list, e.g. "usd, EUR  jpy"

    Returns:
        Upper-cased codes in input order, blanks removed
    """
    if not value:
        return []
    return [part.strip().upper() for part in re.split(r'[,\s]+', value) if part.strip()]
