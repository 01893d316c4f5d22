# tests/conftest.py
"""
Shared Test Fixtures - Feed Samples and Record Builders

Files that USE this module:
- pytest (fixtures are injected into test functions)

Files that this module USES:
- cnbrate.domain.models (RawRateRecord for test data)
"""
from decimal import Decimal  # Exact decimal values for test records
from pathlib import Path  # Locate sample feed files

import pytest  # Testing framework for writing and running tests

from cnbrate.domain.models import RawRateRecord  # Domain model for test data

DATA_DIR = Path(__file__).parent / "data"


def load_feed(name: str) -> str:
    """Read a sample feed without newline translation."""
    return (DATA_DIR / name).read_bytes().decode("utf-8")


def usd() -> RawRateRecord:
    return RawRateRecord("USA", "dollar", 1, "USD", Decimal("20.774"))


def eur() -> RawRateRecord:
    return RawRateRecord("EMU", "euro", 1, "EUR", Decimal("24.280"))


def jpy() -> RawRateRecord:
    return RawRateRecord("Japan", "yen", 100, "JPY", Decimal("13.278"))


def gbp() -> RawRateRecord:
    return RawRateRecord("United Kingdom", "pound", 1, "GBP", Decimal("28.022"))


def idr() -> RawRateRecord:
    return RawRateRecord("Indonesia", "rupiah", 1000, "IDR", Decimal("1.238"))


@pytest.fixture
def full_feed() -> str:
    return load_feed("valid-full-response.txt")
