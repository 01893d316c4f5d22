# src/cnbrate/__init__.py
"""
CNBRate - Czech National Bank Exchange Rate Client

Downloads the CNB daily exchange rate fixing, validates and parses its
pipe-delimited text format, and returns rates expressed as
"1 CZK = X units of foreign currency" for the requested currencies.
"""

__version__ = "1.0.0"
