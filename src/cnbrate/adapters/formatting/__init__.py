# src/cnbrate/adapters/formatting/__init__.py
"""
Formatting Adapters - Console Output

This package renders exchange rates and errors as text.
"""

from cnbrate.adapters.formatting.formatter import format_error, format_rate, format_rates

__all__ = ["format_rate", "format_rates", "format_error"]
