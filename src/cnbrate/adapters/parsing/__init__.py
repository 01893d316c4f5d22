# src/cnbrate/adapters/parsing/__init__.py
"""
Parsing Adapters - Feed Text Parsers

This package converts raw feed text into domain records.
"""

from cnbrate.adapters.parsing.cnb_parser import CnbFeedParser, parse_feed, parse_row

__all__ = ["CnbFeedParser", "parse_feed", "parse_row"]
