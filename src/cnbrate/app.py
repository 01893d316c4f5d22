# src/cnbrate/app.py
"""
Application Entry Point - Command Line Interface

This module serves as the composition root for CNBRate.
It wires the provider, parser and service, then prints the rates.

Usage:
    python -m cnbrate                 # default currencies from settings
    python -m cnbrate usd eur jpy     # explicit currencies, any case
    python -m cnbrate USD --decimals 4

Files that USE this module:
- cnbrate.__main__ (module entry point)
- cnbrate console script

Files that this module USES:
- cnbrate.shared.logging_conf (setup_logging for logging configuration)
- cnbrate.config (settings for configuration management)
- cnbrate.adapters.providers.cnb (CnbFeedProvider)
- cnbrate.application.rates_service (ExchangeRateService)
- cnbrate.adapters.formatting.formatter (console output)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command line argument parsing
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import List, Optional, Sequence  # Type hints

from cnbrate.adapters.formatting.formatter import format_error, format_rate  # Console output
from cnbrate.adapters.providers.cnb import CnbFeedProvider  # CNB HTTP feed provider
from cnbrate.application.rates_service import ExchangeRateService  # Fetch, parse, normalize
from cnbrate.config import settings  # Application settings
from cnbrate.domain.errors import CnbRateError  # Base of all pipeline errors
from cnbrate.shared.logging_conf import setup_logging  # Configure logging with file rotation
from cnbrate.shared.validators import parse_currency_list  # Split comma-separated codes


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="cnbrate",
        description="Print CNB exchange rates as '1 CZK = X units of foreign currency'.",
    )
    parser.add_argument(
        "currencies",
        nargs="*",
        metavar="CODE",
        help="Currency codes to look up (comma or space separated, any case). "
             "Defaults to DEFAULT_CURRENCIES.",
    )
    parser.add_argument(
        "-d", "--decimals",
        type=int,
        default=None,
        help="Round displayed values to this many decimal places.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _requested_codes(args: argparse.Namespace) -> List[str]:
    codes: List[str] = []
    for item in args.currencies:
        codes.extend(parse_currency_list(item))
    return codes or list(settings.default_currencies)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the CLI.

    This function:
    1. Parses arguments and sets up logging from settings
    2. Builds the CNB provider and the rates service
    3. Prints one line per rate, or a single error message

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.decimals is not None and args.decimals < 0:
        parser.error("--decimals must not be negative")

    setup_logging(
        level=logging.DEBUG if args.verbose else settings.log_level_number,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)

    codes = _requested_codes(args)
    logger.debug("Starting exchange rate retrieval for %d currencies", len(codes))

    try:
        service = ExchangeRateService(CnbFeedProvider())
        rates = service.get_exchange_rates(codes)
    except CnbRateError as e:
        logger.error("Failed to retrieve exchange rates", exc_info=True)
        print(format_error(e))
        return 1

    logger.debug("Successfully retrieved %d exchange rates", len(rates))
    for rate in rates:
        print(format_rate(rate, args.decimals))
    return 0


if __name__ == "__main__":
    sys.exit(main())
