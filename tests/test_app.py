# tests/test_app.py
"""
CLI Tests - Unit Tests for the Command Line Entry Point

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cnbrate.app (main, build_parser)
- unittest.mock (patch provider and logging setup)
- pytest (testing framework)
"""
from unittest.mock import Mock, patch  # Mock objects and patching for testing without real dependencies

import pytest  # Testing framework for writing and running tests

from cnbrate.app import build_parser, main
from cnbrate.config.settings import DEFAULT_CURRENCIES
from cnbrate.domain.errors import FeedTimeoutError


@pytest.fixture
def provider(full_feed):
    with patch('cnbrate.app.setup_logging'), patch('cnbrate.app.CnbFeedProvider') as provider_class:
        instance = Mock()
        instance.fetch_raw_feed.return_value = full_feed
        provider_class.return_value = instance
        yield instance


class TestMain:
    def test_prints_requested_rates(self, provider, capsys):
        assert main(["usd", "JPY", "xyz"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("CZK/JPY=7.531")
        assert lines[1].startswith("CZK/USD=0.04813")

    def test_comma_separated_codes_and_decimals(self, provider, capsys):
        assert main(["usd,eur", "--decimals", "3"]) == 0
        assert capsys.readouterr().out.splitlines() == ["CZK/EUR=0.041", "CZK/USD=0.048"]

    def test_defaults_to_configured_currencies(self, provider, capsys):
        assert main([]) == 0

        codes = [line.split("=")[0].split("/")[1] for line in capsys.readouterr().out.splitlines()]
        assert codes == ["EUR", "JPY", "USD"]
        assert set(codes) <= set(DEFAULT_CURRENCIES)

    def test_failure_prints_single_message(self, provider, capsys):
        provider.fetch_raw_feed.side_effect = FeedTimeoutError("Request to CNB API timed out after 10 seconds.")

        assert main(["USD"]) == 1

        out = capsys.readouterr().out
        assert out == "Could not retrieve exchange rates: 'Request to CNB API timed out after 10 seconds.'.\n"

    def test_parse_failure_prints_line_number(self, provider, capsys):
        provider.fetch_raw_feed.return_value = (
            "17 Oct 2026 #201\nCountry|Currency|Amount|Code|Rate\nUSA|dollar|abc|USD|20.774\n"
        )

        assert main(["USD"]) == 1
        assert "Line 3: Failed to parse Amount 'abc' as integer." in capsys.readouterr().out

    def test_oversized_amount_prints_message_instead_of_traceback(self, provider, capsys):
        provider.fetch_raw_feed.return_value = (
            "17 Oct 2026 #201\nCountry|Currency|Amount|Code|Rate\nUSA|dollar|" + "1" * 5000 + "|USD|20.774\n"
        )

        assert main(["USD"]) == 1
        assert "Line 3: Failed to parse Amount" in capsys.readouterr().out

    def test_negative_decimals_rejected(self, provider, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["USD", "--decimals", "-1"])

        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert err.startswith("usage: cnbrate")
        assert "--decimals must not be negative" in err
        provider.fetch_raw_feed.assert_not_called()


class TestBuildParser:
    def test_arguments(self):
        args = build_parser().parse_args(["usd", "eur", "-d", "2", "-v"])
        assert args.currencies == ["usd", "eur"]
        assert args.decimals == 2
        assert args.verbose is True
