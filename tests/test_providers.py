# tests/test_providers.py
"""
Provider Tests - Unit Tests for the CNB Feed Provider

This module contains unit tests for CnbFeedProvider, covering configuration
validation, successful downloads, error mapping and the retry policy.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- cnbrate.adapters.providers.cnb (CnbFeedProvider to test)
- cnbrate.domain.errors (UpstreamFetchError subclasses)
- unittest.mock (Mock for HTTP session mocking)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real API calls
import requests  # HTTP library (used for mocking responses)

from cnbrate.adapters.providers.cnb import CnbFeedProvider
from cnbrate.domain.errors import (
    EmptyFeedError,
    FeedConnectionError,
    FeedHttpStatusError,
    FeedTimeoutError,
    UpstreamFetchError,
)

URL = "https://example.test/daily.txt"
FEED = "17 Oct 2026 #201\nCountry|Currency|Amount|Code|Rate\nUSA|dollar|1|USD|20.774\n"


def ok_response(text=FEED):
    resp = Mock()
    resp.raise_for_status.return_value = None
    resp.text = text
    return resp


def status_response(status):
    resp = Mock()
    resp.status_code = status
    resp.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status} Error", response=resp)
    return resp


def make_provider(*responses, retry_count=2):
    session = Mock()
    session.get.side_effect = list(responses)
    provider = CnbFeedProvider(
        base_url=URL, timeout=5, retry_count=retry_count, retry_delay_seconds=0, session=session
    )
    return provider, session


class TestCnbFeedProviderInit:
    def test_init_with_defaults(self):
        provider = CnbFeedProvider()
        assert provider.timeout == 10
        assert provider.retry_count == 3
        assert provider.retry_delay_seconds == 2.0
        assert "cnb.cz" in provider.url
        assert provider.url.endswith("daily.txt")
        assert isinstance(provider.session, requests.Session)

    def test_init_with_overrides(self):
        session = Mock()
        provider = CnbFeedProvider(base_url=URL, timeout=3, retry_count=0, retry_delay_seconds=0.5, session=session)
        assert provider.url == URL
        assert provider.timeout == 3
        assert provider.retry_count == 0
        assert provider.session is session

    @pytest.mark.parametrize("kwargs", [
        {"base_url": "ftp://example.test/daily.txt"},
        {"base_url": "not a url"},
        {"timeout": 0},
        {"retry_count": -1},
        {"retry_delay_seconds": -0.1},
    ])
    def test_init_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            CnbFeedProvider(**kwargs)


class TestCnbFeedProviderFetch:
    def test_fetch_success(self):
        provider, session = make_provider(ok_response())

        assert provider.fetch_raw_feed() == FEED
        session.get.assert_called_once_with(URL, timeout=5)

    def test_response_decoded_as_utf8(self):
        resp = ok_response()
        provider, _ = make_provider(resp)
        provider.fetch_raw_feed()
        assert resp.encoding == "utf-8"

    @pytest.mark.parametrize("body", ["", "  \n "])
    def test_empty_body(self, body):
        provider, session = make_provider(ok_response(body))
        with pytest.raises(EmptyFeedError, match="empty response"):
            provider.fetch_raw_feed()
        assert session.get.call_count == 1

    @patch('cnbrate.adapters.providers.cnb.time.sleep')
    def test_timeout_after_retries(self, mock_sleep):
        timeout = requests.exceptions.Timeout("slow")
        provider, session = make_provider(timeout, timeout, timeout)

        with pytest.raises(FeedTimeoutError, match="timed out after 5 seconds"):
            provider.fetch_raw_feed()
        assert session.get.call_count == 3
        assert mock_sleep.call_count == 2

    @patch('cnbrate.adapters.providers.cnb.time.sleep')
    def test_connection_error_after_retries(self, mock_sleep):
        error = requests.exceptions.ConnectionError("refused")
        provider, session = make_provider(error, error, error)

        with pytest.raises(FeedConnectionError, match="Failed to fetch exchange rates"):
            provider.fetch_raw_feed()
        assert session.get.call_count == 3

    @patch('cnbrate.adapters.providers.cnb.time.sleep')
    def test_retry_then_success(self, mock_sleep):
        provider, session = make_provider(
            requests.exceptions.ConnectionError("reset"), status_response(503), ok_response()
        )

        assert provider.fetch_raw_feed() == FEED
        assert session.get.call_count == 3
        mock_sleep.assert_called_with(0)

    @patch('cnbrate.adapters.providers.cnb.time.sleep')
    @pytest.mark.parametrize("status", [408, 429, 500, 502])
    def test_transient_status_is_retried(self, mock_sleep, status):
        provider, session = make_provider(status_response(status), ok_response())
        assert provider.fetch_raw_feed() == FEED
        assert session.get.call_count == 2

    @patch('cnbrate.adapters.providers.cnb.time.sleep')
    @pytest.mark.parametrize("status", [400, 403, 404])
    def test_client_error_not_retried(self, mock_sleep, status):
        provider, session = make_provider(status_response(status), ok_response())

        with pytest.raises(FeedHttpStatusError) as exc_info:
            provider.fetch_raw_feed()
        assert exc_info.value.status_code == status
        assert session.get.call_count == 1
        mock_sleep.assert_not_called()

    def test_no_retry_when_retry_count_zero(self):
        provider, session = make_provider(status_response(500), ok_response(), retry_count=0)
        with pytest.raises(FeedHttpStatusError):
            provider.fetch_raw_feed()
        assert session.get.call_count == 1

    def test_errors_are_upstream_fetch_errors(self):
        provider, _ = make_provider(requests.exceptions.InvalidURL("bad"), retry_count=0)
        with pytest.raises(UpstreamFetchError):
            provider.fetch_raw_feed()
