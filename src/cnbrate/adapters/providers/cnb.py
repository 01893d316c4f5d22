# src/cnbrate/adapters/providers/cnb.py
"""
CNB Feed Provider for Daily Exchange Rate Text

This module implements the HTTP client that downloads the Czech National Bank
daily exchange rate fixing (pipe-delimited text). Transient failures are
retried with a fixed delay; final failures surface as UpstreamFetchError
subclasses so callers can report them without knowing about requests.

Files that USE this module:
- cnbrate.application.rates_service (default provider for get_exchange_rates)
- cnbrate.app (composition root builds CnbFeedProvider)
- tests.test_providers (unit tests)

Files that this module USES:
- cnbrate.adapters.providers.base (FeedProvider interface)
- cnbrate.config (settings for URL, timeout and retry policy)
- cnbrate.domain.errors (UpstreamFetchError hierarchy)
"""
import logging
import time
from typing import Optional

import requests

from cnbrate.adapters.providers.base import FeedProvider
from cnbrate.config import settings
from cnbrate.domain.errors import (
    EmptyFeedError,
    FeedConnectionError,
    FeedHttpStatusError,
    FeedTimeoutError,
    UpstreamFetchError,
)
from cnbrate.shared.validators import validate_http_url

log = logging.getLogger(__name__)

# 408 Request Timeout and 429 Too Many Requests are worth another attempt
RETRYABLE_STATUS = frozenset({408, 429})


def _is_transient(error: UpstreamFetchError) -> bool:
    if isinstance(error, FeedHttpStatusError):
        return error.status_code >= 500 or error.status_code in RETRYABLE_STATUS
    return isinstance(error, (FeedConnectionError, FeedTimeoutError))


class CnbFeedProvider(FeedProvider):
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        retry_count: Optional[int] = None,
        retry_delay_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize CNB feed provider.

        Args:
            base_url: Optional feed URL (defaults to settings.cnb_base_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            retry_count: Optional number of retries after the first attempt
            retry_delay_seconds: Optional delay between attempts
            session: Optional requests.Session to use

        Raises:
            ValueError: If the URL or any policy value is invalid
        """
        self.url = base_url or settings.cnb_base_url
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.retry_count = retry_count if retry_count is not None else settings.retry_count
        self.retry_delay_seconds = (
            retry_delay_seconds if retry_delay_seconds is not None else settings.retry_delay_seconds
        )

        if not validate_http_url(self.url):
            raise ValueError(f"CNB feed URL must be an http(s) URL, got '{self.url}'.")
        if self.timeout < 1:
            raise ValueError("timeout must be at least 1 second.")
        if self.retry_count < 0:
            raise ValueError("retry_count must not be negative.")
        if self.retry_delay_seconds < 0:
            raise ValueError("retry_delay_seconds must not be negative.")

        self.session = session or requests.Session()

    def _fetch_once(self) -> str:
        """
        Perform a single GET request for the feed.

        Returns:
            Response body decoded as UTF-8

        Raises:
            FeedTimeoutError, FeedConnectionError, FeedHttpStatusError, EmptyFeedError
        """
        try:
            resp = self.session.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise FeedTimeoutError(
                f"Request to CNB API timed out after {self.timeout} seconds."
            ) from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else 0
            raise FeedHttpStatusError(
                f"CNB API returned HTTP {status}.", status_code=status
            ) from e
        except requests.exceptions.RequestException as e:
            raise FeedConnectionError(f"Failed to fetch exchange rates from CNB API: {e}") from e

        resp.encoding = "utf-8"
        content = resp.text
        if not content or not content.strip():
            log.error("Received empty response from CNB API")
            raise EmptyFeedError("Received empty response from CNB API.")
        return content

    def fetch_raw_feed(self) -> str:
        """
        Download the raw CNB daily feed.

        Timeouts, connection errors and 5xx/408/429 responses are retried up to
        retry_count times, waiting retry_delay_seconds between attempts.

        Returns:
            Raw feed text

        Raises:
            UpstreamFetchError: If all attempts fail or the body is empty
        """
        attempts = self.retry_count + 1
        for attempt in range(1, attempts + 1):
            try:
                log.info("Fetching CNB daily rates from %s (attempt %d/%d)", self.url, attempt, attempts)
                content = self._fetch_once()
                log.debug("Received %d characters from CNB API", len(content))
                return content
            except UpstreamFetchError as e:
                if not _is_transient(e) or attempt >= attempts:
                    log.error("CNB API request failed: %s", e)
                    raise
                log.warning(
                    "CNB API attempt %d/%d failed, retrying in %ss: %s",
                    attempt, attempts, self.retry_delay_seconds, e,
                )
                time.sleep(self.retry_delay_seconds)
        # retry_count >= 0, so the loop always returns or raises
        raise UpstreamFetchError("CNB API request failed.")
