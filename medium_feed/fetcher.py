from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched besides the ones quote() always keeps.
_COMPONENT_SAFE = "!*'()"


class FetchFailure(Exception):
    """Raised when the feed cannot be retrieved through the relay."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def build_relay_url(feed_url: str, relay_prefix: str) -> str:
    return relay_prefix + quote(feed_url, safe=_COMPONENT_SAFE)


class RelayFetcher:
    """Fetches a feed through a CORS relay with a single request."""

    def __init__(self, relay_prefix: str, timeout: float = 10.0, session: Optional[requests.Session] = None) -> None:
        self._relay_prefix = relay_prefix
        self._timeout = timeout
        self._session = session

    def fetch(self, feed_url: str) -> str:
        url = build_relay_url(feed_url, self._relay_prefix)
        logger.debug("Fetching feed %s via %s", feed_url, url)
        try:
            get = self._session.get if self._session is not None else requests.get
            response = get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            raise FetchFailure(f"Request to relay failed: {exc}", url=url) from exc
        if not 200 <= response.status_code < 300:
            raise FetchFailure(
                f"HTTP error! status: {response.status_code}",
                url=url,
                status_code=response.status_code,
            )
        return response.text
