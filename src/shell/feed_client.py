"""Earthquake Feed Client - Imperative Shell.

This module handles retrieving the raw USGS Atom feed, either over HTTP
or from a saved copy when running offline. Parsing is in the core module.
"""

import logging
from pathlib import Path

import requests

from src.core.config import DEFAULT_FEED_URL


logger = logging.getLogger(__name__)


# Default timeout for feed requests (seconds)
DEFAULT_TIMEOUT = 30


class FeedClient:
    """Client for fetching the raw earthquake feed.

    This is part of the imperative shell - it handles HTTP and file I/O.
    """

    def __init__(
        self,
        feed_url: str = DEFAULT_FEED_URL,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize feed client.

        Args:
            feed_url: Atom feed URL
            timeout: Request timeout in seconds
            session: Optional requests session to reuse connections
        """
        self.feed_url = feed_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_feed(self) -> str:
        """Fetch the live feed document.

        This method performs HTTP I/O.

        Returns:
            Raw feed text

        Raises:
            requests.RequestException: If the request fails
        """
        logger.info("Fetching earthquake feed from %s", self.feed_url)

        response = self.session.get(self.feed_url, timeout=self.timeout)
        response.raise_for_status()

        logger.info("Fetched %d bytes of feed data", len(response.content))

        return response.text

    def read_saved_feed(self, path: str | Path) -> str:
        """Read a previously saved feed document.

        This method performs file I/O.

        Args:
            path: Path to the saved feed

        Returns:
            Raw feed text

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(path)
        logger.info("Reading saved earthquake feed from %s", path)
        return path.read_text(encoding="utf-8")
