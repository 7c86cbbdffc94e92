"""USGS Feed Client - Imperative Shell.

This module handles HTTP communication with the USGS summary feeds.
All I/O is contained here; parsing and everything downstream is in the
core module.
"""

import asyncio
import logging
from typing import Any

import requests

from quakeboard.core.config import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    FEED_PATHS,
    USGS_FEED_BASE,
)
from quakeboard.core.earthquake import EarthquakeRecord, parse_records
from quakeboard.core.errors import HttpStatusFailure, MalformedFeed, NetworkFailure


logger = logging.getLogger(__name__)


class USGSClient:
    """Client for fetching earthquake snapshots from the USGS feeds.

    This is part of the imperative shell - it handles HTTP I/O.
    It never touches application state: it returns records or raises.
    """

    def __init__(
        self,
        base_url: str = USGS_FEED_BASE,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize USGS client.

        Args:
            base_url: Summary feed base URL
            timeout: Request timeout in seconds
            session: Shared requests session (created if not provided)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def feed_url(self, timeframe: str) -> str:
        """Build the feed URL for a timeframe key.

        Raises:
            ValueError: If the timeframe is not a known key
        """
        path = FEED_PATHS.get(timeframe)
        if path is None:
            raise ValueError(
                f"Unknown timeframe '{timeframe}'. Choose from: {list(FEED_PATHS)}"
            )
        return f"{self.base_url}/{path}"

    def _get_document(self, url: str) -> dict[str, Any]:
        """Perform the blocking GET and validate the document shape.

        Raises:
            NetworkFailure: On connection errors and timeouts
            HttpStatusFailure: On a non-2xx response
            MalformedFeed: If the body is not a document with a features array
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Network error fetching %s: %s", url, e)
            raise NetworkFailure(str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.warning("USGS feed returned HTTP %d for %s", response.status_code, url)
            raise HttpStatusFailure(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            logger.warning("USGS feed returned invalid JSON: %s", e)
            raise MalformedFeed("Invalid data format received from API") from e

        if not isinstance(data, dict) or not isinstance(data.get("features"), list):
            logger.warning("USGS feed document has no features array")
            raise MalformedFeed("Invalid data format received from API")

        return data

    async def fetch(self, timeframe: str) -> list[EarthquakeRecord]:
        """Fetch and normalize the earthquake snapshot for a timeframe.

        The blocking request runs in a worker thread so the event loop only
        suspends here. Cancelling the awaiting task raises
        asyncio.CancelledError; the late response, if any, is dropped.

        Args:
            timeframe: Timeframe key, e.g. "day" or "week"

        Returns:
            Records in feed order

        Raises:
            ValueError: If the timeframe is not a known key
            NetworkFailure: On connection errors and timeouts
            HttpStatusFailure: On a non-2xx response
            MalformedFeed: If the document has the wrong shape
        """
        url = self.feed_url(timeframe)

        logger.info("Fetching earthquakes from USGS", extra={"url": url})

        data = await asyncio.to_thread(self._get_document, url)
        records = parse_records(data["features"])

        logger.info(
            "Fetched %d earthquakes from USGS (%d features)",
            len(records),
            len(data["features"]),
        )

        return records

    def close(self) -> None:
        """Release pooled HTTP connections."""
        self.session.close()
