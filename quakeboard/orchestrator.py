"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data from the USGS feed into the
Store. It owns the concurrency rules of the dashboard:

- A new fetch supersedes and cancels the one in flight.
- Each fetch carries a generation number; results from a superseded
  generation are discarded, never applied.
- Cancellation is silent: it never becomes a user-visible error.
- At most one auto-refresh timer runs at a time.

Everything runs on a single asyncio event loop.
"""

import asyncio
import logging
import time
from typing import Callable

from quakeboard.core.config import Config
from quakeboard.core.errors import FeedError
from quakeboard.shell.store import Store
from quakeboard.shell.usgs_client import USGSClient


logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class Orchestrator:
    """Coordinates feed fetches, the Store and the refresh timer.

    This class wires together:
    - USGS client (fetches earthquake snapshots)
    - Store (applies core state transitions, notifies views)
    """

    def __init__(
        self,
        config: Config,
        store: Store | None = None,
        usgs_client: USGSClient | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        """Initialize orchestrator with configuration.

        Args:
            config: Application configuration
            store: State store (created if not provided)
            usgs_client: USGS client (created if not provided)
            clock: Returns "now" in ms since the epoch (wall clock if not provided)
        """
        self.config = config
        self.store = store or Store()
        self.usgs_client = usgs_client or USGSClient(
            base_url=config.feed_base_url,
            timeout=config.request_timeout_seconds,
        )
        self.clock = clock or _now_ms
        self._generation = 0
        self._in_flight: asyncio.Task | None = None
        self._timer: asyncio.Task | None = None

    @property
    def generation(self) -> int:
        """Number of fetches started so far."""
        return self._generation

    @property
    def fetch_in_flight(self) -> bool:
        return self._in_flight is not None and not self._in_flight.done()

    @property
    def auto_refresh_running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    async def _load(self, generation: int) -> None:
        """Fetch one snapshot and apply it if still current."""
        try:
            records = await self.usgs_client.fetch(self.config.timeframe)
        except asyncio.CancelledError:
            logger.debug("Fetch %d cancelled", generation)
            return
        except FeedError as e:
            if generation != self._generation:
                logger.debug("Discarding failure of superseded fetch %d: %s", generation, e)
                return
            logger.error("Failed to fetch earthquakes: %s", e)
            self.store.load_failed(e.user_message)
            return
        except Exception as e:
            if generation != self._generation:
                logger.debug("Discarding failure of superseded fetch %d: %s", generation, e)
                return
            logger.exception("Unexpected error while fetching earthquakes")
            self.store.load_failed(f"Failed to fetch earthquake data: {e}")
            return

        if generation != self._generation:
            logger.debug("Discarding result of superseded fetch %d", generation)
            return

        self.store.load_succeeded(records, now_ms=self.clock())
        logger.info(
            "Loaded %d earthquakes (%d after filters)",
            len(self.store.state.records),
            len(self.store.state.filtered_records),
        )

    def start_refresh(self) -> asyncio.Task:
        """Start a fetch, superseding any fetch already in flight.

        Must be called from within the running event loop.

        Returns:
            Task that completes once the fetch has been applied,
            discarded or cancelled
        """
        self._cancel_in_flight()
        self._generation += 1
        self.store.begin_load()

        task = asyncio.get_running_loop().create_task(self._load(self._generation))
        self._in_flight = task
        return task

    async def refresh(self) -> None:
        """Fetch a fresh snapshot and wait until it has been handled.

        Returns quietly if a newer refresh supersedes this one.
        """
        task = self.start_refresh()
        try:
            await asyncio.wait([task])
        except asyncio.CancelledError:
            if self._in_flight is task:
                self.cancel()
            raise

    def _cancel_in_flight(self) -> bool:
        cancelled = self.fetch_in_flight
        if cancelled:
            self._in_flight.cancel()
        self._in_flight = None
        return cancelled

    def cancel(self) -> None:
        """Cancel the fetch in flight, if any. Never surfaces an error."""
        if self._cancel_in_flight():
            self.store.load_cancelled()

    async def _refresh_periodically(self, interval: float, immediate: bool) -> None:
        if immediate:
            self.start_refresh()
        while True:
            await asyncio.sleep(interval)
            logger.debug("Auto-refresh tick")
            self.start_refresh()

    def start_auto_refresh(self, immediate: bool = True) -> None:
        """Start the periodic refresh timer.

        Calling this while a timer is already running does nothing, so
        repeated start/stop cycles never stack timers.

        Args:
            immediate: Also fetch right away instead of after one interval
        """
        if self.auto_refresh_running:
            return

        interval = self.config.refresh_interval_seconds
        logger.info("Auto-refresh every %.0fs", interval)
        self._timer = asyncio.get_running_loop().create_task(
            self._refresh_periodically(interval, immediate)
        )

    def stop_auto_refresh(self) -> None:
        """Stop the periodic refresh timer. The fetch in flight is not touched."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    async def close(self) -> None:
        """Stop the timer and cancel any fetch, then wait for both to unwind."""
        pending = [t for t in (self._timer, self._in_flight) if t is not None]
        self.stop_auto_refresh()
        self.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self.usgs_client.close()
