"""Application State Store - Imperative Shell.

The Store is the single mutable holder of AppState. Every change goes
through one of its transition methods, which delegate to the pure
functions in quakeboard.core.state and then notify subscribers.
Presentation code reads from the Store and never writes to it directly.
"""

import logging
from typing import Callable

from quakeboard.core import state as transitions
from quakeboard.core.earthquake import EarthquakeRecord
from quakeboard.core.markers import MapMarker, build_markers
from quakeboard.core.state import AppState
from quakeboard.core.stats import (
    HistogramBucket,
    HourlyBucket,
    Statistics,
    aggregate,
    hourly_activity,
    magnitude_histogram,
)


logger = logging.getLogger(__name__)


Subscriber = Callable[[AppState], None]

SCOPES = ("all", "filtered")


class Store:
    """Observable container for the dashboard state."""

    def __init__(self, initial: AppState | None = None) -> None:
        self._state = initial if initial is not None else transitions.initial_state()
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> AppState:
        """Current state snapshot (immutable)."""
        return self._state

    @property
    def selected_record(self) -> EarthquakeRecord | None:
        return transitions.selected_record(self._state)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback invoked with the new state after each change.

        Args:
            callback: Called with the new AppState

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _apply(self, new_state: AppState) -> None:
        if new_state == self._state:
            return
        self._state = new_state

        for callback in list(self._subscribers):
            try:
                callback(new_state)
            except Exception:
                # One broken view must not starve the others
                logger.exception("Store subscriber %r failed", callback)

    # Transitions

    def begin_load(self) -> None:
        self._apply(transitions.begin_load(self._state))

    def load_succeeded(
        self,
        records: list[EarthquakeRecord],
        now_ms: int | None = None,
    ) -> None:
        self._apply(transitions.load_succeeded(self._state, records, now_ms))
        logger.debug(
            "Loaded %d records, %d after filters",
            len(self._state.records),
            len(self._state.filtered_records),
        )

    def load_failed(self, message: str) -> None:
        self._apply(transitions.load_failed(self._state, message))

    def load_cancelled(self) -> None:
        self._apply(transitions.load_cancelled(self._state))

    def set_filters(
        self,
        min_magnitude: float | None = None,
        region: str | None = None,
    ) -> None:
        """Merge filter changes and recompute the filtered records.

        Raises:
            ValueError: If the new filter values are invalid
        """
        self._apply(transitions.set_filters(
            self._state,
            min_magnitude=min_magnitude,
            region=region,
        ))

    def select(self, record_id: str | None) -> None:
        """Select a record by ID, or clear the selection with None.

        Raises:
            KeyError: If record_id is not in the current records
        """
        self._apply(transitions.select(self._state, record_id))

    def clear_error(self) -> None:
        self._apply(transitions.clear_error(self._state))

    # Collaborator boundary

    def on_marker_activated(self, record_id: str) -> None:
        """Callback for the map: a marker was clicked.

        A click on a record that a refresh has already removed is ignored.
        """
        try:
            self.select(record_id)
        except KeyError:
            logger.info("Ignoring click on stale marker %s", record_id)

    def markers(self) -> list[MapMarker]:
        """Markers for the filtered records that have coordinates."""
        return build_markers(list(self._state.filtered_records))

    def _scoped(self, scope: str) -> list[EarthquakeRecord]:
        if scope == "all":
            return list(self._state.records)
        if scope == "filtered":
            return list(self._state.filtered_records)
        raise ValueError(f"Unknown scope '{scope}'. Choose from: {list(SCOPES)}")

    def statistics(self, scope: str = "all") -> Statistics:
        return aggregate(self._scoped(scope))

    def magnitude_histogram(self, scope: str = "all") -> list[HistogramBucket]:
        return magnitude_histogram(self._scoped(scope))

    def hourly_activity(self, now_ms: int, scope: str = "all") -> list[HourlyBucket]:
        return hourly_activity(self._scoped(scope), now_ms)
