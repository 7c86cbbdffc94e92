"""Application state and its transitions - Pure functions.

AppState is immutable; every transition returns a new state. The shell
Store holds the current value and is the only thing that calls these.
"""

from dataclasses import dataclass, field, replace

from quakeboard.core.earthquake import EarthquakeRecord
from quakeboard.core.filters import FilterState, apply_filters


@dataclass(frozen=True)
class AppState:
    """Complete dashboard state.

    Attributes:
        records: Latest feed snapshot, in feed order
        filtered_records: records passing filters, always recomputed
        filters: Active filters
        selected_id: ID of the selected record, independent of filtering
        loading: True only while a fetch is in flight
        error: User-visible error message from the last failed fetch
        last_updated: Time of the last successful load in ms (None if never)
    """
    records: tuple[EarthquakeRecord, ...] = ()
    filtered_records: tuple[EarthquakeRecord, ...] = ()
    filters: FilterState = field(default_factory=FilterState)
    selected_id: str | None = None
    loading: bool = False
    error: str | None = None
    last_updated: int | None = None


def initial_state() -> AppState:
    """Empty state at application start."""
    return AppState()


def _refilter(state: AppState) -> AppState:
    return replace(
        state,
        filtered_records=tuple(apply_filters(list(state.records), state.filters)),
    )


def begin_load(state: AppState) -> AppState:
    """Mark a fetch as in flight, optimistically clearing any prior error."""
    return replace(state, loading=True, error=None)


def load_succeeded(
    state: AppState,
    records: list[EarthquakeRecord],
    now_ms: int | None = None,
) -> AppState:
    """Replace the record set with a fresh snapshot.

    Records are replaced wholesale, never merged. The selection is
    dropped if its record is not in the new snapshot.

    Args:
        state: Current state
        records: New feed snapshot
        now_ms: Load time to record as last_updated

    Returns:
        New state with loading cleared and filters re-applied
    """
    new_records = tuple(records)

    selected_id = state.selected_id
    if selected_id is not None and all(r.id != selected_id for r in new_records):
        selected_id = None

    return _refilter(replace(
        state,
        records=new_records,
        selected_id=selected_id,
        loading=False,
        error=None,
        last_updated=now_ms if now_ms is not None else state.last_updated,
    ))


def load_failed(state: AppState, message: str) -> AppState:
    """Record a failed fetch. Previously loaded records stay visible."""
    return replace(state, loading=False, error=message)


def load_cancelled(state: AppState) -> AppState:
    """Leave the loading status after a fetch was cancelled."""
    return replace(state, loading=False)


def set_filters(
    state: AppState,
    min_magnitude: float | None = None,
    region: str | None = None,
) -> AppState:
    """Merge filter changes and recompute the filtered records.

    Raises:
        ValueError: If the new filter values are invalid
    """
    filters = state.filters.with_changes(min_magnitude=min_magnitude, region=region)
    return _refilter(replace(state, filters=filters))


def select(state: AppState, record_id: str | None) -> AppState:
    """Select a record by ID, or clear the selection with None.

    Raises:
        KeyError: If record_id is not in the current records
    """
    if record_id is not None and all(r.id != record_id for r in state.records):
        raise KeyError(record_id)
    return replace(state, selected_id=record_id)


def clear_error(state: AppState) -> AppState:
    """Dismiss the error banner."""
    return replace(state, error=None)


def selected_record(state: AppState) -> EarthquakeRecord | None:
    """Resolve the selected ID to its record."""
    if state.selected_id is None:
        return None
    for record in state.records:
        if record.id == state.selected_id:
            return record
    return None
