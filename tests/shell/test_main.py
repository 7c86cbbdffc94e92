"""Tests for the local runner's log view."""

from quakeboard.core.earthquake import EarthquakeRecord
from quakeboard.core.state import begin_load, initial_state, load_failed, load_succeeded
from quakeboard.main import summarize


RECORDS = [
    EarthquakeRecord(id="a", magnitude=5.0, depth_km=30.0),
    EarthquakeRecord(id="b", magnitude=3.0, depth_km=10.0),
]


def test_summarize_loading():
    assert summarize(begin_load(initial_state())) == "Loading earthquake data..."


def test_summarize_loaded():
    state = load_succeeded(begin_load(initial_state()), RECORDS)

    assert summarize(state) == "2 of 2 earthquakes shown, max M5.0, avg M4.0, max depth 30 km"


def test_summarize_error_mentions_kept_records():
    state = load_succeeded(initial_state(), RECORDS)
    state = load_failed(begin_load(state), "Network error. Please check your connection.")

    assert summarize(state) == (
        "Error: Network error. Please check your connection. (2 earthquakes still shown)"
    )
