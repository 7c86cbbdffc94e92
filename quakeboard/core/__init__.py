"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Earthquake record parsing and classification
- Statistics and histograms
- Filtering
- Application state transitions
- Map marker and CSV export helpers

All functions here are deterministic and have no I/O.
"""

from quakeboard.core.earthquake import EarthquakeRecord, parse_record, parse_records
from quakeboard.core.magnitude import (
    DepthClass,
    MagnitudeClass,
    classify,
    classify_depth,
    color_for,
    format_magnitude,
)
from quakeboard.core.stats import Statistics, aggregate, hourly_activity, magnitude_histogram
from quakeboard.core.filters import FilterState, apply_filters
from quakeboard.core.state import AppState, initial_state
from quakeboard.core.errors import FeedError, HttpStatusFailure, MalformedFeed, NetworkFailure

__all__ = [
    # Records
    "EarthquakeRecord",
    "parse_record",
    "parse_records",
    # Classification
    "DepthClass",
    "MagnitudeClass",
    "classify",
    "classify_depth",
    "color_for",
    "format_magnitude",
    # Aggregation
    "Statistics",
    "aggregate",
    "hourly_activity",
    "magnitude_histogram",
    # Filters
    "FilterState",
    "apply_filters",
    # State
    "AppState",
    "initial_state",
    # Errors
    "FeedError",
    "HttpStatusFailure",
    "MalformedFeed",
    "NetworkFailure",
]
