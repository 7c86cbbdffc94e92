"""Tests for map marker configuration - Pure functions.

These are fast unit tests with no mocks needed since they test pure functions.
"""

from quakeboard.core.earthquake import EarthquakeRecord
from quakeboard.core.markers import (
    MapMarker,
    build_markers,
    create_marker,
    focus_point,
)


TOKYO = EarthquakeRecord(
    id="a",
    magnitude=5.2,
    place="Tokyo, Japan",
    latitude=35.68,
    longitude=139.76,
    tsunami=True,
)


class TestCreateMarker:
    """Tests for create_marker()."""

    def test_creates_marker_from_record(self):
        marker = create_marker(TOKYO)

        assert marker == MapMarker(
            record_id="a",
            latitude=35.68,
            longitude=139.76,
            magnitude=5.2,
            color="#F97316",
            radius=10,
            label="M5.2 - Tokyo, Japan",
            tsunami=True,
        )

    def test_no_marker_without_coordinates(self):
        assert create_marker(EarthquakeRecord(id="x", magnitude=4.0)) is None

    def test_no_marker_with_half_coordinates(self):
        record = EarthquakeRecord(id="x", latitude=10.0)
        assert create_marker(record) is None

    def test_unknown_magnitude_uses_neutral_style(self):
        record = EarthquakeRecord(id="u", latitude=1.0, longitude=2.0)
        marker = create_marker(record)

        assert marker.color == "#9CA3AF"
        assert marker.label == "Unknown Location"


class TestBuildMarkers:
    """Tests for build_markers()."""

    def test_skips_unmappable_and_keeps_order(self):
        records = [
            EarthquakeRecord(id="1", latitude=1.0, longitude=1.0),
            EarthquakeRecord(id="2"),
            EarthquakeRecord(id="3", latitude=3.0, longitude=3.0),
        ]

        assert [m.record_id for m in build_markers(records)] == ["1", "3"]

    def test_empty_input(self):
        assert build_markers([]) == []


class TestFocusPoint:
    def test_centers_on_record(self):
        assert focus_point(TOKYO) == (35.68, 139.76)

    def test_none_without_selection_or_coordinates(self):
        assert focus_point(None) is None
        assert focus_point(EarthquakeRecord(id="x")) is None
