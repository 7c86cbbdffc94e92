"""Unit tests for geographic calculations.

Pure function tests - no mocks needed, fast execution.
"""

import pytest

from quakeboard.core.earthquake import EarthquakeRecord
from quakeboard.core.geo import (
    calculate_distance,
    distance_to_record,
    format_coordinates,
    nearest_records,
)


@pytest.fixture
def sample_records():
    """San Francisco, Los Angeles, and one record without coordinates."""
    return [
        EarthquakeRecord(id="la", magnitude=3.1, latitude=34.0522, longitude=-118.2437),
        EarthquakeRecord(id="nowhere", magnitude=2.0),
        EarthquakeRecord(id="sf", magnitude=4.0, latitude=37.7749, longitude=-122.4194),
    ]


class TestCalculateDistance:
    """Tests for calculate_distance() Haversine implementation."""

    def test_same_point_returns_zero(self):
        """Distance from point to itself should be zero."""
        distance = calculate_distance(37.7749, -122.4194, 37.7749, -122.4194)
        assert distance == pytest.approx(0.0, abs=0.001)

    def test_known_distance_sf_to_la(self):
        """SF to LA should be approximately 559 km."""
        distance = calculate_distance(37.7749, -122.4194, 34.0522, -118.2437)
        assert distance == pytest.approx(559, rel=0.02)

    def test_symmetric(self):
        """Distance should be the same in both directions."""
        d1 = calculate_distance(37.7749, -122.4194, 34.0522, -118.2437)
        d2 = calculate_distance(34.0522, -118.2437, 37.7749, -122.4194)

        assert d1 == pytest.approx(d2, rel=0.001)


class TestFormatCoordinates:
    def test_north_east(self):
        assert format_coordinates(35.68, 139.76) == "35.680°N, 139.760°E"

    def test_south_west(self):
        assert format_coordinates(-33.4489, -70.6693) == "33.449°S, 70.669°W"


class TestDistanceToRecord:
    def test_none_without_coordinates(self):
        assert distance_to_record(EarthquakeRecord(id="x"), 0.0, 0.0) is None

    def test_distance_for_mappable_record(self, sample_records):
        distance = distance_to_record(sample_records[2], 37.7749, -122.4194)
        assert distance == pytest.approx(0.0, abs=0.001)


class TestNearestRecords:
    def test_closest_first_and_skips_unmappable(self, sample_records):
        result = nearest_records(sample_records, 37.8, -122.3)

        assert [r.id for r, _ in result] == ["sf", "la"]
        assert result[0][1] < result[1][1]

    def test_respects_limit(self, sample_records):
        assert len(nearest_records(sample_records, 37.8, -122.3, limit=1)) == 1

    def test_empty_input(self):
        assert nearest_records([], 0.0, 0.0) == []
