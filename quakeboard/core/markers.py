"""Map marker configuration - Pure functions.

This module turns records into marker descriptors for the map
collaborator. Tile rendering and icon drawing happen outside the core;
the map only reports back which marker was activated.
"""

from dataclasses import dataclass

from quakeboard.core.earthquake import EarthquakeRecord
from quakeboard.core.magnitude import color_for, format_magnitude, marker_radius


@dataclass(frozen=True)
class MapMarker:
    """Immutable description of one map marker.

    Attributes:
        record_id: ID passed back when the marker is activated
        latitude: Marker latitude
        longitude: Marker longitude
        magnitude: Magnitude (None if unknown)
        color: Hex color for the marker
        radius: Marker radius in pixels
        label: Popup text, e.g. "M5.2 - Tokyo, Japan"
        tsunami: Whether to show the tsunami warning affordance
    """
    record_id: str
    latitude: float
    longitude: float
    magnitude: float | None
    color: str
    radius: int
    label: str
    tsunami: bool = False


def _marker_label(record: EarthquakeRecord) -> str:
    if record.magnitude is None:
        return record.display_place
    return f"M{format_magnitude(record.magnitude)} - {record.display_place}"


def create_marker(record: EarthquakeRecord) -> MapMarker | None:
    """Create a marker for a record.

    Pure function.

    Args:
        record: Record to place on the map

    Returns:
        MapMarker, or None if the record has no usable coordinates
    """
    if not record.has_coordinates:
        return None

    return MapMarker(
        record_id=record.id,
        latitude=record.latitude,
        longitude=record.longitude,
        magnitude=record.magnitude,
        color=color_for(record.magnitude),
        radius=marker_radius(record.magnitude),
        label=_marker_label(record),
        tsunami=record.tsunami,
    )


def build_markers(records: list[EarthquakeRecord]) -> list[MapMarker]:
    """Create markers for every mappable record, keeping input order."""
    markers = []
    for record in records:
        marker = create_marker(record)
        if marker is not None:
            markers.append(marker)
    return markers


def focus_point(record: EarthquakeRecord | None) -> tuple[float, float] | None:
    """Camera center for the selected record, None if there is nothing to center on."""
    if record is None:
        return None
    return record.coordinates
