"""Earthquake data models and parsing - Pure functions.

This module normalizes USGS GeoJSON features into typed EarthquakeRecord
objects. Individual fields fall back to None instead of rejecting the whole
feature, so a record with a missing magnitude or coordinates can still be
listed and charted.
"""

import math
from dataclasses import dataclass
from typing import Any


# Display fallback only; never stored on the record
UNKNOWN_PLACE = "Unknown Location"

SORT_KEYS = ("time", "magnitude", "depth")


@dataclass(frozen=True)
class EarthquakeRecord:
    """Immutable, normalized earthquake event.

    Attributes:
        id: Feed-assigned event ID, unique within a fetched set
        place: Human-readable location description (None if absent)
        magnitude: Magnitude, None when unknown (distinct from 0.0)
        time: Event time in milliseconds since the epoch (None if unknown)
        latitude: Epicenter latitude in degrees
        longitude: Epicenter longitude in degrees
        depth_km: Depth in kilometers
        tsunami: Whether the feed flagged a tsunami
        detail_url: Event detail page
    """
    id: str
    place: str | None = None
    magnitude: float | None = None
    time: int | None = None
    latitude: float | None = None
    longitude: float | None = None
    depth_km: float | None = None
    tsunami: bool = False
    detail_url: str | None = None

    @property
    def has_coordinates(self) -> bool:
        """True if the record can be placed on a map."""
        return _is_finite(self.latitude) and _is_finite(self.longitude)

    @property
    def coordinates(self) -> tuple[float, float] | None:
        """Return (latitude, longitude) tuple, or None if not mappable."""
        if not self.has_coordinates:
            return None
        return (self.latitude, self.longitude)

    @property
    def display_place(self) -> str:
        """Location text with the "Unknown Location" fallback applied."""
        return self.place or UNKNOWN_PLACE


def _is_finite(value: Any) -> bool:
    return _as_float(value) is not None


def _as_float(value: Any) -> float | None:
    """Coerce a JSON number to float, None for anything else."""
    # bool is an int subclass; the feed never encodes numbers as booleans
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    result = float(value)
    if not math.isfinite(result):
        return None
    return result


def _as_int(value: Any) -> int | None:
    number = _as_float(value)
    if number is None:
        return None
    return int(number)


def _as_text(value: Any) -> str | None:
    if not isinstance(value, str) or not value:
        return None
    return value


def parse_record(feature: Any) -> EarthquakeRecord | None:
    """Parse a single GeoJSON feature into an EarthquakeRecord.

    Pure function. Missing or malformed fields become None; the feature is
    only rejected when it is not an object or has no usable ID.

    Args:
        feature: GeoJSON feature dict from the USGS feed

    Returns:
        EarthquakeRecord or None if the feature cannot be identified
    """
    if not isinstance(feature, dict):
        return None

    event_id = feature.get("id")
    if isinstance(event_id, (int, float)) and not isinstance(event_id, bool):
        event_id = str(event_id)
    if not isinstance(event_id, str) or not event_id:
        return None

    props = feature.get("properties")
    if not isinstance(props, dict):
        props = {}

    geometry = feature.get("geometry")
    coords = geometry.get("coordinates") if isinstance(geometry, dict) else None
    if not isinstance(coords, (list, tuple)):
        coords = []

    # GeoJSON order is [longitude, latitude, depth]
    longitude = _as_float(coords[0]) if len(coords) > 0 else None
    latitude = _as_float(coords[1]) if len(coords) > 1 else None
    depth_km = _as_float(coords[2]) if len(coords) > 2 else None
    if depth_km is None:
        depth_km = _as_float(props.get("depth"))

    return EarthquakeRecord(
        id=event_id,
        place=_as_text(props.get("place")),
        magnitude=_as_float(props.get("mag")),
        time=_as_int(props.get("time")),
        latitude=latitude,
        longitude=longitude,
        depth_km=depth_km,
        tsunami=bool(_as_float(props.get("tsunami"))),
        detail_url=_as_text(props.get("url")),
    )


def parse_records(features: list[Any]) -> list[EarthquakeRecord]:
    """Parse a list of GeoJSON features into EarthquakeRecords.

    Pure function. Feed order is preserved. Features that cannot be
    identified are skipped, and a repeated ID keeps its first occurrence.

    Args:
        features: The "features" array of a USGS FeatureCollection

    Returns:
        List of records in feed order
    """
    records = []
    seen: set[str] = set()

    for feature in features:
        record = parse_record(feature)
        if record is None or record.id in seen:
            continue
        seen.add(record.id)
        records.append(record)

    return records


def sort_records(
    records: list[EarthquakeRecord],
    sort_by: str = "time",
    descending: bool = True,
) -> list[EarthquakeRecord]:
    """Return records sorted by time, magnitude or depth.

    Pure function. Absent values sort as 0, and ties keep their input order.

    Args:
        records: Records to sort
        sort_by: One of "time", "magnitude", "depth"
        descending: Largest first when True (the list view default)

    Returns:
        New sorted list

    Raises:
        ValueError: If sort_by is not a known key
    """
    if sort_by == "time":
        key = lambda r: r.time or 0
    elif sort_by == "magnitude":
        key = lambda r: r.magnitude or 0.0
    elif sort_by == "depth":
        key = lambda r: r.depth_km or 0.0
    else:
        raise ValueError(f"Unknown sort key '{sort_by}'. Choose from: {list(SORT_KEYS)}")

    return sorted(records, key=key, reverse=descending)
