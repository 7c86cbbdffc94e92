"""Geographic calculations - Pure functions.

This module provides distance and coordinate formatting for earthquake
locations. Records without coordinates are skipped, never rejected.
"""

import math

from quakeboard.core.earthquake import EarthquakeRecord


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def format_coordinates(latitude: float, longitude: float) -> str:
    """Format coordinates as e.g. "35.680°N, 139.760°E".

    Pure function.
    """
    lat_dir = "N" if latitude >= 0 else "S"
    lon_dir = "E" if longitude >= 0 else "W"
    return f"{abs(latitude):.3f}°{lat_dir}, {abs(longitude):.3f}°{lon_dir}"


def distance_to_record(
    record: EarthquakeRecord,
    latitude: float,
    longitude: float,
) -> float | None:
    """Distance from a point to a record's epicenter, None if not mappable."""
    if not record.has_coordinates:
        return None
    return calculate_distance(latitude, longitude, record.latitude, record.longitude)


def nearest_records(
    records: list[EarthquakeRecord],
    latitude: float,
    longitude: float,
    limit: int = 5,
) -> list[tuple[EarthquakeRecord, float]]:
    """Find the records closest to a point.

    Pure function. Records without coordinates are skipped.

    Args:
        records: Records to search
        latitude: Reference latitude
        longitude: Reference longitude
        limit: Maximum number of results

    Returns:
        (record, distance_km) tuples, closest first
    """
    with_distance = []
    for record in records:
        distance = distance_to_record(record, latitude, longitude)
        if distance is not None:
            with_distance.append((record, distance))

    with_distance.sort(key=lambda pair: pair[1])
    return with_distance[:limit]
