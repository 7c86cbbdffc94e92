"""CSV export - Pure functions."""

import csv
import io
from datetime import datetime, timezone, tzinfo

from quakeboard.core.earthquake import EarthquakeRecord


CSV_HEADERS = (
    "ID",
    "Magnitude",
    "Location",
    "Latitude",
    "Longitude",
    "Depth (km)",
    "Time",
    "URL",
)


def _fixed(value: float | None, places: int) -> str:
    if value is None:
        return ""
    return f"{value:.{places}f}"


def _timestamp(time_ms: int | None, tz: tzinfo) -> str:
    if time_ms is None:
        return ""
    return datetime.fromtimestamp(time_ms / 1000, tz=tz).isoformat()


def to_csv(records: list[EarthquakeRecord], tz: tzinfo = timezone.utc) -> str:
    """Export records as CSV text.

    Pure function. Unknown fields are written as empty cells.

    Args:
        records: Records to export, in the order given
        tz: Timezone for the Time column

    Returns:
        CSV document, or "" when there are no records
    """
    if not records:
        return ""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)

    for record in records:
        writer.writerow([
            record.id,
            _fixed(record.magnitude, 1),
            record.place or "",
            _fixed(record.latitude, 4),
            _fixed(record.longitude, 4),
            _fixed(record.depth_km, 1),
            _timestamp(record.time, tz),
            record.detail_url or "",
        ])

    return buffer.getvalue()
