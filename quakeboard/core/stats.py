"""Derived statistics and histograms - Pure functions.

This module computes the summary numbers and chart series shown next to
the map. Every function is a single O(n) pass and is total over any list
of records: an empty or all-unknown input yields zeros, never NaN.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from quakeboard.core.earthquake import EarthquakeRecord
from quakeboard.core.magnitude import DAY_MS, color_for


@dataclass(frozen=True)
class Statistics:
    """Summary statistics over a set of records.

    Attributes:
        total: Number of records, including those with unknown fields
        max_magnitude: Largest known magnitude (0 if none)
        avg_magnitude: Mean of known magnitudes (0 if none)
        max_depth: Largest known depth in km (0 if none)
        min_magnitude: Smallest known magnitude (0 if none)
        avg_depth: Mean of known depths in km (0 if none)
        earliest_time: Oldest known event time in ms (None if none)
        latest_time: Newest known event time in ms (None if none)
    """
    total: int = 0
    max_magnitude: float = 0.0
    avg_magnitude: float = 0.0
    max_depth: float = 0.0
    min_magnitude: float = 0.0
    avg_depth: float = 0.0
    earliest_time: int | None = None
    latest_time: int | None = None


@dataclass(frozen=True)
class MagnitudeRange:
    """A fixed half-open magnitude range [lower, upper)."""
    label: str
    lower: float
    upper: float


@dataclass(frozen=True)
class HistogramBucket:
    """Count of records in one magnitude range."""
    label: str
    lower: float
    upper: float
    color: str
    count: int


@dataclass(frozen=True)
class HourlyBucket:
    """Count of records in one UTC hour of the day."""
    hour: int
    count: int
    label: str


MAGNITUDE_RANGES: tuple[MagnitudeRange, ...] = (
    MagnitudeRange("Minor (0-2.5)", 0.0, 2.5),
    MagnitudeRange("Light (2.5-4.5)", 2.5, 4.5),
    MagnitudeRange("Moderate (4.5-6.0)", 4.5, 6.0),
    MagnitudeRange("Strong (6.0+)", 6.0, 10.0),
)

HOURS_PER_DAY = 24


def _non_negative(value: float) -> float:
    return max(value, 0.0)


def aggregate(records: list[EarthquakeRecord]) -> Statistics:
    """Compute summary statistics for a set of records.

    Pure function. Absent magnitudes, depths and times are ignored;
    a field with no known values is reported as 0. The dashboard
    headline fields (max and avg magnitude, max depth) are floored at 0;
    min_magnitude and avg_depth report the actual values.

    Args:
        records: Records to summarize

    Returns:
        Statistics for the records
    """
    magnitudes = [r.magnitude for r in records if r.magnitude is not None]
    depths = [r.depth_km for r in records if r.depth_km is not None]
    times = [r.time for r in records if r.time is not None]

    return Statistics(
        total=len(records),
        max_magnitude=_non_negative(max(magnitudes)) if magnitudes else 0.0,
        avg_magnitude=_non_negative(sum(magnitudes) / len(magnitudes)) if magnitudes else 0.0,
        max_depth=_non_negative(max(depths)) if depths else 0.0,
        min_magnitude=min(magnitudes) if magnitudes else 0.0,
        avg_depth=sum(depths) / len(depths) if depths else 0.0,
        earliest_time=min(times) if times else None,
        latest_time=max(times) if times else None,
    )


def _range_index(magnitude: float) -> int:
    """Index of the range a magnitude falls into.

    Boundary values belong to the higher range. Values outside the table
    are clamped into the first or last range.
    """
    for index in range(len(MAGNITUDE_RANGES) - 1, 0, -1):
        if magnitude >= MAGNITUDE_RANGES[index].lower:
            return index
    return 0


def magnitude_histogram(records: list[EarthquakeRecord]) -> list[HistogramBucket]:
    """Count records per magnitude range.

    Pure function. All four ranges are always returned in ascending
    order. Records with an unknown magnitude are not counted.

    Args:
        records: Records to bucket

    Returns:
        One HistogramBucket per range in MAGNITUDE_RANGES
    """
    counts = [0] * len(MAGNITUDE_RANGES)

    for record in records:
        if record.magnitude is None:
            continue
        counts[_range_index(record.magnitude)] += 1

    return [
        HistogramBucket(
            label=magnitude_range.label,
            lower=magnitude_range.lower,
            upper=magnitude_range.upper,
            color=color_for(magnitude_range.lower),
            count=count,
        )
        for magnitude_range, count in zip(MAGNITUDE_RANGES, counts)
    ]


def hourly_activity(
    records: list[EarthquakeRecord],
    now_ms: int,
) -> list[HourlyBucket]:
    """Count the last 24 hours of records per UTC hour of day.

    Pure function. Only records at most 24 hours older than now_ms are
    counted. Buckets are calendar hours of the day, not rolling windows:
    events at 03:10 yesterday and 03:40 today share the 03:00 bucket.

    Args:
        records: Records to bucket
        now_ms: Reference "now" in milliseconds since the epoch

    Returns:
        24 HourlyBucket entries, hour 0 through 23
    """
    counts = [0] * HOURS_PER_DAY

    for record in records:
        if record.time is None:
            continue
        age_ms = now_ms - record.time
        if age_ms < 0 or age_ms > DAY_MS:
            continue
        hour = datetime.fromtimestamp(record.time / 1000, tz=timezone.utc).hour
        counts[hour] += 1

    return [
        HourlyBucket(hour=hour, count=count, label=f"{hour:02d}:00")
        for hour, count in enumerate(counts)
    ]
