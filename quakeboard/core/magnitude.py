"""Magnitude and depth classification - Pure functions.

One canonical band table drives labels, colors and marker sizes, so map
markers, list badges and chart bars always agree. The chart histogram in
stats.py uses the same cut points for its first three ranges.

    Unknown   magnitude absent
    Minor     < 2.5
    Light     2.5 - 4.5
    Moderate  4.5 - 6.0
    Strong    6.0 - 7.0
    Major     7.0 - 8.0
    Great     >= 8.0
"""

from datetime import datetime, timezone
from enum import Enum


class MagnitudeClass(str, Enum):
    """Severity band of an earthquake magnitude."""
    UNKNOWN = "Unknown"
    MINOR = "Minor"
    LIGHT = "Light"
    MODERATE = "Moderate"
    STRONG = "Strong"
    MAJOR = "Major"
    GREAT = "Great"


class DepthClass(str, Enum):
    """Hypocenter depth band."""
    UNKNOWN = "Unknown"
    SHALLOW = "Shallow"
    INTERMEDIATE = "Intermediate"
    DEEP = "Deep"


# Lower bound (inclusive) of each real band, highest first
MAGNITUDE_BANDS: tuple[tuple[float, MagnitudeClass], ...] = (
    (8.0, MagnitudeClass.GREAT),
    (7.0, MagnitudeClass.MAJOR),
    (6.0, MagnitudeClass.STRONG),
    (4.5, MagnitudeClass.MODERATE),
    (2.5, MagnitudeClass.LIGHT),
)

MAGNITUDE_COLORS: dict[MagnitudeClass, str] = {
    MagnitudeClass.UNKNOWN: "#9CA3AF",   # gray-400
    MagnitudeClass.MINOR: "#22C55E",     # green-500
    MagnitudeClass.LIGHT: "#EAB308",     # yellow-500
    MagnitudeClass.MODERATE: "#F97316",  # orange-500
    MagnitudeClass.STRONG: "#EF4444",    # red-500
    MagnitudeClass.MAJOR: "#B91C1C",     # red-700
    MagnitudeClass.GREAT: "#7F1D1D",     # red-900
}

MAGNITUDE_DESCRIPTIONS: dict[MagnitudeClass, str] = {
    MagnitudeClass.UNKNOWN: "Magnitude not reported",
    MagnitudeClass.MINOR: "Generally not felt, or felt only slightly",
    MagnitudeClass.LIGHT: "Weak shaking, rarely causes damage",
    MagnitudeClass.MODERATE: "Moderate shaking, some damage to weak structures",
    MagnitudeClass.STRONG: "Strong to violent shaking, damage to buildings",
    MagnitudeClass.MAJOR: "Serious damage over large areas",
    MagnitudeClass.GREAT: "Devastating damage, felt over very large areas",
}

MARKER_RADII: dict[MagnitudeClass, int] = {
    MagnitudeClass.UNKNOWN: 6,
    MagnitudeClass.MINOR: 6,
    MagnitudeClass.LIGHT: 8,
    MagnitudeClass.MODERATE: 10,
    MagnitudeClass.STRONG: 12,
    MagnitudeClass.MAJOR: 14,
    MagnitudeClass.GREAT: 16,
}

SHALLOW_LIMIT_KM = 70.0
DEEP_LIMIT_KM = 300.0

NOT_AVAILABLE = "N/A"

MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS


def classify(magnitude: float | None) -> MagnitudeClass:
    """Get the severity band for a magnitude.

    Pure function. An absent magnitude is UNKNOWN, never MINOR.
    """
    if magnitude is None:
        return MagnitudeClass.UNKNOWN
    for lower_bound, band in MAGNITUDE_BANDS:
        if magnitude >= lower_bound:
            return band
    return MagnitudeClass.MINOR


def color_for(magnitude: float | None) -> str:
    """Get the hex color token for a magnitude.

    Pure function. Used for both map markers and chart bars.
    """
    return MAGNITUDE_COLORS[classify(magnitude)]


def describe(magnitude: float | None) -> str:
    """Get a short description of the expected effects."""
    return MAGNITUDE_DESCRIPTIONS[classify(magnitude)]


def marker_radius(magnitude: float | None) -> int:
    """Get the map marker radius in pixels."""
    return MARKER_RADII[classify(magnitude)]


def format_magnitude(magnitude: float | None) -> str:
    """Format a magnitude with one decimal place, or "N/A" if absent."""
    if magnitude is None:
        return NOT_AVAILABLE
    return f"{magnitude:.1f}"


def classify_depth(depth_km: float | None) -> DepthClass:
    """Get the depth band for a hypocenter depth.

    Pure function.

    Args:
        depth_km: Depth in kilometers (None if unknown)

    Returns:
        SHALLOW below 70 km, INTERMEDIATE from 70 to 300 km, DEEP from 300 km
    """
    if depth_km is None:
        return DepthClass.UNKNOWN
    if depth_km < SHALLOW_LIMIT_KM:
        return DepthClass.SHALLOW
    if depth_km < DEEP_LIMIT_KM:
        return DepthClass.INTERMEDIATE
    return DepthClass.DEEP


def format_depth(depth_km: float | None) -> str:
    """Format a depth as e.g. "12.3 km (shallow)"."""
    if depth_km is None:
        return MagnitudeClass.UNKNOWN.value
    band = classify_depth(depth_km)
    return f"{depth_km:.1f} km ({band.value.lower()})"


def format_relative_time(time_ms: int | None, now_ms: int) -> str:
    """Format an event time relative to now.

    Pure function.

    Args:
        time_ms: Event time in milliseconds since the epoch
        now_ms: Reference "now" in milliseconds since the epoch

    Returns:
        "Just now", "5m ago", "3h ago", "2d ago", or the UTC date
        for events a week old or more
    """
    if time_ms is None:
        return MagnitudeClass.UNKNOWN.value

    diff_ms = now_ms - time_ms
    if diff_ms < MINUTE_MS:
        return "Just now"
    if diff_ms < HOUR_MS:
        return f"{diff_ms // MINUTE_MS}m ago"
    if diff_ms < DAY_MS:
        return f"{diff_ms // HOUR_MS}h ago"
    if diff_ms < 7 * DAY_MS:
        return f"{diff_ms // DAY_MS}d ago"

    event_time = datetime.fromtimestamp(time_ms / 1000, tz=timezone.utc)
    return event_time.strftime("%Y-%m-%d")
