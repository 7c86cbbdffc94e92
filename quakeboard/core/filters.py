"""Record filtering - Pure functions.

The dashboard filters by a minimum magnitude and a free-text region.
The filtered subset is always recomputed from the full record set; there
is no incremental patching.
"""

import math
from dataclasses import dataclass, replace

from quakeboard.core.earthquake import EarthquakeRecord


MIN_MAGNITUDE_LOWER = 0.0
MIN_MAGNITUDE_UPPER = 9.0


@dataclass(frozen=True)
class FilterState:
    """Active dashboard filters.

    Attributes:
        min_magnitude: Minimum magnitude (inclusive), 0 disables the filter
        region: Case-insensitive substring of the place, "" disables the filter
    """
    min_magnitude: float = 0.0
    region: str = ""

    def with_changes(
        self,
        min_magnitude: float | None = None,
        region: str | None = None,
    ) -> "FilterState":
        """Merge a partial update into a new FilterState.

        Args:
            min_magnitude: New minimum magnitude, None to keep the current one
            region: New region text, None to keep the current one

        Returns:
            Updated FilterState

        Raises:
            ValueError: If min_magnitude is outside [0, 9] or region is not text
        """
        changes: dict[str, object] = {}

        if min_magnitude is not None:
            if isinstance(min_magnitude, bool) or not isinstance(min_magnitude, (int, float)):
                raise ValueError(f"min_magnitude must be a number, got {min_magnitude!r}")
            if not math.isfinite(min_magnitude) or not (
                MIN_MAGNITUDE_LOWER <= min_magnitude <= MIN_MAGNITUDE_UPPER
            ):
                raise ValueError(
                    f"min_magnitude {min_magnitude} out of range "
                    f"[{MIN_MAGNITUDE_LOWER:g}, {MIN_MAGNITUDE_UPPER:g}]"
                )
            changes["min_magnitude"] = float(min_magnitude)

        if region is not None:
            if not isinstance(region, str):
                raise ValueError(f"region must be a string, got {region!r}")
            changes["region"] = region

        return replace(self, **changes)


def is_active(filters: FilterState) -> bool:
    """True if any filter narrows the record set."""
    return filters.min_magnitude > 0 or bool(filters.region)


def matches(record: EarthquakeRecord, filters: FilterState) -> bool:
    """Check whether a record passes both filters.

    Pure function. An unknown magnitude counts as 0 and an unknown
    place counts as the empty string.
    """
    magnitude = record.magnitude if record.magnitude is not None else 0.0
    if magnitude < filters.min_magnitude:
        return False

    if filters.region:
        place = (record.place or "").lower()
        if filters.region.lower() not in place:
            return False

    return True


def apply_filters(
    records: list[EarthquakeRecord],
    filters: FilterState,
) -> list[EarthquakeRecord]:
    """Filter records by magnitude threshold and region text.

    Pure function. Input order is preserved.

    Args:
        records: Full record set
        filters: Active filters

    Returns:
        Records passing both filters
    """
    return [r for r in records if matches(r, filters)]
