"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


# USGS summary feed base URL
USGS_FEED_BASE = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

# Summary feed path per timeframe key
FEED_PATHS: dict[str, str] = {
    "hour": "all_hour.geojson",
    "day": "all_day.geojson",
    "week": "all_week.geojson",
    "month": "all_month.geojson",
    "significant": "significant_month.geojson",
}

DEFAULT_TIMEFRAME = "day"
DEFAULT_REFRESH_INTERVAL_SECONDS = 300
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30

# Refreshing faster than the feed updates only adds load
MIN_SENSIBLE_REFRESH_SECONDS = 60


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        feed_base_url: Base URL of the summary feed
        timeframe: Timeframe key to fetch (see FEED_PATHS)
        refresh_interval_seconds: Auto-refresh period
        request_timeout_seconds: HTTP timeout per fetch
    """
    feed_base_url: str = USGS_FEED_BASE
    timeframe: str = DEFAULT_TIMEFRAME
    refresh_interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if not config.feed_base_url.startswith(("http://", "https://")):
        errors.append(ValidationError(
            field="feed_base_url",
            message=f"Feed URL must be http(s), got '{config.feed_base_url}'",
        ))

    if config.timeframe not in FEED_PATHS:
        errors.append(ValidationError(
            field="timeframe",
            message=f"Unknown timeframe '{config.timeframe}'. Choose from: {list(FEED_PATHS)}",
        ))

    if config.refresh_interval_seconds <= 0:
        errors.append(ValidationError(
            field="refresh_interval_seconds",
            message=f"Refresh interval must be positive, got {config.refresh_interval_seconds}",
        ))
    elif config.refresh_interval_seconds < MIN_SENSIBLE_REFRESH_SECONDS:
        errors.append(ValidationError(
            field="refresh_interval_seconds",
            message=(
                f"Refresh interval {config.refresh_interval_seconds}s is shorter than "
                f"the feed update period ({MIN_SENSIBLE_REFRESH_SECONDS}s)"
            ),
            severity="warning",
        ))

    if config.request_timeout_seconds <= 0:
        errors.append(ValidationError(
            field="request_timeout_seconds",
            message=f"Request timeout must be positive, got {config.request_timeout_seconds}",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
