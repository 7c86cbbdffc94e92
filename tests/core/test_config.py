"""Tests for configuration validation - Pure functions."""

from quakeboard.core.config import (
    Config,
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    FEED_PATHS,
    USGS_FEED_BASE,
    validate_config,
)


class TestConfigDefaults:
    def test_defaults(self):
        config = Config()

        assert config.feed_base_url == USGS_FEED_BASE
        assert config.timeframe == "day"
        assert config.refresh_interval_seconds == DEFAULT_REFRESH_INTERVAL_SECONDS == 300

    def test_timeframes_map_to_summary_feeds(self):
        assert FEED_PATHS["day"] == "all_day.geojson"
        assert FEED_PATHS["week"] == "all_week.geojson"


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_default_config_is_valid(self):
        result = validate_config(Config())

        assert result.valid is True
        assert result.errors == []

    def test_unknown_timeframe_is_error(self):
        result = validate_config(Config(timeframe="year"))

        assert result.valid is False
        assert result.critical_errors[0].field == "timeframe"

    def test_non_http_url_is_error(self):
        result = validate_config(Config(feed_base_url="ftp://example.com"))

        assert result.valid is False
        assert result.critical_errors[0].field == "feed_base_url"

    def test_non_positive_interval_is_error(self):
        result = validate_config(Config(refresh_interval_seconds=0))

        assert result.valid is False
        assert result.critical_errors[0].field == "refresh_interval_seconds"

    def test_short_interval_is_warning(self):
        result = validate_config(Config(refresh_interval_seconds=10))

        assert result.valid is True
        assert len(result.warnings) == 1
        assert result.warnings[0].field == "refresh_interval_seconds"

    def test_non_positive_timeout_is_error(self):
        result = validate_config(Config(request_timeout_seconds=-1))

        assert result.valid is False
        assert result.critical_errors[0].field == "request_timeout_seconds"
