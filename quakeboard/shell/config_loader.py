"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config) are defined in quakeboard/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from quakeboard.core.config import (
    Config,
    DEFAULT_REFRESH_INTERVAL_SECONDS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_TIMEFRAME,
    USGS_FEED_BASE,
)


logger = logging.getLogger(__name__)


# The only two settings adjustable at runtime
ENV_FEED_BASE_URL = "QUAKEBOARD_FEED_BASE_URL"
ENV_REFRESH_SECONDS = "QUAKEBOARD_REFRESH_SECONDS"


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Pure function.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    return Config(
        feed_base_url=str(data.get("feed_base_url", USGS_FEED_BASE)).rstrip("/"),
        timeframe=str(data.get("timeframe", DEFAULT_TIMEFRAME)),
        refresh_interval_seconds=float(
            data.get("refresh_interval_seconds", DEFAULT_REFRESH_INTERVAL_SECONDS)
        ),
        request_timeout_seconds=float(
            data.get("request_timeout_seconds", DEFAULT_REQUEST_TIMEOUT_SECONDS)
        ),
    )


def apply_env_overrides(config: Config) -> Config:
    """Override the feed URL and refresh interval from the environment.

    Environment variables:
        QUAKEBOARD_FEED_BASE_URL: Base URL of the summary feed
        QUAKEBOARD_REFRESH_SECONDS: Auto-refresh period in seconds

    Args:
        config: Configuration to override

    Returns:
        New Config with any overrides applied
    """
    changes: dict[str, Any] = {}

    base_url = os.environ.get(ENV_FEED_BASE_URL)
    if base_url:
        changes["feed_base_url"] = base_url.rstrip("/")

    refresh = os.environ.get(ENV_REFRESH_SECONDS)
    if refresh:
        try:
            changes["refresh_interval_seconds"] = float(refresh)
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r", ENV_REFRESH_SECONDS, refresh)

    return replace(config, **changes)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object with environment overrides applied

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return apply_env_overrides(Config())

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return apply_env_overrides(Config())

    config = apply_env_overrides(load_config_from_dict(data))

    logger.info(
        "Loaded config: timeframe=%s, refresh every %.0fs from %s",
        config.timeframe,
        config.refresh_interval_seconds,
        config.feed_base_url,
    )

    return config
