"""Local Entry Point.

This module is a thin runner that loads configuration, wires the
orchestrator and keeps the dashboard state refreshed. A log-based view
subscribes to the Store in place of the map and chart components.
"""

import asyncio
import logging
import os
import sys

from quakeboard.core.config import Config, validate_config
from quakeboard.core.magnitude import format_magnitude
from quakeboard.core.state import AppState
from quakeboard.core.stats import aggregate
from quakeboard.orchestrator import Orchestrator
from quakeboard.shell.config_loader import load_config


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def summarize(state: AppState) -> str:
    """One-line dashboard summary of a state snapshot."""
    if state.loading:
        return "Loading earthquake data..."
    if state.error:
        return f"Error: {state.error} ({len(state.records)} earthquakes still shown)"

    stats = aggregate(list(state.filtered_records))
    return (
        f"{stats.total} of {len(state.records)} earthquakes shown, "
        f"max M{format_magnitude(stats.max_magnitude)}, "
        f"avg M{format_magnitude(stats.avg_magnitude)}, "
        f"max depth {stats.max_depth:.0f} km"
    )


def log_view(state: AppState) -> None:
    """Store subscriber standing in for the presentation layer."""
    logger.info(summarize(state))


async def run(config: Config) -> None:
    """Run the dashboard until cancelled."""
    orchestrator = Orchestrator(config)
    unsubscribe = orchestrator.store.subscribe(log_view)

    orchestrator.start_auto_refresh(immediate=True)
    try:
        await asyncio.Event().wait()
    finally:
        unsubscribe()
        await orchestrator.close()


def main() -> int:
    config = load_config()

    result = validate_config(config)
    for warning in result.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not result.valid:
        for error in result.critical_errors:
            logger.error("Config %s: %s", error.field, error.message)
        return 1

    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        logger.info("Stopped")
    return 0


# For local testing
if __name__ == "__main__":
    sys.exit(main())
