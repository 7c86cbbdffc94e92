"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems
or holds mutable state:
- USGS feed client (HTTP)
- Configuration loading (environment/files)
- Application state store (observable, mutable)

Keep this layer thin and simple. All business logic should be in core.
"""

from quakeboard.shell.usgs_client import USGSClient
from quakeboard.shell.config_loader import load_config
from quakeboard.shell.store import Store

__all__ = [
    "USGSClient",
    "load_config",
    "Store",
]
