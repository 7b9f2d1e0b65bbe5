"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Earthquake feed client (HTTP / saved file)
- GeoJSON loading (countries, cities)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from src.shell.feed_client import FeedClient
from src.shell.geodata_loader import load_boundaries, load_cities
from src.shell.config_loader import load_config, Config

__all__ = [
    "FeedClient",
    "load_boundaries",
    "load_cities",
    "load_config",
    "Config",
]
