"""Command-line Entry Point.

This module provides the entry point for loading the earthquake map data
and printing the per-country report. It's a thin wrapper that loads
configuration and runs the map session; a rendering front end builds on
the same MapSession.
"""

import argparse
import logging
import os
import sys

from src.core.config import validate_config
from src.session import MapSession
from src.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config(config_path: str | None):
    """Load configuration from file or environment."""
    config_path = config_path or os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif os.environ.get("QUAKE_FEED_URL") or os.environ.get("QUAKE_OFFLINE"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def main(argv: list[str] | None = None) -> int:
    """Load map data and print the earthquake report.

    Args:
        argv: Command-line arguments (defaults to sys.argv)

    Returns:
        Process exit status
    """
    parser = argparse.ArgumentParser(description="Earthquake city map data loader")
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Read the saved feed instead of fetching it",
    )
    args = parser.parse_args(argv)

    try:
        config = _get_config(args.config)
        if args.offline:
            config.offline = True

        validation = validate_config(config)
        for warning in validation.warnings:
            logger.warning("%s: %s", warning.field, warning.message)
        if not validation.valid:
            for error in validation.critical_errors:
                logger.error("%s: %s", error.field, error.message)
            return 2

        data = MapSession(config).load()

    except Exception:
        logger.exception("Failed to load earthquake map data")
        return 1

    for line in data.report_lines:
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
