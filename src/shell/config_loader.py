"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in src/core/config.py.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from src.core.config import Config


logger = logging.getLogger(__name__)


_TRUE_VALUES = {"1", "true", "yes", "on"}


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An unset
    variable leaves the placeholder in place (validation warns about it).
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()
    data = {key: _resolve_value(value) for key, value in data.items()}

    min_magnitude = data.get("min_magnitude")

    return Config(
        feed_url=data.get("feed_url", defaults.feed_url),
        offline=_parse_bool(data.get("offline", defaults.offline)),
        offline_feed_path=data.get("offline_feed_path", defaults.offline_feed_path),
        countries_path=data.get("countries_path", defaults.countries_path),
        cities_path=data.get("cities_path", defaults.cities_path),
        request_timeout_seconds=int(
            data.get("request_timeout_seconds", defaults.request_timeout_seconds)
        ),
        min_magnitude=float(min_magnitude) if min_magnitude is not None else None,
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: feed=%s, offline=%s",
        config.feed_url,
        config.offline,
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for quick runs without a YAML file.

    Environment variables:
        QUAKE_FEED_URL: Atom feed URL
        QUAKE_OFFLINE: "true" to read the saved feed instead
        QUAKE_OFFLINE_FEED: Path of the saved feed
        COUNTRIES_PATH: Country boundaries GeoJSON
        CITIES_PATH: Cities GeoJSON
        MIN_MAGNITUDE: Hide earthquakes below this magnitude

    Returns:
        Config object from environment
    """
    data: dict[str, Any] = {}

    env_keys = {
        "QUAKE_FEED_URL": "feed_url",
        "QUAKE_OFFLINE": "offline",
        "QUAKE_OFFLINE_FEED": "offline_feed_path",
        "COUNTRIES_PATH": "countries_path",
        "CITIES_PATH": "cities_path",
        "MIN_MAGNITUDE": "min_magnitude",
    }
    for env_key, config_key in env_keys.items():
        value = os.environ.get(env_key)
        if value:
            data[config_key] = value

    return load_config_from_dict(data)
