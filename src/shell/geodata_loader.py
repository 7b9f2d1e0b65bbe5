"""GeoJSON Loader - Imperative Shell.

This module reads country and city GeoJSON files from disk. Converting
them into boundaries and city records is done by the core module.
"""

import json
import logging
from pathlib import Path
from typing import Any

from src.core.geometry import BoundaryShape
from src.core.places import CityRecord, parse_boundaries, parse_cities


logger = logging.getLogger(__name__)


def load_geojson(path: str | Path) -> dict[str, Any]:
    """Load a GeoJSON document from a file.

    This method performs file I/O.

    Args:
        path: Path to the GeoJSON file

    Returns:
        Parsed GeoJSON dict

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    path = Path(path)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    logger.debug("Loaded %d features from %s", len(data.get("features", [])), path)

    return data


def load_boundaries(path: str | Path) -> list[BoundaryShape]:
    """Load country boundaries from a GeoJSON file, in file order."""
    boundaries = parse_boundaries(load_geojson(path))
    logger.info("Loaded %d country boundaries from %s", len(boundaries), path)
    return boundaries


def load_cities(path: str | Path) -> list[CityRecord]:
    """Load cities from a GeoJSON file, in file order."""
    cities = parse_cities(load_geojson(path))
    logger.info("Loaded %d cities from %s", len(cities), path)
    return cities
