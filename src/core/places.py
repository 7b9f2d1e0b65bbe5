"""Country boundary and city parsing - Pure functions.

This module converts already-loaded GeoJSON (countries, cities) into
BoundaryShape and CityRecord objects. Feature order is preserved since
boundary order decides which country wins for overlapping shapes.
"""

from dataclasses import dataclass
from typing import Any

from src.core.geometry import BoundaryShape, Location, Ring


@dataclass(frozen=True)
class CityRecord:
    """Immutable city data model.

    Attributes:
        name: City name
        location: City location
        properties: Remaining feature properties as sorted (key, value) pairs
    """
    name: str
    location: Location
    properties: tuple[tuple[str, Any], ...] = ()

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a feature property by key."""
        for k, v in self.properties:
            if k == key:
                return v
        return default


def _parse_ring(coordinates: list[Any]) -> Ring:
    """Convert GeoJSON [lon, lat] pairs into a ring of Locations."""
    return tuple(
        Location(latitude=float(pair[1]), longitude=float(pair[0]))
        for pair in coordinates
    )


def _parse_rings(geometry: dict[str, Any]) -> tuple[Ring, ...] | None:
    """Outer rings of a Polygon or MultiPolygon geometry.

    Interior rings (holes) are not kept.
    """
    geometry_type = geometry.get("type")
    coordinates = geometry.get("coordinates") or []

    if geometry_type == "Polygon":
        polygons = [coordinates]
    elif geometry_type == "MultiPolygon":
        polygons = coordinates
    else:
        return None

    return tuple(_parse_ring(polygon[0]) for polygon in polygons if polygon)


def parse_boundary(feature: dict[str, Any]) -> BoundaryShape | None:
    """Parse a single GeoJSON feature into a BoundaryShape.

    Pure function.

    Args:
        feature: GeoJSON feature with a Polygon or MultiPolygon geometry

    Returns:
        BoundaryShape or None if the feature has no usable geometry
    """
    try:
        props = feature.get("properties") or {}
        rings = _parse_rings(feature.get("geometry") or {})
        if not rings:
            return None

        name = props.get("name", feature.get("id", ""))
        return BoundaryShape(name=str(name), rings=rings)
    except (IndexError, KeyError, TypeError, ValueError):
        return None


def parse_boundaries(geojson: dict[str, Any]) -> list[BoundaryShape]:
    """Parse a GeoJSON FeatureCollection of countries into boundaries.

    Pure function: skips features without polygon geometry, keeps order.

    Args:
        geojson: FeatureCollection of country polygons

    Returns:
        List of BoundaryShape objects in source order
    """
    boundaries = []

    for feature in geojson.get("features", []):
        boundary = parse_boundary(feature)
        if boundary is not None:
            boundaries.append(boundary)

    return boundaries


def parse_city(feature: dict[str, Any]) -> CityRecord | None:
    """Parse a single GeoJSON Point feature into a CityRecord.

    Pure function.

    Returns:
        CityRecord or None if the feature isn't a valid point
    """
    try:
        props = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        if geometry.get("type") != "Point":
            return None

        coords = geometry.get("coordinates", [])
        if len(coords) < 2:
            return None

        return CityRecord(
            name=str(props.get("name", "")),
            location=Location(latitude=float(coords[1]), longitude=float(coords[0])),
            properties=tuple(sorted(props.items())),
        )
    except (KeyError, TypeError, ValueError):
        return None


def parse_cities(geojson: dict[str, Any]) -> list[CityRecord]:
    """Parse a GeoJSON FeatureCollection of cities into CityRecords.

    Pure function: skips invalid features, keeps order.
    """
    cities = []

    for feature in geojson.get("features", []):
        city = parse_city(feature)
        if city is not None:
            cities.append(city)

    return cities
