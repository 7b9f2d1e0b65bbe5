"""Functional Core - Pure functions with no side effects.

This module contains all business logic:
- Earthquake feed parsing
- Country boundary and city parsing
- Point-in-boundary and distance calculations
- Threat circle and depth tier model
- Land/ocean classification
- Marker selection state
- Per-country report

Apart from the selection controller's marker state, everything here is
deterministic and has no I/O.
"""

from src.core.earthquake import Earthquake, FeedParseError, parse_earthquakes
from src.core.geometry import BoundaryShape, Location, contains
from src.core.geo import calculate_distance, distance_between
from src.core.places import CityRecord, parse_boundaries, parse_cities
from src.core.threat import DepthTier, depth_tier, threat_circle_km
from src.core.classifier import (
    ClassificationConflictError,
    ClassifiedEvent,
    classify,
)
from src.core.selection import Marker, MarkerKind, SelectionController
from src.core.report import QuakeReport, format_report, summarize

__all__ = [
    # Earthquake
    "Earthquake",
    "FeedParseError",
    "parse_earthquakes",
    # Geometry
    "BoundaryShape",
    "Location",
    "contains",
    # Geo
    "calculate_distance",
    "distance_between",
    # Places
    "CityRecord",
    "parse_boundaries",
    "parse_cities",
    # Threat
    "DepthTier",
    "depth_tier",
    "threat_circle_km",
    # Classifier
    "ClassificationConflictError",
    "ClassifiedEvent",
    "classify",
    # Selection
    "Marker",
    "MarkerKind",
    "SelectionController",
    # Report
    "QuakeReport",
    "format_report",
    "summarize",
]
