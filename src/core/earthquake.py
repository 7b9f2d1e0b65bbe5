"""Earthquake data models and feed parsing - Pure functions.

This module parses a USGS Atom feed (already fetched as text) into typed
Earthquake objects. Entries that cannot be parsed are dropped; feed order
is preserved. All functions are pure with no side effects.
"""

import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from src.core.geometry import Location


# Title offset that carries the magnitude in "M 5.2 - 10km NE of ..." titles
MAGNITUDE_SLICE = slice(2, 5)

AGE_LABEL = "Age"

_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")
_NUMBER_TOKEN_PATTERN = re.compile(r"-?\d+(?:\.\d+)?")


class FeedParseError(ValueError):
    """Raised when the feed document itself is not well-formed XML."""


@dataclass(frozen=True)
class Earthquake:
    """Immutable earthquake data model.

    Attributes:
        id: Feed entry ID (optional)
        location: Epicenter location
        magnitude: Earthquake magnitude
        depth_km: Depth in kilometers, always non-negative
        title: Display title (e.g., "M 5.2 - 10km NE of Tokyo, Japan")
        age: Feed age category ("Past Hour", "Past Day", "Past Week") (optional)
    """
    id: str | None
    location: Location
    magnitude: float
    depth_km: float
    title: str
    age: str | None = None

    @property
    def radius(self) -> float:
        """Drawing radius, twice the magnitude."""
        return 2 * self.magnitude


def _local_name(tag: str) -> str:
    """Strip the '{namespace}' prefix ElementTree puts on tags."""
    return tag.rsplit("}", 1)[-1]


def _find_child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ET.Element, name: str) -> str | None:
    child = _find_child(element, name)
    if child is None or child.text is None:
        return None
    return child.text


def parse_location(entry: ET.Element) -> Location | None:
    """Read the "lat lon" point element of a feed entry.

    Pure function.

    Returns:
        Location or None if the point is missing or unparsable
    """
    text = _child_text(entry, "point")
    if text is None:
        return None

    parts = text.split()
    if len(parts) < 2:
        return None

    try:
        latitude = float(parts[0])
        longitude = float(parts[1])
    except ValueError:
        return None

    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return None

    return Location(latitude=latitude, longitude=longitude)


def parse_magnitude(title: str) -> float | None:
    """Extract the magnitude from a feed title.

    Pure function.

    USGS titles look like "M 5.2 - 10km NE of Tokyo, Japan", so the
    magnitude sits at characters 2-4. If that slice isn't numeric the
    first numeric token of the title is used instead.

    Args:
        title: Feed entry title

    Returns:
        Magnitude or None if no non-negative number can be found
    """
    candidate = title[MAGNITUDE_SLICE].strip()
    if _NUMBER_PATTERN.fullmatch(candidate):
        return float(candidate)

    match = _NUMBER_TOKEN_PATTERN.search(title)
    if match is None:
        return None

    magnitude = float(match.group())
    if magnitude < 0:
        return None
    return magnitude


def elevation_to_depth_km(elevation_m: float) -> float:
    """Convert a signed feed elevation in meters to a depth in kilometers.

    Pure function.

    Truncates to hundreds of meters first, then scales to kilometers, so
    depth is quantized to 0.1 km before the sign is dropped.
    """
    hundreds = int(elevation_m / 100)
    return abs(hundreds / 10)


def parse_age(entry: ET.Element) -> str | None:
    """Find the term of the category labelled "Age", if any.

    Pure function.
    """
    age = None
    for child in entry:
        if _local_name(child.tag) != "category":
            continue
        if child.get("label") == AGE_LABEL:
            age = child.get("term")
    return age


def parse_entry(entry: ET.Element) -> Earthquake | None:
    """Parse a single feed entry into an Earthquake.

    Pure function: takes an XML element, returns a typed Earthquake or None
    if the entry lacks a location, magnitude or elevation.

    Args:
        entry: Atom <entry> element

    Returns:
        Earthquake object or None if parsing fails
    """
    location = parse_location(entry)
    if location is None:
        return None

    title = _child_text(entry, "title")
    if title is None:
        return None

    magnitude = parse_magnitude(title)
    if magnitude is None:
        return None

    elevation_text = _child_text(entry, "elev")
    if elevation_text is None:
        return None

    try:
        elevation = float(elevation_text)
    except ValueError:
        return None

    # inf/nan can't be truncated to hundreds of meters
    if not math.isfinite(elevation):
        return None

    return Earthquake(
        id=_child_text(entry, "id"),
        location=location,
        magnitude=magnitude,
        depth_km=elevation_to_depth_km(elevation),
        title=title,
        age=parse_age(entry),
    )


def parse_earthquakes(raw_feed: str | bytes) -> list[Earthquake]:
    """Parse an Atom feed document into a list of Earthquakes.

    Pure function: drops entries that can't be parsed and keeps the
    remaining ones in document order.

    Args:
        raw_feed: Feed document text

    Returns:
        List of valid Earthquake objects, in feed order

    Raises:
        FeedParseError: If the document is not well-formed XML
    """
    try:
        root = ET.fromstring(raw_feed)
    except ET.ParseError as e:
        raise FeedParseError(f"Malformed earthquake feed: {e}") from e

    earthquakes = []

    for entry in root:
        if _local_name(entry.tag) != "entry":
            continue
        earthquake = parse_entry(entry)
        if earthquake is not None:
            earthquakes.append(earthquake)

    return earthquakes


def filter_by_magnitude(
    earthquakes: list[Earthquake],
    min_magnitude: float | None = None,
    max_magnitude: float | None = None,
) -> list[Earthquake]:
    """Filter earthquakes by magnitude range.

    Pure function.

    Args:
        earthquakes: List of earthquakes to filter
        min_magnitude: Minimum magnitude (inclusive), None for no minimum
        max_magnitude: Maximum magnitude (inclusive), None for no maximum

    Returns:
        Filtered list of earthquakes
    """
    result = earthquakes

    if min_magnitude is not None:
        result = [e for e in result if e.magnitude >= min_magnitude]

    if max_magnitude is not None:
        result = [e for e in result if e.magnitude <= max_magnitude]

    return result


def sort_by_magnitude(
    earthquakes: list[Earthquake],
    descending: bool = False,
) -> list[Earthquake]:
    """Sort earthquakes by magnitude. Stable for equal magnitudes.

    Pure function.
    """
    return sorted(earthquakes, key=lambda e: e.magnitude, reverse=descending)
