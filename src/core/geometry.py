"""Boundary geometry - Pure functions.

This module holds the location and boundary data types and the
point-in-polygon test used to decide whether an earthquake happened
inside a country. All functions are pure with no side effects.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A point on the globe in degrees.

    Attributes:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
    """
    latitude: float
    longitude: float


Ring = tuple[Location, ...]


@dataclass(frozen=True)
class BoundaryShape:
    """A named boundary made of one or more closed rings.

    A multi-part country (e.g. one with islands) has one ring per part.
    A point inside any ring is inside the boundary.

    Attributes:
        name: Boundary name (e.g., country name)
        rings: Closed coordinate rings
    """
    name: str
    rings: tuple[Ring, ...]


def ring_contains(ring: Ring, point: Location) -> bool:
    """Crossing-number test of a point against a single ring.

    Pure function.

    Casts a horizontal ray from the point and counts edge crossings;
    an odd count means the point is inside. Rings with fewer than three
    vertices never contain anything.

    Args:
        ring: Ring vertices (closing vertex optional)
        point: Point to test

    Returns:
        True if the point is inside the ring
    """
    if len(ring) < 3:
        return False

    x = point.longitude
    y = point.latitude
    inside = False

    j = len(ring) - 1
    for i in range(len(ring)):
        xi, yi = ring[i].longitude, ring[i].latitude
        xj, yj = ring[j].longitude, ring[j].latitude

        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i

    return inside


def contains(boundary: BoundaryShape, point: Location) -> bool:
    """Check if a point falls inside any ring of a boundary.

    Pure function.

    Args:
        boundary: Boundary to test against
        point: Point to test

    Returns:
        True if any ring contains the point
    """
    return any(ring_contains(ring, point) for ring in boundary.rings)
