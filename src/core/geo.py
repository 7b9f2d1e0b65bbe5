"""Geographic distance calculations - Pure functions.

This module provides great-circle distances between map locations.
All functions are pure with no side effects.
"""

import math

from src.core.geometry import Location


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_between(a: Location, b: Location) -> float:
    """Great-circle distance between two locations in kilometers.

    Pure function.
    """
    return calculate_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def is_within_radius(
    location: Location,
    center: Location,
    radius_km: float,
) -> bool:
    """Check if a location is within a radius of a center point.

    Pure function.

    Args:
        location: Location to check
        center: Center point
        radius_km: Radius in kilometers (inclusive)

    Returns:
        True if location is within radius
    """
    return distance_between(location, center) <= radius_km
