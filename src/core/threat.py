"""Threat model - Pure functions.

Maps earthquake magnitude to a "threat circle" radius and depth to a
severity tier. The threat circle is an illustrative proximity cutoff for
filtering markers, not a validated hazard estimate. Do not use it for
safety-critical or predictive purposes.
"""

from enum import Enum


KM_PER_MILE = 1.6

# Magnitude thresholds
THRESHOLD_MODERATE = 5.0
THRESHOLD_LIGHT = 4.0

# Depth thresholds (km)
THRESHOLD_INTERMEDIATE = 70.0
THRESHOLD_DEEP = 300.0

RECENT_AGES = frozenset({"Past Hour", "Past Day"})


class DepthTier(str, Enum):
    """Depth bucket of an earthquake."""
    SHALLOW = "Shallow"
    INTERMEDIATE = "Intermediate"
    DEEP = "Deep"


def threat_circle_km(magnitude: float) -> float:
    """Radius in kilometers up to which an earthquake is treated as a threat.

    Pure function. Strictly increasing in magnitude; M5.0 gives 32 km.

    Args:
        magnitude: Earthquake magnitude

    Returns:
        Threat circle radius in kilometers
    """
    miles = 20.0 * (1.8 ** (2 * magnitude - 5))
    return miles * KM_PER_MILE


def depth_tier(depth_km: float) -> DepthTier:
    """Classify an earthquake depth.

    Pure function.

    Args:
        depth_km: Depth in kilometers (non-negative)

    Returns:
        SHALLOW below 70 km, INTERMEDIATE below 300 km, DEEP otherwise
    """
    if depth_km < THRESHOLD_INTERMEDIATE:
        return DepthTier.SHALLOW
    elif depth_km < THRESHOLD_DEEP:
        return DepthTier.INTERMEDIATE
    else:
        return DepthTier.DEEP


def is_recent(age: str | None) -> bool:
    """Whether a feed age category marks the event as recent.

    Pure function. Recent events get an extra marker overlay.
    """
    return age in RECENT_AGES
