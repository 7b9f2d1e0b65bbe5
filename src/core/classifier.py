"""Land/ocean classification - Pure functions.

Tags each earthquake with the first country boundary containing its
epicenter. Earthquakes stay immutable; classification produces a separate
ClassifiedEvent that pairs each earthquake with its result.
"""

from dataclasses import dataclass
from typing import Sequence, Union

from src.core.earthquake import Earthquake
from src.core.geometry import BoundaryShape, Location, contains


class ClassificationConflictError(RuntimeError):
    """Raised when a country tag would be overwritten with a different one."""


@dataclass(frozen=True)
class Classification:
    """Land/ocean outcome for one earthquake.

    Attributes:
        on_land: True if the epicenter is inside a country boundary
        country: Name of the first matching boundary (None for ocean)
    """
    on_land: bool = False
    country: str | None = None

    def tagged(self, country: str) -> "Classification":
        """Return this classification tagged with a country.

        The country tag is write-once: re-tagging with the same name is a
        no-op, a different name raises ClassificationConflictError.
        """
        if self.country is not None:
            if self.country != country:
                raise ClassificationConflictError(
                    f"Country already set to '{self.country}', refusing '{country}'"
                )
            return self
        return Classification(on_land=True, country=country)


OCEAN = Classification()


@dataclass(frozen=True)
class ClassifiedEvent:
    """An earthquake joined with its classification.

    Attributes:
        earthquake: The parsed earthquake
        classification: Land/ocean result
    """
    earthquake: Earthquake
    classification: Classification = OCEAN

    @property
    def on_land(self) -> bool:
        return self.classification.on_land

    @property
    def country(self) -> str | None:
        return self.classification.country

    @property
    def location(self) -> Location:
        return self.earthquake.location

    @property
    def magnitude(self) -> float:
        return self.earthquake.magnitude


def find_country(
    location: Location,
    boundaries: Sequence[BoundaryShape],
) -> BoundaryShape | None:
    """Return the first boundary containing a location.

    Pure function. Boundary order is significant for overlapping shapes.
    """
    for boundary in boundaries:
        if contains(boundary, location):
            return boundary
    return None


def classify_event(
    event: Union[Earthquake, ClassifiedEvent],
    boundaries: Sequence[BoundaryShape],
) -> ClassifiedEvent:
    """Classify one earthquake as land or ocean.

    Pure function. An already tagged event is returned unchanged, so
    classify() never re-tags; the conflict check lives in
    Classification.tagged(), where the country join happens.

    Args:
        event: Earthquake, or a previous classification of one
        boundaries: Country boundaries in priority order

    Returns:
        ClassifiedEvent with on_land/country set
    """
    if isinstance(event, ClassifiedEvent):
        if event.country is not None:
            return event
        classified = event
    else:
        classified = ClassifiedEvent(earthquake=event)

    boundary = find_country(classified.location, boundaries)
    if boundary is None:
        return classified

    return ClassifiedEvent(
        earthquake=classified.earthquake,
        classification=classified.classification.tagged(boundary.name),
    )


def classify(
    events: Sequence[Union[Earthquake, ClassifiedEvent]],
    boundaries: Sequence[BoundaryShape],
) -> list[ClassifiedEvent]:
    """Classify earthquakes against country boundaries.

    Pure function. Output order matches input order; running it again on
    its own output changes nothing.

    Args:
        events: Earthquakes (or previously classified events)
        boundaries: Country boundaries in priority order

    Returns:
        List of ClassifiedEvent objects
    """
    return [classify_event(event, boundaries) for event in events]
