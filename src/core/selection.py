"""Marker selection state machine.

Tracks which earthquake or city marker the pointer hovers over and which
one is locked by a click. Locking a marker hides the markers unrelated to
it by threat-circle distance; the next click unlocks and shows everything
again.

Screen-space hit-testing belongs to the rendering layer and is passed in
as a callable. Each operation runs to completion; callers must not invoke
operations concurrently.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Sequence, Union

from src.core.classifier import ClassifiedEvent
from src.core.geo import is_within_radius
from src.core.geometry import Location
from src.core.places import CityRecord
from src.core.threat import threat_circle_km


class MarkerKind(str, Enum):
    """Which collection a marker belongs to."""
    EARTHQUAKE = "earthquake"
    CITY = "city"


@dataclass(eq=False)
class Marker:
    """Per-session visual state of one earthquake or city.

    Compared by identity: two markers for equal records are still distinct.

    Attributes:
        record: The earthquake or city shown by this marker
        kind: EARTHQUAKE or CITY
        hovered: True while the pointer is over the marker
        hidden: True while a lock filters the marker out
    """
    record: Union[ClassifiedEvent, CityRecord]
    kind: MarkerKind
    hovered: bool = False
    hidden: bool = False

    @property
    def location(self) -> Location:
        return self.record.location


# (marker, pointer position) -> True if the marker is drawn under the position
HitTest = Callable[[Marker, Any], bool]


class SelectionController:
    """Hover and click-lock state over earthquake and city markers.

    Hover and lock are independent: hover is recomputed on every pointer
    move whether or not a marker is locked.
    """

    def __init__(
        self,
        earthquakes: Sequence[ClassifiedEvent],
        cities: Sequence[CityRecord],
        hit_test: HitTest,
    ) -> None:
        """Initialize controller with one marker per record.

        Args:
            earthquakes: Classified earthquakes, in draw order
            cities: Cities, in draw order
            hit_test: Rendering-layer hit test for a marker and position
        """
        self.earthquake_markers = [
            Marker(record=e, kind=MarkerKind.EARTHQUAKE) for e in earthquakes
        ]
        self.city_markers = [
            Marker(record=c, kind=MarkerKind.CITY) for c in cities
        ]
        self.hit_test = hit_test
        self.hover_target: Marker | None = None
        self.lock_target: Marker | None = None

    @property
    def markers(self) -> list[Marker]:
        """All markers, earthquakes first."""
        return self.earthquake_markers + self.city_markers

    def visible_markers(self) -> Iterator[Marker]:
        """Markers a renderer should draw this frame."""
        return (m for m in self.markers if not m.hidden)

    def _first_hit(self, markers: list[Marker], position: Any) -> Marker | None:
        for marker in markers:
            if not marker.hidden and self.hit_test(marker, position):
                return marker
        return None

    def on_pointer_move(self, position: Any) -> Marker | None:
        """Recompute the hovered marker.

        Earthquakes are checked before cities; hidden markers are skipped.

        Args:
            position: Pointer position understood by the hit test

        Returns:
            The newly hovered marker, if any
        """
        if self.hover_target is not None:
            self.hover_target.hovered = False
            self.hover_target = None

        hit = self._first_hit(self.earthquake_markers, position)
        if hit is None:
            hit = self._first_hit(self.city_markers, position)

        if hit is not None:
            hit.hovered = True
            self.hover_target = hit

        return hit

    def on_pointer_click(self, position: Any) -> Marker | None:
        """Lock or unlock a marker.

        A click while locked only unlocks. Otherwise an earthquake under the
        pointer is locked first, then a city.

        Args:
            position: Pointer position understood by the hit test

        Returns:
            The locked marker after the click, if any
        """
        if self.lock_target is not None:
            self.unlock()
            return None

        quake = self._first_hit(self.earthquake_markers, position)
        if quake is not None:
            self._lock_earthquake(quake)
            return quake

        city = self._first_hit(self.city_markers, position)
        if city is not None:
            self._lock_city(city)
            return city

        return None

    def _lock_earthquake(self, target: Marker) -> None:
        """Show only the target earthquake and cities inside its threat circle."""
        self.lock_target = target
        radius_km = threat_circle_km(target.record.magnitude)

        for marker in self.earthquake_markers:
            if marker is not target:
                marker.hidden = True

        for marker in self.city_markers:
            if not is_within_radius(marker.location, target.location, radius_km):
                marker.hidden = True

        self._drop_hidden_hover()

    def _lock_city(self, target: Marker) -> None:
        """Show only the target city and earthquakes whose threat circle reaches it."""
        self.lock_target = target

        for marker in self.city_markers:
            if marker is not target:
                marker.hidden = True

        for marker in self.earthquake_markers:
            radius_km = threat_circle_km(marker.record.magnitude)
            if not is_within_radius(marker.location, target.location, radius_km):
                marker.hidden = True

        self._drop_hidden_hover()

    def _drop_hidden_hover(self) -> None:
        """A marker hidden by a lock is no longer hovered."""
        if self.hover_target is not None and self.hover_target.hidden:
            self.hover_target.hovered = False
            self.hover_target = None

    def unlock(self) -> None:
        """Clear the lock and make every marker visible again."""
        self.lock_target = None
        for marker in self.markers:
            marker.hidden = False

    def reset(self) -> None:
        """Clear hover, lock and all marker flags."""
        self.hover_target = None
        self.lock_target = None
        for marker in self.markers:
            marker.hovered = False
            marker.hidden = False
