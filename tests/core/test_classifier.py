"""Unit tests for land/ocean classification.

Pure function tests - no mocks needed, fast execution.
"""

import pytest

from src.core.classifier import (
    OCEAN,
    Classification,
    ClassificationConflictError,
    ClassifiedEvent,
    classify,
    classify_event,
    find_country,
)
from src.core.earthquake import Earthquake
from src.core.geometry import BoundaryShape, Location


def square(min_lat, min_lon, size):
    return (
        Location(min_lat, min_lon),
        Location(min_lat, min_lon + size),
        Location(min_lat + size, min_lon + size),
        Location(min_lat + size, min_lon),
    )


def quake(quake_id, lat, lon, magnitude=5.0):
    return Earthquake(
        id=quake_id,
        location=Location(lat, lon),
        magnitude=magnitude,
        depth_km=10.0,
        title=f"M {magnitude} - {quake_id}",
    )


@pytest.fixture
def boundaries():
    """B1 and B2 overlap around (5, 5); B3 is an archipelago."""
    return [
        BoundaryShape(name="B1", rings=(square(0, 0, 10),)),
        BoundaryShape(name="B2", rings=(square(4, 4, 10),)),
        BoundaryShape(name="Islands", rings=(square(40, 40, 2), square(50, 50, 2))),
    ]


class TestClassification:
    """Tests for the write-once Classification value."""

    def test_default_is_ocean(self):
        assert OCEAN.on_land is False
        assert OCEAN.country is None

    def test_tagged_sets_country_and_land(self):
        result = OCEAN.tagged("Japan")
        assert result == Classification(on_land=True, country="Japan")

    def test_retag_same_country_is_noop(self):
        tagged = OCEAN.tagged("Japan")
        assert tagged.tagged("Japan") is tagged

    def test_retag_different_country_raises(self):
        """Overwriting a country is a contract failure."""
        with pytest.raises(ClassificationConflictError):
            OCEAN.tagged("Japan").tagged("Chile")


class TestFindCountry:
    """Tests for find_country()."""

    def test_first_match_wins(self, boundaries):
        """Overlapping boundaries resolve to the earliest listed."""
        assert find_country(Location(5, 5), boundaries).name == "B1"

    def test_order_is_significant(self, boundaries):
        reordered = [boundaries[1], boundaries[0]]
        assert find_country(Location(5, 5), reordered).name == "B2"

    def test_no_match_returns_none(self, boundaries):
        assert find_country(Location(-30, -30), boundaries) is None


class TestClassify:
    """Tests for classify() and classify_event()."""

    def test_land_event_gets_country(self, boundaries):
        result = classify([quake("a", 1, 1)], boundaries)

        assert result[0].on_land is True
        assert result[0].country == "B1"

    def test_overlap_tags_first_boundary(self, boundaries):
        """Point in both B1 and B2 is tagged B1, never B2."""
        result = classify([quake("overlap", 5, 5)], boundaries)
        assert result[0].country == "B1"

    def test_second_boundary_when_only_it_matches(self, boundaries):
        result = classify([quake("b2", 12, 12)], boundaries)
        assert result[0].country == "B2"

    def test_island_ring_counts_as_land(self, boundaries):
        result = classify([quake("island", 51, 51)], boundaries)
        assert result[0].country == "Islands"

    def test_ocean_event(self, boundaries):
        result = classify([quake("sea", -20, 170)], boundaries)

        assert result[0].on_land is False
        assert result[0].country is None

    def test_preserves_order_and_records(self, boundaries):
        events = [quake("a", 1, 1), quake("b", -20, 170), quake("c", 41, 41)]

        result = classify(events, boundaries)

        assert [r.earthquake for r in result] == events
        assert [r.country for r in result] == ["B1", None, "Islands"]

    def test_does_not_mutate_input(self, boundaries):
        events = [quake("a", 1, 1)]
        classify(events, boundaries)
        assert isinstance(events[0], Earthquake)

    def test_idempotent(self, boundaries):
        """Classifying twice gives the same result as once."""
        events = [quake("a", 5, 5), quake("b", -20, 170), quake("c", 51, 51)]

        once = classify(events, boundaries)
        twice = classify(once, boundaries)

        assert twice == once

    def test_tagged_event_is_not_reclassified(self, boundaries):
        """A tagged event keeps its country even against other boundaries."""
        tagged = classify([quake("a", 5, 5)], boundaries)[0]

        result = classify_event(tagged, [boundaries[1]])

        assert result is tagged
        assert result.country == "B1"

    def test_untagged_classified_event_is_retried(self, boundaries):
        """An ocean result can still pick up a country from new boundaries."""
        ocean = ClassifiedEvent(earthquake=quake("a", 5, 5))

        result = classify_event(ocean, boundaries)

        assert result.country == "B1"

    def test_empty_boundaries_all_ocean(self):
        result = classify([quake("a", 1, 1)], [])
        assert result[0].on_land is False

    def test_convenience_properties(self, boundaries):
        event = classify([quake("a", 1, 2, magnitude=6.1)], boundaries)[0]

        assert event.location == Location(1, 2)
        assert event.magnitude == 6.1
