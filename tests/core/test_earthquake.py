"""Unit tests for earthquake feed parsing.

These tests demonstrate the benefit of the Functional Core pattern:
- No mocks needed
- Fast, deterministic execution
- Simple assertions on pure functions
"""

import pytest

from src.core.earthquake import (
    Earthquake,
    FeedParseError,
    elevation_to_depth_km,
    filter_by_magnitude,
    parse_earthquakes,
    parse_magnitude,
    sort_by_magnitude,
)
from src.core.geometry import Location


def make_entry(
    title="M 5.2 - 10km NE of Tokyo, Japan",
    point="35.7 139.8",
    elev="-10000",
    age="Past Day",
    entry_id="urn:earthquake-usgs-gov:us:7000abcd",
):
    """Build an Atom <entry> snippet; pass None to leave an element out."""
    parts = ["<entry>"]
    if entry_id is not None:
        parts.append(f"<id>{entry_id}</id>")
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if point is not None:
        parts.append(f"<georss:point>{point}</georss:point>")
    if elev is not None:
        parts.append(f"<georss:elev>{elev}</georss:elev>")
    if age is not None:
        parts.append(f'<category label="Age" term="{age}"/>')
    parts.append('<category label="Magnitude" term="Magnitude 5"/>')
    parts.append("</entry>")
    return "".join(parts)


def make_feed(*entries):
    """Wrap entries in an Atom feed document."""
    return (
        '<?xml version="1.0"?>'
        '<feed xmlns="http://www.w3.org/2005/Atom" '
        'xmlns:georss="http://www.georss.org/georss">'
        "<title>USGS Magnitude 2.5+ Earthquakes, Past Week</title>"
        + "".join(entries)
        + "</feed>"
    )


class TestParseEarthquakes:
    """Tests for parse_earthquakes() pure function."""

    def test_parses_valid_entry(self):
        """Should parse a complete entry into an Earthquake."""
        result = parse_earthquakes(make_feed(make_entry()))

        assert len(result) == 1
        quake = result[0]
        assert quake.id == "urn:earthquake-usgs-gov:us:7000abcd"
        assert quake.title == "M 5.2 - 10km NE of Tokyo, Japan"
        assert quake.magnitude == pytest.approx(5.2)
        assert quake.location == Location(35.7, 139.8)
        assert quake.depth_km == pytest.approx(10.0)
        assert quake.age == "Past Day"

    def test_accepts_bytes(self):
        """Should parse a feed passed as bytes."""
        result = parse_earthquakes(make_feed(make_entry()).encode("utf-8"))
        assert len(result) == 1

    def test_preserves_feed_order(self):
        """Output keeps document order, not magnitude or time order."""
        feed = make_feed(
            make_entry(title="M 3.1 - first", entry_id="a"),
            make_entry(title="M 6.4 - second", entry_id="b"),
            make_entry(title="M 4.0 - third", entry_id="c"),
        )

        result = parse_earthquakes(feed)

        assert [e.id for e in result] == ["a", "b", "c"]

    def test_drops_entry_without_point(self):
        """Entries without a point (e.g. summaries) contribute nothing."""
        feed = make_feed(
            make_entry(point=None, entry_id="summary"),
            make_entry(entry_id="real"),
        )

        result = parse_earthquakes(feed)

        assert [e.id for e in result] == ["real"]

    def test_drops_entry_with_unparsable_point(self):
        """Non-numeric coordinates drop the entry."""
        feed = make_feed(make_entry(point="north east"), make_entry(point="12.5"))
        assert parse_earthquakes(feed) == []

    def test_drops_entry_without_title(self):
        """No title means no magnitude, so the entry is dropped."""
        assert parse_earthquakes(make_feed(make_entry(title=None))) == []

    def test_drops_entry_with_unparsable_magnitude(self):
        """A title with no number is dropped, not fatal."""
        feed = make_feed(make_entry(title="Unknown event"), make_entry(entry_id="ok"))

        result = parse_earthquakes(feed)

        assert [e.id for e in result] == ["ok"]

    def test_drops_entry_without_elevation(self):
        """Missing elevation drops the entry."""
        assert parse_earthquakes(make_feed(make_entry(elev=None))) == []

    def test_drops_entry_with_bad_elevation(self):
        """Non-numeric elevation drops the entry."""
        assert parse_earthquakes(make_feed(make_entry(elev="deep"))) == []

    @pytest.mark.parametrize("elev", ["inf", "-inf", "nan", "1e400"])
    def test_drops_entry_with_non_finite_elevation(self, elev):
        """A non-finite elevation drops only that entry."""
        feed = make_feed(
            make_entry(elev=elev, entry_id="bad"),
            make_entry(elev="-10000", entry_id="good"),
        )

        result = parse_earthquakes(feed)

        assert [e.id for e in result] == ["good"]

    @pytest.mark.parametrize("point", ["inf 10", "10 nan", "1e400 0"])
    def test_drops_entry_with_non_finite_point(self, point):
        """Non-finite coordinates drop only that entry."""
        feed = make_feed(
            make_entry(point=point, entry_id="bad"),
            make_entry(entry_id="good"),
        )

        assert [e.id for e in parse_earthquakes(feed)] == ["good"]

    def test_missing_age_is_none(self):
        """Entries without an Age category have no age."""
        result = parse_earthquakes(make_feed(make_entry(age=None)))
        assert result[0].age is None

    def test_missing_id_is_none(self):
        """ID is optional."""
        result = parse_earthquakes(make_feed(make_entry(entry_id=None)))
        assert result[0].id is None

    def test_output_never_longer_than_input(self):
        """Dropped entries only ever shrink the output."""
        entries = [
            make_entry(entry_id="1"),
            make_entry(point=None),
            make_entry(elev=None),
            make_entry(entry_id="4"),
        ]

        result = parse_earthquakes(make_feed(*entries))

        assert len(result) <= len(entries)
        assert len(result) == 2

    def test_handles_feed_without_entries(self):
        """Empty feed gives an empty list."""
        assert parse_earthquakes(make_feed()) == []

    def test_parses_feed_without_namespaces(self):
        """Child elements are matched by local name."""
        feed = (
            "<feed><entry><title>M 4.4 - somewhere</title>"
            "<point>1.0 2.0</point><elev>-5000</elev></entry></feed>"
        )

        result = parse_earthquakes(feed)

        assert result[0].magnitude == pytest.approx(4.4)
        assert result[0].depth_km == pytest.approx(5.0)

    def test_malformed_document_raises(self):
        """A broken document is an error, not an empty feed."""
        with pytest.raises(FeedParseError):
            parse_earthquakes("<feed><entry>")


class TestParseMagnitude:
    """Tests for parse_magnitude()."""

    def test_reads_fixed_offset(self):
        """Standard USGS title."""
        assert parse_magnitude("M 5.2 - 10km NE of Tokyo, Japan") == pytest.approx(5.2)

    def test_falls_back_to_first_number(self):
        """Titles that don't fit the offset use the first numeric token."""
        assert parse_magnitude("Magnitude 4.7 quake") == pytest.approx(4.7)

    def test_two_digit_magnitude(self):
        """Offset slice '10.' isn't a full number, so the fallback reads 10.1."""
        assert parse_magnitude("M 10.1 - hypothetical") == pytest.approx(10.1)

    def test_no_number_returns_none(self):
        assert parse_magnitude("Quarry blast") is None

    def test_negative_magnitude_returns_none(self):
        assert parse_magnitude("M -0.5 - tiny") is None


class TestElevationToDepthKm:
    """Tests for elevation_to_depth_km()."""

    @pytest.mark.parametrize("elevation", [-10000, 10000])
    def test_sign_independent(self, elevation):
        """Both signs give the same depth."""
        assert elevation_to_depth_km(elevation) == pytest.approx(10.0)

    def test_truncates_to_tenth_of_km(self):
        """Truncates hundreds of meters before scaling."""
        assert elevation_to_depth_km(-12399) == pytest.approx(12.3)
        assert elevation_to_depth_km(-99) == pytest.approx(0.0)

    def test_never_negative(self):
        assert elevation_to_depth_km(-650000) >= 0


class TestEarthquakeModel:
    """Tests for Earthquake dataclass."""

    @pytest.fixture
    def quake(self):
        return Earthquake(
            id="test",
            location=Location(37.7749, -122.4194),
            magnitude=4.5,
            depth_km=10.0,
            title="M 4.5 - San Francisco",
        )

    def test_is_immutable(self, quake):
        """Earthquake should be immutable (frozen)."""
        with pytest.raises(Exception):  # FrozenInstanceError
            quake.magnitude = 5.0  # type: ignore

    def test_radius_is_twice_magnitude(self, quake):
        assert quake.radius == pytest.approx(9.0)

    def test_location_attribute(self, quake):
        assert quake.location == Location(37.7749, -122.4194)


class TestMagnitudeHelpers:
    """Tests for filter_by_magnitude() and sort_by_magnitude()."""

    @pytest.fixture
    def earthquakes(self):
        def quake(quake_id, magnitude):
            return Earthquake(
                id=quake_id,
                location=Location(0, 0),
                magnitude=magnitude,
                depth_km=0.0,
                title=f"M {magnitude} - test",
            )

        return [quake("m4", 4.0), quake("m2", 2.0), quake("m6", 6.0)]

    def test_filters_by_min_magnitude(self, earthquakes):
        result = filter_by_magnitude(earthquakes, min_magnitude=4.0)
        assert [e.id for e in result] == ["m4", "m6"]

    def test_filters_by_range(self, earthquakes):
        result = filter_by_magnitude(earthquakes, min_magnitude=3.0, max_magnitude=5.0)
        assert [e.id for e in result] == ["m4"]

    def test_no_filter_returns_all(self, earthquakes):
        assert len(filter_by_magnitude(earthquakes)) == 3

    def test_sorts_ascending(self, earthquakes):
        assert [e.id for e in sort_by_magnitude(earthquakes)] == ["m2", "m4", "m6"]

    def test_sorts_descending(self, earthquakes):
        result = sort_by_magnitude(earthquakes, descending=True)
        assert [e.id for e in result] == ["m6", "m4", "m2"]
