"""Map Session - Wires Functional Core and Imperative Shell.

This module coordinates loading the earthquake feed and geographic
reference data, classifying earthquakes by country, reporting counts and
handing the result to an interactive selection controller.
"""

import logging
from dataclasses import dataclass, field

from src.core.classifier import ClassifiedEvent, classify
from src.core.config import Config
from src.core.earthquake import Earthquake, filter_by_magnitude, parse_earthquakes
from src.core.geometry import BoundaryShape
from src.core.places import CityRecord
from src.core.report import QuakeReport, format_report, summarize
from src.core.selection import HitTest, SelectionController
from src.shell.feed_client import FeedClient
from src.shell.geodata_loader import load_boundaries, load_cities


logger = logging.getLogger(__name__)


@dataclass
class MapData:
    """Everything a map view needs once loading has finished.

    Attributes:
        earthquakes: Classified earthquakes in feed order
        cities: Cities in file order
        boundaries: Country boundaries in file order
        report: Per-country earthquake counts
    """
    earthquakes: list[ClassifiedEvent]
    cities: list[CityRecord]
    boundaries: list[BoundaryShape]
    report: QuakeReport = field(default_factory=QuakeReport)

    @property
    def report_lines(self) -> list[str]:
        """Report formatted in country boundary order."""
        return format_report(self.report, self.boundaries)


class MapSession:
    """Loads and classifies map data, then starts a selection controller.

    This class wires together:
    - Feed client (fetches the raw earthquake feed)
    - GeoJSON loader (country boundaries and cities)
    - Core functions (parsing, classification, report)
    """

    def __init__(
        self,
        config: Config,
        feed_client: FeedClient | None = None,
    ) -> None:
        """Initialize session with configuration.

        Args:
            config: Application configuration
            feed_client: Feed client (created if not provided)
        """
        self.config = config
        self.feed_client = feed_client or FeedClient(
            feed_url=config.feed_url,
            timeout=config.request_timeout_seconds,
        )

    def _read_feed(self) -> str:
        if self.config.offline:
            return self.feed_client.read_saved_feed(self.config.offline_feed_path)
        return self.feed_client.fetch_feed()

    def _load_earthquakes(self) -> list[Earthquake]:
        # Pure core function
        earthquakes = parse_earthquakes(self._read_feed())
        logger.info("Parsed %d earthquakes from feed", len(earthquakes))

        if self.config.min_magnitude is not None:
            earthquakes = filter_by_magnitude(
                earthquakes, min_magnitude=self.config.min_magnitude
            )
            logger.info(
                "%d earthquakes at or above M%.1f",
                len(earthquakes),
                self.config.min_magnitude,
            )

        return earthquakes

    def load(self) -> MapData:
        """Run the load pipeline.

        Classification runs once here, before any selection starts.

        Returns:
            MapData with classified earthquakes, cities, boundaries and report

        Raises:
            requests.RequestException: If fetching the feed fails
            FeedParseError: If the feed isn't well-formed XML
            FileNotFoundError: If a GeoJSON file is missing
        """
        boundaries = load_boundaries(self.config.countries_path)
        cities = load_cities(self.config.cities_path)
        earthquakes = classify(self._load_earthquakes(), boundaries)

        report = summarize(earthquakes)
        data = MapData(
            earthquakes=earthquakes,
            cities=cities,
            boundaries=boundaries,
            report=report,
        )

        for line in data.report_lines:
            logger.info(line)

        return data

    @staticmethod
    def start_selection(data: MapData, hit_test: HitTest) -> SelectionController:
        """Create a selection controller over loaded map data.

        Args:
            data: Loaded map data
            hit_test: Rendering-layer hit test

        Returns:
            A fresh SelectionController with nothing hovered or locked
        """
        return SelectionController(data.earthquakes, data.cities, hit_test)
