"""Earthquake count report - Pure functions.

Counts classified earthquakes per country plus an ocean total. Used for
diagnostic output only.
"""

from dataclasses import dataclass, field
from typing import Sequence

from src.core.classifier import ClassifiedEvent
from src.core.geometry import BoundaryShape


@dataclass(frozen=True)
class QuakeReport:
    """Earthquake counts by country.

    Attributes:
        country_counts: Count per country, in first-seen order
        ocean_count: Earthquakes not inside any country
    """
    country_counts: dict[str, int] = field(default_factory=dict)
    ocean_count: int = 0

    @property
    def total(self) -> int:
        return sum(self.country_counts.values()) + self.ocean_count


def summarize(events: Sequence[ClassifiedEvent]) -> QuakeReport:
    """Count classified earthquakes per country and in the ocean.

    Pure function. Does not modify its input.

    Args:
        events: Classified earthquakes

    Returns:
        QuakeReport with per-country and ocean counts
    """
    country_counts: dict[str, int] = {}
    ocean_count = 0

    for event in events:
        if event.on_land and event.country is not None:
            country_counts[event.country] = country_counts.get(event.country, 0) + 1
        else:
            ocean_count += 1

    return QuakeReport(country_counts=country_counts, ocean_count=ocean_count)


def format_report(
    report: QuakeReport,
    boundaries: Sequence[BoundaryShape] | None = None,
) -> list[str]:
    """Format a report as printable lines.

    Pure function.

    Countries come in boundary order when boundaries are given, otherwise
    in first-seen order. The ocean line is always last.

    Args:
        report: Report to format
        boundaries: Optional boundaries to order countries by

    Returns:
        List of lines like "Japan: 3 earthquake(s)"
    """
    if boundaries is not None:
        ordered = [b.name for b in boundaries if b.name in report.country_counts]
        names = list(dict.fromkeys(ordered + list(report.country_counts)))
    else:
        names = list(report.country_counts)

    lines = [f"{name}: {report.country_counts[name]} earthquake(s)" for name in names]
    lines.append(f"OCEAN QUAKES: {report.ocean_count} earthquake(s)")
    return lines
