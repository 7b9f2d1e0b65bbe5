"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field


# Live feed with magnitude 2.5+ earthquakes from the past week
DEFAULT_FEED_URL = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/2.5_week.atom"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        feed_url: Atom feed URL for live earthquake data
        offline: If True, read the feed from offline_feed_path instead
        offline_feed_path: Saved copy of the feed used when offline
        countries_path: GeoJSON file with country boundaries
        cities_path: GeoJSON file with city points
        request_timeout_seconds: HTTP timeout for fetching the feed
        min_magnitude: Hide earthquakes below this magnitude (None for all)
    """
    feed_url: str = DEFAULT_FEED_URL
    offline: bool = False
    offline_feed_path: str = "2.5_week.atom"
    countries_path: str = "countries.geo.json"
    cities_path: str = "city-data.json"
    request_timeout_seconds: int = 30
    min_magnitude: float | None = None


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if not config.offline and not config.feed_url:
        errors.append(ValidationError(
            field="feed_url",
            message="Feed URL is required when not running offline",
        ))

    if config.offline and not config.offline_feed_path:
        errors.append(ValidationError(
            field="offline_feed_path",
            message="Offline feed path is required when running offline",
        ))

    if config.request_timeout_seconds <= 0:
        errors.append(ValidationError(
            field="request_timeout_seconds",
            message=f"Timeout must be positive, got {config.request_timeout_seconds}",
        ))

    if config.min_magnitude is not None and config.min_magnitude < 0:
        errors.append(ValidationError(
            field="min_magnitude",
            message=f"Minimum magnitude must not be negative, got {config.min_magnitude}",
        ))

    if config.feed_url.startswith("${"):
        errors.append(ValidationError(
            field="feed_url",
            message="Feed URL not resolved (still contains placeholder)",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
