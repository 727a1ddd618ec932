"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from safezone.core.alert import ALERT_LEVEL_DESCRIPTIONS, VOLCANO_NAME
from safezone.core.cache import DEFAULT_CACHE_DURATION
from safezone.core.evacuation import DEFAULT_EVACUATION_CENTERS, EvacuationCenter
from safezone.core.geo import MAYON_HAZARD_ZONE, HazardZone


WOVODAT_BULLETIN_URL = "https://wovodat.phivolcs.dost.gov.ph/bulletin/list-of-bulletin"
PHIVOLCS_PAGE_URL = "https://www.phivolcs.dost.gov.ph/"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        cache_duration_seconds: How long a resolved alert is served from cache
        primary_url: Bulletin feed (JSON) endpoint
        primary_timeout_seconds: Timeout for the bulletin feed request
        secondary_url: PHIVOLCS page (HTML) used as fallback
        secondary_timeout_seconds: Timeout for the page request
        fallback_alert_level: Level reported when no live data is available
        volcano_name: Label used in alert records
        volcano_keyword: Substring that identifies the volcano upstream
        hazard_zone: Circular hazard zone around the summit
        evacuation_centers: Evacuation sites to rank by distance
        allowed_origins: CORS origins allowed by the web API
    """
    cache_duration_seconds: float = DEFAULT_CACHE_DURATION
    primary_url: str = WOVODAT_BULLETIN_URL
    primary_timeout_seconds: float = 8
    secondary_url: str = PHIVOLCS_PAGE_URL
    secondary_timeout_seconds: float = 6
    fallback_alert_level: int = 3
    volcano_name: str = VOLCANO_NAME
    volcano_keyword: str = "mayon"
    hazard_zone: HazardZone = MAYON_HAZARD_ZONE
    evacuation_centers: list[EvacuationCenter] = field(
        default_factory=lambda: list(DEFAULT_EVACUATION_CENTERS)
    )
    allowed_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:3000"]
    )


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


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not -90 <= lat <= 90:
        errors.append(ValidationError(
            field=field_name,
            message=f"Latitude {lat} out of range [-90, 90]",
        ))

    if not -180 <= lon <= 180:
        errors.append(ValidationError(
            field=field_name,
            message=f"Longitude {lon} out of range [-180, 180]",
        ))

    return errors


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    if config.cache_duration_seconds < 0:
        errors.append(ValidationError(
            field="cache_duration_seconds",
            message=f"Cache duration must not be negative, got {config.cache_duration_seconds}",
        ))
    elif config.cache_duration_seconds == 0:
        errors.append(ValidationError(
            field="cache_duration_seconds",
            message="Cache duration is 0, every request will hit upstream",
            severity="warning",
        ))

    for name in ("primary_timeout_seconds", "secondary_timeout_seconds"):
        value = getattr(config, name)
        if value <= 0:
            errors.append(ValidationError(
                field=name,
                message=f"Timeout must be positive, got {value}",
            ))

    if config.fallback_alert_level not in ALERT_LEVEL_DESCRIPTIONS:
        errors.append(ValidationError(
            field="fallback_alert_level",
            message=f"Fallback alert level {config.fallback_alert_level} out of range [0, 5]",
        ))

    if not config.volcano_keyword.strip():
        errors.append(ValidationError(
            field="volcano_keyword",
            message="Volcano keyword must not be empty",
        ))

    zone = config.hazard_zone
    errors.extend(validate_coordinates(zone.latitude, zone.longitude, "hazard_zone"))
    if zone.radius_km <= 0:
        errors.append(ValidationError(
            field="hazard_zone.radius_km",
            message=f"Hazard radius must be positive, got {zone.radius_km}",
        ))

    for i, center in enumerate(config.evacuation_centers):
        errors.extend(validate_coordinates(
            center.latitude, center.longitude,
            f"evacuation_centers[{i}]",
        ))

    if not config.evacuation_centers:
        errors.append(ValidationError(
            field="evacuation_centers",
            message="No evacuation centers configured",
            severity="warning",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
