"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config) are defined in safezone/core/config.py to avoid
information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from safezone.core.config import Config, validate_config
from safezone.core.evacuation import EvacuationCenter
from safezone.core.geo import HazardZone


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"

# Any of these selects env-based config when CONFIG_PATH is unset
ENV_CONFIG_VARS = (
    "CACHE_DURATION_SECONDS",
    "PRIMARY_URL",
    "PRIMARY_TIMEOUT_SECONDS",
    "SECONDARY_URL",
    "SECONDARY_TIMEOUT_SECONDS",
    "FALLBACK_ALERT_LEVEL",
    "ALLOWED_ORIGINS",
)


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-strings and plain strings are returned unchanged. An unset
    variable leaves the placeholder in place.
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_hazard_zone(data: dict[str, Any]) -> HazardZone:
    """Parse the hazard zone from config data."""
    return HazardZone(
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
        radius_km=float(data.get("radius_km", 6.0)),
    )


def _parse_center(data: dict[str, Any]) -> EvacuationCenter:
    """Parse an evacuation center from config data."""
    return EvacuationCenter(
        id=data["id"],
        name=data["name"],
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
        address=data.get("address"),
        capacity=data.get("capacity"),
    )


def _parse_origins(value: Any) -> list[str]:
    """Parse allowed origins from a list or a comma-separated string."""
    if isinstance(value, str):
        return [o.strip() for o in value.split(",") if o.strip()]
    return [str(_resolve_value(o)) for o in value]


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()
    primary = data.get("primary", {})
    secondary = data.get("secondary", {})

    hazard_zone = defaults.hazard_zone
    if "hazard_zone" in data:
        hazard_zone = _parse_hazard_zone(data["hazard_zone"])

    centers = defaults.evacuation_centers
    if "evacuation_centers" in data:
        centers = [_parse_center(c) for c in data["evacuation_centers"]]

    origins = defaults.allowed_origins
    if "allowed_origins" in data:
        origins = _parse_origins(_resolve_value(data["allowed_origins"]))

    return Config(
        cache_duration_seconds=float(
            data.get("cache_duration_seconds", defaults.cache_duration_seconds)
        ),
        primary_url=_resolve_value(primary.get("url", defaults.primary_url)),
        primary_timeout_seconds=float(
            primary.get("timeout_seconds", defaults.primary_timeout_seconds)
        ),
        secondary_url=_resolve_value(secondary.get("url", defaults.secondary_url)),
        secondary_timeout_seconds=float(
            secondary.get("timeout_seconds", defaults.secondary_timeout_seconds)
        ),
        fallback_alert_level=int(
            data.get("fallback_alert_level", defaults.fallback_alert_level)
        ),
        volcano_name=data.get("volcano_name", defaults.volcano_name),
        volcano_keyword=data.get("volcano_keyword", defaults.volcano_keyword),
        hazard_zone=hazard_zone,
        evacuation_centers=centers,
        allowed_origins=origins,
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: cache %ss, %d evacuation centers",
        config.cache_duration_seconds,
        len(config.evacuation_centers),
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration overrides from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        CACHE_DURATION_SECONDS: Alert cache window
        PRIMARY_URL / PRIMARY_TIMEOUT_SECONDS: Bulletin feed settings
        SECONDARY_URL / SECONDARY_TIMEOUT_SECONDS: PHIVOLCS page settings
        FALLBACK_ALERT_LEVEL: Level reported when no live data is available
        ALLOWED_ORIGINS: Comma-separated CORS origins

    Returns:
        Config object from environment (defaults for anything unset)
    """
    defaults = Config()
    env = os.environ

    origins = defaults.allowed_origins
    if env.get("ALLOWED_ORIGINS"):
        origins = _parse_origins(env["ALLOWED_ORIGINS"])

    return Config(
        cache_duration_seconds=float(
            env.get("CACHE_DURATION_SECONDS", defaults.cache_duration_seconds)
        ),
        primary_url=env.get("PRIMARY_URL", defaults.primary_url),
        primary_timeout_seconds=float(
            env.get("PRIMARY_TIMEOUT_SECONDS", defaults.primary_timeout_seconds)
        ),
        secondary_url=env.get("SECONDARY_URL", defaults.secondary_url),
        secondary_timeout_seconds=float(
            env.get("SECONDARY_TIMEOUT_SECONDS", defaults.secondary_timeout_seconds)
        ),
        fallback_alert_level=int(
            env.get("FALLBACK_ALERT_LEVEL", defaults.fallback_alert_level)
        ),
        allowed_origins=origins,
    )


def load_runtime_config() -> Config:
    """Load configuration for a service entry point.

    Uses the YAML file named by CONFIG_PATH when set. Otherwise uses
    environment overrides when any are set, and the default config file
    (or built-in defaults if it is missing) when none are. A config with
    critical validation errors is replaced by the defaults.

    Returns:
        Validated Config object
    """
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        config = load_config(config_path)
    elif any(os.environ.get(var) for var in ENV_CONFIG_VARS):
        config = load_config_from_env()
    else:
        # Try default config path
        config = load_config()

    result = validate_config(config)
    for warning in result.warnings:
        logger.warning("Config warning in %s: %s", warning.field, warning.message)

    if not result.valid:
        for error in result.critical_errors:
            logger.error("Config error in %s: %s", error.field, error.message)
        logger.error("Invalid configuration, falling back to defaults")
        return Config()

    return config
