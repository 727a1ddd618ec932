"""Functional Core - Pure functions with no side effects.

This module contains all business logic as pure functions:
- Geo/distance and hazard-zone calculations
- Bulletin parsing and alert-level extraction
- Alert extraction from the PHIVOLCS web page
- Evacuation center ranking
- The single-slot alert cache (in-memory only)

All functions here are deterministic and have no I/O.
"""

from safezone.core.alert import (
    AlertRecord,
    Bulletin,
    alert_from_bulletins,
    describe_alert_level,
    extract_alert_level_from_text,
    select_latest_bulletin,
)
from safezone.core.bulletin_page import PageAlert, extract_alert_from_document
from safezone.core.cache import AlertCache, CacheEntry
from safezone.core.evacuation import EvacuationCenter, nearest_center, rank_centers
from safezone.core.geo import HazardZone, check_location, distance_km, is_inside_hazard

__all__ = [
    # Alert
    "AlertRecord",
    "Bulletin",
    "alert_from_bulletins",
    "describe_alert_level",
    "extract_alert_level_from_text",
    "select_latest_bulletin",
    # Page extraction
    "PageAlert",
    "extract_alert_from_document",
    # Cache
    "AlertCache",
    "CacheEntry",
    # Evacuation
    "EvacuationCenter",
    "nearest_center",
    "rank_centers",
    # Geo
    "HazardZone",
    "check_location",
    "distance_km",
    "is_inside_hazard",
]
