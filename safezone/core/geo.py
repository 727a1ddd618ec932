"""Geographic calculations - Pure functions.

This module provides distance and hazard-zone calculations around the
monitored volcano. All functions are pure with no side effects.
"""

import math
from dataclasses import dataclass


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class HazardZone:
    """Circular hazard zone around a volcano summit.

    Attributes:
        latitude: Summit latitude
        longitude: Summit longitude
        radius_km: Exclusion radius in kilometers
    """
    latitude: float
    longitude: float
    radius_km: float


# Mayon Volcano permanent danger zone
MAYON_HAZARD_ZONE = HazardZone(latitude=13.257, longitude=123.685, radius_km=6.0)


@dataclass(frozen=True)
class HazardCheck:
    """Result of checking a location against a hazard zone.

    Attributes:
        latitude: Checked latitude
        longitude: Checked longitude
        distance_km: Distance to the summit, rounded to 2 decimals
        inside: True if the location is within the hazard radius
        radius_km: Radius that was applied
    """
    latitude: float
    longitude: float
    distance_km: float
    inside: bool
    radius_km: float


def distance_km(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push antipodal points just past 1.0
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_to_summit(
    lat: float,
    lng: float,
    zone: HazardZone = MAYON_HAZARD_ZONE,
) -> float:
    """Distance in kilometers from a point to the zone's center."""
    return distance_km(lat, lng, zone.latitude, zone.longitude)


def is_inside_hazard(
    lat: float,
    lng: float,
    radius_km: float | None = None,
    zone: HazardZone = MAYON_HAZARD_ZONE,
) -> bool:
    """Check if a point lies inside the hazard zone.

    Pure function. The boundary is inclusive.

    Args:
        lat: Point latitude
        lng: Point longitude
        radius_km: Radius override (defaults to the zone's radius)
        zone: Hazard zone to test against

    Returns:
        True if the point is within radius_km of the zone center
    """
    if radius_km is None:
        radius_km = zone.radius_km
    return distance_to_summit(lat, lng, zone) <= radius_km


def check_location(
    lat: float,
    lng: float,
    zone: HazardZone = MAYON_HAZARD_ZONE,
) -> HazardCheck:
    """Build a hazard check summary for a location.

    Pure function.
    """
    distance = distance_to_summit(lat, lng, zone)
    return HazardCheck(
        latitude=lat,
        longitude=lng,
        distance_km=round(distance, 2),
        inside=distance <= zone.radius_km,
        radius_km=zone.radius_km,
    )
