"""Evacuation centers and distance ranking - Pure functions."""

from dataclasses import dataclass
from typing import Any

from safezone.core.geo import distance_km


@dataclass(frozen=True)
class EvacuationCenter:
    """A designated evacuation site.

    Attributes:
        id: Stable identifier (URL-safe slug)
        name: Display name
        latitude: Site latitude
        longitude: Site longitude
        address: Optional street/city description
        capacity: Optional capacity note
    """
    id: str
    name: str
    latitude: float
    longitude: float
    address: str | None = None
    capacity: str | None = None


@dataclass(frozen=True)
class RankedCenter:
    """An evacuation center with its distance from a user position."""
    center: EvacuationCenter
    distance_km: float
    is_nearest: bool = False


DEFAULT_EVACUATION_CENTERS: tuple[EvacuationCenter, ...] = (
    EvacuationCenter(
        id="legazpi-sports",
        name="Legazpi City Sports Complex",
        latitude=13.1381,
        longitude=123.744,
        address="Legazpi City, Albay",
    ),
    EvacuationCenter(
        id="tabaco-evac",
        name="Tabaco Evacuation Center",
        latitude=13.37,
        longitude=123.727,
        address="Tabaco City, Albay",
    ),
    EvacuationCenter(
        id="daraga-evac",
        name="Daraga Evacuation Site",
        latitude=13.133,
        longitude=123.733,
        address="Daraga, Albay",
    ),
    EvacuationCenter(
        id="ligao-evac",
        name="Ligao City Evacuation Site",
        latitude=13.033,
        longitude=123.544,
        address="Ligao City, Albay",
    ),
)


def rank_centers(
    lat: float,
    lng: float,
    centers: tuple[EvacuationCenter, ...] | list[EvacuationCenter] = DEFAULT_EVACUATION_CENTERS,
) -> list[RankedCenter]:
    """Sort evacuation centers by distance from a position.

    Pure function.

    Args:
        lat: User latitude
        lng: User longitude
        centers: Centers to rank

    Returns:
        Centers nearest first, distances rounded to 2 decimals; the first
        entry is flagged as nearest
    """
    ranked = sorted(
        (
            (distance_km(lat, lng, c.latitude, c.longitude), c)
            for c in centers
        ),
        key=lambda pair: pair[0],
    )
    return [
        RankedCenter(center=c, distance_km=round(d, 2), is_nearest=(i == 0))
        for i, (d, c) in enumerate(ranked)
    ]


def nearest_center(
    lat: float,
    lng: float,
    centers: tuple[EvacuationCenter, ...] | list[EvacuationCenter] = DEFAULT_EVACUATION_CENTERS,
) -> RankedCenter | None:
    """Return the nearest center, or None if there are no centers."""
    ranked = rank_centers(lat, lng, centers)
    return ranked[0] if ranked else None


def center_to_dict(center: EvacuationCenter) -> dict[str, Any]:
    """Convert EvacuationCenter to JSON-serializable dict."""
    return {
        "id": center.id,
        "name": center.name,
        "lat": center.latitude,
        "lng": center.longitude,
        "address": center.address,
        "capacity": center.capacity,
    }


def ranked_center_to_dict(ranked: RankedCenter) -> dict[str, Any]:
    """Convert RankedCenter to JSON-serializable dict."""
    data = center_to_dict(ranked.center)
    data["distance_km"] = ranked.distance_km
    data["is_nearest"] = ranked.is_nearest
    return data
