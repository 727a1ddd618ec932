"""Safe-Zone API - FastAPI service for the Mayon Safe-Zone Finder.

Serves the volcano alert level, hazard-zone checks, evacuation centers
and emergency hotlines to the browser frontend. Deployed as a single
Cloud Run service.
"""

import logging
import os
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from safezone.core.config import Config
from safezone.core.evacuation import (
    center_to_dict,
    rank_centers,
    ranked_center_to_dict,
)
from safezone.core.geo import check_location
from safezone.core.hotlines import DEFAULT_HOTLINES, hotline_to_dict
from safezone.resolver import AlertResolver, create_resolver
from safezone.shell.config_loader import load_runtime_config

log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ===== Response Models =====

class Coordinates(BaseModel):
    lat: float
    lng: float


class HazardResponse(BaseModel):
    location: Coordinates
    summit: Coordinates
    distance_km: float
    radius_km: float
    inside: bool


def create_app(
    config: Config | None = None,
    resolver: AlertResolver | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        config: Application configuration (loaded from env/file if not provided)
        resolver: Alert resolver (built from config if not provided)

    Returns:
        Configured FastAPI app; the resolver lives on app.state
    """
    config = config or load_runtime_config()

    app = FastAPI(
        title="Mayon Safe-Zone API",
        description="Alert level, hazard zone and evacuation data for Mayon Volcano",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.state.config = config
    app.state.resolver = resolver or create_resolver(config)

    # ===== Public Endpoints =====

    @app.get("/api/phivolcs")
    def get_alert(request: Request) -> dict[str, Any]:
        """Get the current alert level.

        Always 200: when upstream data is unavailable the body carries a
        fallback record whose `source` says so.
        """
        resolution = request.app.state.resolver.resolve_with_trace()
        logger.info(
            "Alert level %d from %s (%s)",
            resolution.record.alert_level,
            resolution.record.source,
            resolution.step.value,
        )
        return resolution.record.to_dict()

    @app.get("/api/hazard", response_model=HazardResponse)
    async def get_hazard(
        request: Request,
        lat: float = Query(ge=-90, le=90),
        lng: float = Query(ge=-180, le=180),
    ) -> HazardResponse:
        """Check a location against the hazard zone."""
        zone = request.app.state.config.hazard_zone
        check = check_location(lat, lng, zone)
        return HazardResponse(
            location=Coordinates(lat=check.latitude, lng=check.longitude),
            summit=Coordinates(lat=zone.latitude, lng=zone.longitude),
            distance_km=check.distance_km,
            radius_km=check.radius_km,
            inside=check.inside,
        )

    @app.get("/api/evacuation-centers")
    async def get_evacuation_centers(
        request: Request,
        lat: float | None = Query(default=None, ge=-90, le=90),
        lng: float | None = Query(default=None, ge=-180, le=180),
    ) -> dict[str, Any]:
        """List evacuation centers, nearest first when a position is given."""
        centers = request.app.state.config.evacuation_centers

        if lat is None and lng is None:
            return {
                "centers": [center_to_dict(c) for c in centers],
                "count": len(centers),
            }

        if lat is None or lng is None:
            raise HTTPException(status_code=400, detail="lat and lng must be given together")

        ranked = rank_centers(lat, lng, centers)
        return {
            "origin": Coordinates(lat=lat, lng=lng).model_dump(),
            "centers": [ranked_center_to_dict(r) for r in ranked],
            "nearest_id": ranked[0].center.id if ranked else None,
            "count": len(ranked),
        }

    @app.get("/api/hotlines")
    async def get_hotlines() -> dict[str, Any]:
        """List emergency hotlines."""
        return {"hotlines": [hotline_to_dict(h) for h in DEFAULT_HOTLINES]}

    @app.get("/health")
    async def health_check():
        """Health check endpoint for Cloud Run."""
        return {"status": "healthy"}

    return app


app = create_app()
