"""JSON feed consumed by the map page."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from routewatch.models.flights import TelemetrySnapshot
from routewatch.models.map import FlightFeedResponse, RouteCatalogResponse
from routewatch.services.presentation import build_flight_feed, build_route_catalog

from .deps import get_snapshot

router = APIRouter(prefix="/api/v1", tags=["flights"])


@router.get(
    "/flights",
    response_model=FlightFeedResponse,
    summary="Tracked aircraft placed on their routes",
)
def list_flights(snapshot: TelemetrySnapshot = Depends(get_snapshot)) -> FlightFeedResponse:
    """Markers for every tracked aircraft in the latest successful poll."""

    return build_flight_feed(snapshot)


@router.get(
    "/routes",
    response_model=RouteCatalogResponse,
    summary="Tracked flights, route lines and airports",
)
def list_routes() -> RouteCatalogResponse:
    return build_route_catalog()
