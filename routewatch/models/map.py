"""Response models for the map page's JSON feed."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .flights import Airport


class FlightMarker(BaseModel):
    """A rotated aircraft marker and its popup content."""

    icao24: str
    flight_id: str
    callsign: str
    lat: float
    lon: float
    bearing: float = Field(..., description="Marker rotation in degrees")
    origin_name: str
    destination_name: str
    altitude_ft: int
    speed_kt: int
    distance_to_destination_km: float


class RouteLine(BaseModel):
    """A straight route line between two airports."""

    flight_id: str
    origin: Airport
    destination: Airport


class FlightFeedResponse(BaseModel):
    """Current aircraft markers plus poll status."""

    loading: bool
    last_updated: Optional[datetime] = None
    flights: list[FlightMarker] = Field(default_factory=list)


class RouteCatalogResponse(BaseModel):
    """Static route network shown beneath the live markers."""

    tracked_flights: list[str]
    routes: list[RouteLine]
    airports: list[Airport]


__all__ = [
    "FlightFeedResponse",
    "FlightMarker",
    "RouteCatalogResponse",
    "RouteLine",
]
