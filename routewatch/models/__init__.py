"""Pydantic models for the RouteWatch service."""

from .flights import Airport, Route, TelemetryRecord, TelemetrySnapshot, TrackedFlightView
from .map import FlightFeedResponse, FlightMarker, RouteCatalogResponse, RouteLine

__all__ = [
    "Airport",
    "FlightFeedResponse",
    "FlightMarker",
    "Route",
    "RouteCatalogResponse",
    "RouteLine",
    "TelemetryRecord",
    "TelemetrySnapshot",
    "TrackedFlightView",
]
