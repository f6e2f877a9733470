"""View models and unit conversions for the map page."""

from __future__ import annotations

import math
from typing import Iterable, Mapping

from routewatch.domain.reference import FLIGHT_ROUTES, TRACKED_FLIGHTS, routed_airports
from routewatch.models.flights import Route, TelemetrySnapshot, TrackedFlightView
from routewatch.models.map import (
    FlightFeedResponse,
    FlightMarker,
    RouteCatalogResponse,
    RouteLine,
)

from .position_mapper import map_flights

FEET_PER_METER = 3.28084
KNOTS_PER_MPS = 1.94384


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with exact halves going up."""

    return math.floor(value + 0.5)


def altitude_feet(value_m: float) -> int:
    return round_half_up(value_m * FEET_PER_METER)


def speed_knots(value_ms: float) -> int:
    return round_half_up(value_ms * KNOTS_PER_MPS)


def build_marker(view: TrackedFlightView) -> FlightMarker:
    """Flatten a tracked flight into marker position, rotation and popup fields."""

    return FlightMarker(
        icao24=view.record.icao24,
        flight_id=view.flight_id,
        callsign=view.record.callsign,
        lat=view.lat,
        lon=view.lon,
        bearing=view.bearing,
        origin_name=view.route.origin.name,
        destination_name=view.route.destination.name,
        altitude_ft=altitude_feet(view.record.baro_altitude),
        speed_kt=speed_knots(view.record.velocity),
        distance_to_destination_km=round(view.distance_to_destination_km, 1),
    )


def build_flight_feed(snapshot: TelemetrySnapshot) -> FlightFeedResponse:
    """Recompute every marker from the current snapshot."""

    views = map_flights(snapshot.records)
    return FlightFeedResponse(
        loading=snapshot.loading,
        last_updated=snapshot.last_updated,
        flights=[build_marker(view) for view in views],
    )


def build_route_catalog(
    routes: Mapping[str, Route] = FLIGHT_ROUTES,
    tracked_ids: Iterable[str] = TRACKED_FLIGHTS,
) -> RouteCatalogResponse:
    return RouteCatalogResponse(
        tracked_flights=list(tracked_ids),
        routes=[
            RouteLine(
                flight_id=flight_id,
                origin=route.origin,
                destination=route.destination,
            )
            for flight_id, route in routes.items()
        ],
        airports=routed_airports(routes),
    )


__all__ = [
    "FEET_PER_METER",
    "KNOTS_PER_MPS",
    "altitude_feet",
    "build_flight_feed",
    "build_marker",
    "build_route_catalog",
    "round_half_up",
    "speed_knots",
]
