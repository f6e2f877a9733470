"""Place matched telemetry onto its assigned route."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from routewatch.domain.reference import FLIGHT_ROUTES, TRACKED_FLIGHTS
from routewatch.ingestors.opensky import match_flight_id
from routewatch.models.flights import Route, TelemetryRecord, TrackedFlightView

from .geometry import closest_point_on_segment, great_circle_distance_km, initial_bearing

logger = logging.getLogger("routewatch.services.position_mapper")


def map_flight(
    record: TelemetryRecord,
    tracked_ids: Sequence[str] = TRACKED_FLIGHTS,
    routes: Mapping[str, Route] = FLIGHT_ROUTES,
) -> Optional[TrackedFlightView]:
    """Project a record onto its route and orient it toward the destination.

    The bearing is taken from the projected position, not the reported one,
    and the reported track angle is ignored. Returns None when the callsign
    matches no tracked designator or the designator has no route.
    """

    flight_id = match_flight_id(record.callsign, tracked_ids)
    if flight_id is None:
        return None

    route = routes.get(flight_id)
    if route is None:
        logger.debug("No route configured for %s; skipping", flight_id)
        return None

    origin, destination = route.origin, route.destination
    lat, lon = closest_point_on_segment(
        record.latitude,
        record.longitude,
        origin.lat,
        origin.lon,
        destination.lat,
        destination.lon,
    )

    return TrackedFlightView(
        flight_id=flight_id,
        record=record,
        route=route,
        lat=lat,
        lon=lon,
        bearing=initial_bearing(lat, lon, destination.lat, destination.lon),
        distance_to_destination_km=great_circle_distance_km(
            lat, lon, destination.lat, destination.lon
        ),
    )


def map_flights(
    records: Iterable[TelemetryRecord],
    tracked_ids: Sequence[str] = TRACKED_FLIGHTS,
    routes: Mapping[str, Route] = FLIGHT_ROUTES,
) -> list[TrackedFlightView]:
    views: list[TrackedFlightView] = []
    for record in records:
        view = map_flight(record, tracked_ids, routes)
        if view is not None:
            views.append(view)
    return views


__all__ = ["map_flight", "map_flights"]
