"""Compiled-in airport and flight-route tables."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from routewatch.domain.codes import AirportCode
from routewatch.models.flights import Airport, Route

_AIRPORT_ROWS: tuple[tuple[AirportCode, str, float, float], ...] = (
    (AirportCode.KLAX, "Los Angeles (LAX)", 33.9425, -118.4081),
    (AirportCode.KBOS, "Boston (BOS)", 42.3644, -71.0052),
    (AirportCode.KJFK, "New York JFK", 40.6413, -73.7781),
    (AirportCode.EGLL, "London Heathrow", 51.4700, -0.4543),
    (AirportCode.EDDF, "Frankfurt", 50.0379, 8.5622),
    (AirportCode.LFPG, "Paris Charles de Gaulle", 49.0097, 2.5478),
    (AirportCode.YSSY, "Sydney", -33.9461, 151.1772),
    (AirportCode.RJTT, "Tokyo Haneda", 35.5494, 139.7798),
    (AirportCode.EHAM, "Amsterdam", 52.3086, 4.7639),
    (AirportCode.WSSS, "Singapore", 1.3502, 103.9940),
    (AirportCode.OMDB, "Dubai", 25.2528, 55.3644),
)

# Enumeration order is significant: the first contained designator wins a match.
_ROUTE_ROWS: tuple[tuple[str, AirportCode, AirportCode], ...] = (
    ("UAL2402", AirportCode.KLAX, AirportCode.KBOS),
    ("AAL100", AirportCode.KJFK, AirportCode.EGLL),
    ("BAW283", AirportCode.EGLL, AirportCode.KLAX),
    ("DLH400", AirportCode.EDDF, AirportCode.KJFK),
    ("AFR66", AirportCode.LFPG, AirportCode.KLAX),
    ("QFA11", AirportCode.YSSY, AirportCode.KLAX),
    ("ANA12", AirportCode.RJTT, AirportCode.KLAX),
    ("KLM601", AirportCode.EHAM, AirportCode.KLAX),
    ("SIA12", AirportCode.WSSS, AirportCode.KLAX),
    ("EMIR215", AirportCode.OMDB, AirportCode.KLAX),
)


def _build_airports() -> Mapping[AirportCode, Airport]:
    table = {
        code: Airport(code=code, name=name, lat=lat, lon=lon)
        for code, name, lat, lon in _AIRPORT_ROWS
    }
    return MappingProxyType(table)


def _build_routes(airports: Mapping[AirportCode, Airport]) -> Mapping[str, Route]:
    table: dict[str, Route] = {}
    for flight_id, origin_code, destination_code in _ROUTE_ROWS:
        if origin_code not in airports or destination_code not in airports:
            raise ValueError(f"Route {flight_id} references an unknown airport")
        if flight_id in table:
            raise ValueError(f"Duplicate route for {flight_id}")
        table[flight_id] = Route(
            flight_id=flight_id,
            origin=airports[origin_code],
            destination=airports[destination_code],
        )
    return MappingProxyType(table)


AIRPORTS: Mapping[AirportCode, Airport] = _build_airports()
FLIGHT_ROUTES: Mapping[str, Route] = _build_routes(AIRPORTS)
TRACKED_FLIGHTS: tuple[str, ...] = tuple(FLIGHT_ROUTES)


def routed_airports(routes: Mapping[str, Route] = FLIGHT_ROUTES) -> list[Airport]:
    """Return each airport referenced by a route once, in first-seen order."""

    seen: dict[AirportCode, Airport] = {}
    for route in routes.values():
        seen.setdefault(route.origin.code, route.origin)
        seen.setdefault(route.destination.code, route.destination)
    return list(seen.values())


__all__ = ["AIRPORTS", "FLIGHT_ROUTES", "TRACKED_FLIGHTS", "routed_airports"]
