"""Geometry, position mapping and presentation services."""

from .geometry import closest_point_on_segment, great_circle_distance_km, initial_bearing
from .position_mapper import map_flight, map_flights
from .presentation import (
    altitude_feet,
    build_flight_feed,
    build_marker,
    build_route_catalog,
    speed_knots,
)

__all__ = [
    "altitude_feet",
    "build_flight_feed",
    "build_marker",
    "build_route_catalog",
    "closest_point_on_segment",
    "great_circle_distance_km",
    "initial_bearing",
    "map_flight",
    "map_flights",
    "speed_knots",
]
