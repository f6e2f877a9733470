"""Spherical and planar geometry helpers for placing aircraft on routes.

All inputs are in decimal degrees. The segment projection treats latitude and
longitude as a flat plane; it is only meaningful for routes that do not cross
the antimeridian or a pole.
"""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def great_circle_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points on a spherical Earth."""

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def closest_point_on_segment(
    point_lat: float,
    point_lon: float,
    start_lat: float,
    start_lon: float,
    end_lat: float,
    end_lon: float,
) -> tuple[float, float]:
    """Project a point onto the segment start-end, clamped to its endpoints."""

    a = point_lat - start_lat
    b = point_lon - start_lon
    c = end_lat - start_lat
    d = end_lon - start_lon

    len_sq = c * c + d * d
    # -1 forces the start endpoint for a zero-length segment
    param = (a * c + b * d) / len_sq if len_sq != 0 else -1.0

    if param < 0:
        return start_lat, start_lon
    if param > 1:
        return end_lat, end_lon
    return start_lat + param * c, start_lon + param * d


def initial_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Forward azimuth from the first point toward the second, in [0, 360)."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_lambda = math.radians(lon2 - lon1)

    y = math.sin(d_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(
        d_lambda
    )
    theta = math.atan2(y, x)
    return (math.degrees(theta) + 360) % 360


__all__ = [
    "EARTH_RADIUS_KM",
    "closest_point_on_segment",
    "great_circle_distance_km",
    "initial_bearing",
]
