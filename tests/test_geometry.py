import itertools

import pytest

from routewatch.services.geometry import (
    closest_point_on_segment,
    great_circle_distance_km,
    initial_bearing,
)


def test_distance_between_identical_points_is_zero():
    assert great_circle_distance_km(33.9425, -118.4081, 33.9425, -118.4081) == 0


def test_distance_matches_known_pair():
    # One degree of latitude on the 6371 km sphere
    assert great_circle_distance_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.195, rel=1e-4)
    # LAX to BOS is roughly 4190 km
    assert great_circle_distance_km(33.9425, -118.4081, 42.3644, -71.0052) == pytest.approx(
        4190, rel=0.01
    )


def test_zero_length_segment_returns_start():
    assert closest_point_on_segment(5.0, 5.0, 1.5, -2.25, 1.5, -2.25) == (1.5, -2.25)


def test_projection_inside_segment():
    lat, lon = closest_point_on_segment(1.0, 5.0, 0.0, 0.0, 0.0, 10.0)

    assert lat == pytest.approx(0.0)
    assert lon == pytest.approx(5.0)


def test_projection_clamps_to_endpoints():
    assert closest_point_on_segment(0.0, -4.0, 0.0, 0.0, 0.0, 10.0) == (0.0, 0.0)
    assert closest_point_on_segment(3.0, 14.0, 0.0, 0.0, 0.0, 10.0) == (0.0, 10.0)


def test_projection_stays_within_segment_bounds():
    start = (33.9425, -118.4081)
    end = (42.3644, -71.0052)
    points = itertools.product(range(-80, 81, 20), range(-170, 171, 34))

    for point_lat, point_lon in points:
        lat, lon = closest_point_on_segment(point_lat, point_lon, *start, *end)
        assert min(start[0], end[0]) <= lat <= max(start[0], end[0])
        assert min(start[1], end[1]) <= lon <= max(start[1], end[1])


def test_bearing_cardinal_directions():
    assert initial_bearing(10.0, 20.0, 30.0, 20.0) == pytest.approx(0.0)
    assert initial_bearing(30.0, 20.0, 10.0, 20.0) == pytest.approx(180.0)
    assert initial_bearing(0.0, 0.0, 0.0, 10.0) == pytest.approx(90.0)
    assert initial_bearing(0.0, 10.0, 0.0, 0.0) == pytest.approx(270.0)


def test_bearing_is_always_in_range():
    coords = [-60.0, -1e-12, 0.0, 45.0, 89.0]
    for lat1, lon1, lat2, lon2 in itertools.product(coords, repeat=4):
        bearing = initial_bearing(lat1, lon1, lat2, lon2)
        assert 0.0 <= bearing < 360.0
