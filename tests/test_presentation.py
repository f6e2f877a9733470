from datetime import datetime, timezone

from routewatch.models.flights import TelemetryRecord, TelemetrySnapshot
from routewatch.services.presentation import (
    altitude_feet,
    build_flight_feed,
    build_route_catalog,
    round_half_up,
    speed_knots,
)


def test_unit_conversions_round_to_integers():
    assert altitude_feet(10000) == 32808
    assert speed_knots(250) == 486
    assert altitude_feet(0) == 0
    assert speed_knots(0) == 0


def test_flight_feed_carries_popup_fields():
    updated = datetime(2024, 5, 3, 19, 40, tzinfo=timezone.utc)
    snapshot = TelemetrySnapshot(
        records=[
            TelemetryRecord(
                icao24="a1b2c3",
                callsign="AAL100  ",
                latitude=45.0,
                longitude=-40.0,
                baro_altitude=10000.0,
                velocity=250.0,
            ),
            TelemetryRecord(icao24="ffffff", callsign="DAL88"),
        ],
        loading=True,
        last_updated=updated,
    )

    feed = build_flight_feed(snapshot)

    assert feed.loading is True
    assert feed.last_updated == updated
    assert len(feed.flights) == 1
    marker = feed.flights[0]
    assert marker.flight_id == "AAL100"
    assert marker.callsign == "AAL100  "
    assert marker.origin_name == "New York JFK"
    assert marker.destination_name == "London Heathrow"
    assert marker.altitude_ft == 32808
    assert marker.speed_kt == 486
    assert 0 <= marker.bearing < 360


def test_route_catalog_lists_every_tracked_flight():
    catalog = build_route_catalog()

    assert catalog.tracked_flights == [route.flight_id for route in catalog.routes]
    assert "UAL2402" in catalog.tracked_flights
    assert len(catalog.airports) == 11


def test_exact_halves_round_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.4999) == 2
