import httpx
import pytest

from routewatch.ingestors.opensky import (
    OpenSkyIngestor,
    TelemetryFetchError,
    filter_tracked,
    match_flight_id,
    parse_states,
)
from routewatch.models.flights import TelemetryRecord


def _state(callsign, *, lon=-100.0, lat=38.0, altitude=10000.0, velocity=250.0):
    return [
        "a1b2c3",  # icao24
        callsign,
        "United States",
        1714765198,  # time_position
        1714765200,  # last_contact
        lon,
        lat,
        altitude,  # baro_altitude meters
        False,  # on_ground
        velocity,  # velocity m/s
        75.5,  # true_track
        0.0,  # vertical_rate
        None,  # sensors
        10050.0,  # geo_altitude
        "1200",  # squawk
        False,  # spi
        0,  # position_source
    ]


@pytest.mark.anyio
async def test_fetch_states_parses_positional_fields():
    payload = {"time": 1714765200, "states": [_state("UAL2402 ")]}

    def handler(request: httpx.Request):
        assert str(request.url) == "https://example.test/api/states/all"
        return httpx.Response(200, json=payload)

    ingestor = OpenSkyIngestor(
        base_url="https://example.test/api/states/all",
        transport=httpx.MockTransport(handler),
    )

    records = await ingestor.fetch_states()

    assert records == [
        TelemetryRecord(
            icao24="a1b2c3",
            callsign="UAL2402 ",
            origin_country="United States",
            longitude=-100.0,
            latitude=38.0,
            baro_altitude=10000.0,
            velocity=250.0,
            true_track=75.5,
        )
    ]


def test_parse_states_defaults_missing_fields():
    records = parse_states({"states": [["abc", None, None, None, None, None, None, None]]})

    assert len(records) == 1
    record = records[0]
    assert record.icao24 == "abc"
    assert record.callsign == ""
    assert record.origin_country == ""
    assert record.latitude == 0
    assert record.longitude == 0
    assert record.baro_altitude == 0
    assert record.velocity == 0
    assert record.true_track == 0


@pytest.mark.anyio
async def test_missing_states_key_yields_empty_result():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"time": 1}))
    ingestor = OpenSkyIngestor(base_url="https://example.test", transport=transport)

    assert await ingestor.fetch_states() == []


def test_null_states_yields_empty_result():
    assert parse_states({"time": 1, "states": None}) == []


@pytest.mark.anyio
@pytest.mark.parametrize("status_code", [429, 500, 503])
async def test_error_status_raises_fetch_error(status_code):
    transport = httpx.MockTransport(
        lambda request: httpx.Response(status_code, text="unavailable")
    )
    ingestor = OpenSkyIngestor(base_url="https://example.test", transport=transport)

    with pytest.raises(TelemetryFetchError):
        await ingestor.fetch_states()


@pytest.mark.anyio
async def test_invalid_json_raises_fetch_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
    ingestor = OpenSkyIngestor(base_url="https://example.test", transport=transport)

    with pytest.raises(TelemetryFetchError):
        await ingestor.fetch_states()


@pytest.mark.anyio
async def test_transport_error_raises_fetch_error():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    ingestor = OpenSkyIngestor(
        base_url="https://example.test", transport=httpx.MockTransport(handler)
    )

    with pytest.raises(TelemetryFetchError):
        await ingestor.fetch_states()


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "an", "object"],
        {"states": "nope"},
        {"states": [{"icao24": "abc"}]},
        {"states": [["abc", "UAL2402", "US", None, None, "west", 10.0]]},
        {"states": [["abc", "UAL2402", "US", None, None, 10**400, 10.0]]},
        {"states": [["abc", "UAL2402", "US", None, None, -100.0, float("inf")]]},
        {"states": [["abc", "UAL2402", "US", None, None, -100.0, 40.0, float("nan")]]},
    ],
)
def test_malformed_payloads_raise_fetch_error(payload):
    with pytest.raises(TelemetryFetchError):
        parse_states(payload)


def test_filter_keeps_exact_and_substring_callsigns():
    records = [
        TelemetryRecord(callsign="UAL2402"),
        TelemetryRecord(callsign="XUAL24029"),
        TelemetryRecord(callsign="ual2402"),
        TelemetryRecord(callsign="DAL88"),
        TelemetryRecord(callsign=""),
    ]

    kept = filter_tracked(records, ["UAL2402", "AAL100"])

    assert [record.callsign for record in kept] == ["UAL2402", "XUAL24029"]


def test_match_uses_first_tracked_id_in_order():
    assert match_flight_id("SIA12ANA12", ["ANA12", "SIA12"]) == "ANA12"
    assert match_flight_id("SIA12ANA12", ["SIA12", "ANA12"]) == "SIA12"
    assert match_flight_id("KLM601  ", ["KLM601"]) == "KLM601"
    assert match_flight_id("KLM60", ["KLM601"]) is None


@pytest.mark.anyio
async def test_overflowing_literal_in_body_raises_fetch_error():
    body = '{"states": [["abc", "UAL2402", "US", null, null, -100.0, 1e400]]}'
    transport = httpx.MockTransport(
        lambda request: httpx.Response(
            200, text=body, headers={"content-type": "application/json"}
        )
    )
    ingestor = OpenSkyIngestor(base_url="https://example.test", transport=transport)

    with pytest.raises(TelemetryFetchError):
        await ingestor.fetch_states()
