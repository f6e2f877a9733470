"""OpenSky REST ingestor for the global aircraft state snapshot."""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Optional, Sequence

import httpx

from routewatch.config import settings
from routewatch.models.flights import TelemetryRecord

logger = logging.getLogger("routewatch.ingestors.opensky")

# Positional layout of an OpenSky state vector
ICAO24 = 0
CALLSIGN = 1
ORIGIN_COUNTRY = 2
LONGITUDE = 5
LATITUDE = 6
BARO_ALTITUDE = 7
VELOCITY = 9
TRUE_TRACK = 10


class TelemetryFetchError(RuntimeError):
    """Raised when a state snapshot cannot be fetched or understood."""


def _field(entry: Sequence[Any], index: int) -> Any:
    return entry[index] if len(entry) > index else None


def _text(entry: Sequence[Any], index: int) -> str:
    value = _field(entry, index)
    return str(value) if value else ""


def _number(entry: Sequence[Any], index: int) -> float:
    value = _field(entry, index)
    if not value:
        return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise TelemetryFetchError(
            f"Non-numeric value {value!r} at state index {index}"
        ) from exc
    if not math.isfinite(result):
        raise TelemetryFetchError(f"Non-finite value {value!r} at state index {index}")
    return result


def normalize_state(entry: Any) -> TelemetryRecord:
    """Convert one raw state vector into a TelemetryRecord.

    Absent or null fields fall back to 0 or an empty string. The callsign is
    kept exactly as reported, trailing padding included.
    """

    if not isinstance(entry, (list, tuple)):
        raise TelemetryFetchError(f"Unexpected state entry type: {type(entry).__name__}")

    return TelemetryRecord(
        icao24=_text(entry, ICAO24),
        callsign=_text(entry, CALLSIGN),
        origin_country=_text(entry, ORIGIN_COUNTRY),
        longitude=_number(entry, LONGITUDE),
        latitude=_number(entry, LATITUDE),
        baro_altitude=_number(entry, BARO_ALTITUDE),
        velocity=_number(entry, VELOCITY),
        true_track=_number(entry, TRUE_TRACK),
    )


def parse_states(payload: Any) -> list[TelemetryRecord]:
    """Normalize a decoded `states/all` body; a missing `states` key means no aircraft."""

    if not isinstance(payload, dict):
        raise TelemetryFetchError("State snapshot body is not a JSON object")

    raw_states = payload.get("states")
    if raw_states is None:
        return []
    if not isinstance(raw_states, list):
        raise TelemetryFetchError("State snapshot 'states' field is not a list")

    return [normalize_state(entry) for entry in raw_states]


def match_flight_id(callsign: str, tracked_ids: Iterable[str]) -> Optional[str]:
    """Return the first tracked designator contained in the callsign.

    Matching is a case-sensitive substring test on the untrimmed callsign, so
    "XUAL24029" matches "UAL2402".
    """

    for flight_id in tracked_ids:
        if flight_id in callsign:
            return flight_id
    return None


def filter_tracked(
    records: Iterable[TelemetryRecord], tracked_ids: Sequence[str]
) -> list[TelemetryRecord]:
    """Keep only records whose callsign contains one of the tracked designators."""

    return [
        record
        for record in records
        if match_flight_id(record.callsign, tracked_ids) is not None
    ]


class OpenSkyIngestor:
    """Fetch the global aircraft state snapshot from OpenSky."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.opensky_states_url
        self.timeout = timeout or settings.opensky_timeout
        self.transport = transport

    async def fetch_states(self) -> list[TelemetryRecord]:
        """Fetch and normalize every state vector, raising TelemetryFetchError on failure."""

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(self.base_url)
        except httpx.TimeoutException as exc:
            raise TelemetryFetchError(f"OpenSky request timed out: {exc}") from exc
        except httpx.RequestError as exc:
            raise TelemetryFetchError(f"OpenSky request failed: {exc}") from exc

        if response.status_code == 429:
            logger.warning("OpenSky rate limit encountered: %s", response.text)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TelemetryFetchError(
                f"OpenSky returned HTTP {exc.response.status_code}"
            ) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise TelemetryFetchError(f"Failed to parse OpenSky JSON response: {exc}") from exc

        records = parse_states(payload)
        logger.debug("Fetched %s aircraft states", len(records))
        return records


__all__ = [
    "OpenSkyIngestor",
    "TelemetryFetchError",
    "filter_tracked",
    "match_flight_id",
    "normalize_state",
    "parse_states",
]
