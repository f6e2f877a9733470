"""Telemetry ingestion for RouteWatch."""

from .opensky import (
    OpenSkyIngestor,
    TelemetryFetchError,
    filter_tracked,
    match_flight_id,
    parse_states,
)
from .poller import TelemetryPoller

__all__ = [
    "OpenSkyIngestor",
    "TelemetryFetchError",
    "TelemetryPoller",
    "filter_tracked",
    "match_flight_id",
    "parse_states",
]
