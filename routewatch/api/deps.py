"""Shared request dependencies."""

from __future__ import annotations

from fastapi import Request

from routewatch.ingestors import TelemetryPoller
from routewatch.models.flights import TelemetrySnapshot


def get_snapshot(request: Request) -> TelemetrySnapshot:
    """Current telemetry snapshot, or an empty one when polling is disabled."""

    poller: TelemetryPoller | None = getattr(request.app.state, "poller", None)
    if poller is None:
        return TelemetrySnapshot()
    return poller.snapshot()
