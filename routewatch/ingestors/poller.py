"""Periodic OpenSky polling and the in-memory telemetry snapshot."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
import logging
from typing import Sequence

from routewatch.config import settings
from routewatch.domain.reference import TRACKED_FLIGHTS
from routewatch.models.flights import TelemetryRecord, TelemetrySnapshot

from .opensky import OpenSkyIngestor, TelemetryFetchError, filter_tracked

logger = logging.getLogger("routewatch.poller")


class TelemetryPoller:
    """Own the current tracked-telemetry set and refresh it on a fixed interval.

    Every poll replaces the record set wholesale; a failed poll leaves the
    previous set untouched. Once stopped, a fetch that was already in flight
    completes without touching the snapshot.
    """

    def __init__(
        self,
        *,
        ingestor: OpenSkyIngestor | None = None,
        tracked_ids: Sequence[str] = TRACKED_FLIGHTS,
        interval: float | None = None,
    ) -> None:
        self.ingestor = ingestor or OpenSkyIngestor()
        self.tracked_ids = tuple(tracked_ids)
        self.interval = interval or settings.poll_interval_seconds
        self.records: list[TelemetryRecord] = []
        self.loading = False
        self.last_updated: datetime | None = None
        self.last_error: str | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> TelemetrySnapshot:
        return TelemetrySnapshot(
            records=list(self.records),
            loading=self.loading,
            last_updated=self.last_updated,
            last_error=self.last_error,
        )

    def stop(self) -> None:
        """Detach the poller so late fetch completions become no-ops."""

        self._closed = True
        self.loading = False

    async def poll_once(self) -> bool:
        """Fetch one snapshot and swap it in. Returns True when the set was replaced."""

        if self._closed:
            return False

        self.loading = True
        try:
            records = await self.ingestor.fetch_states()
        except TelemetryFetchError as exc:
            logger.warning("Telemetry poll failed: %s", exc)
            if not self._closed:
                self.last_error = str(exc)
            return False
        finally:
            if not self._closed:
                self.loading = False

        if self._closed:
            logger.debug("Discarding telemetry that arrived after shutdown")
            return False

        matched = filter_tracked(records, self.tracked_ids)
        self.records = matched
        self.last_updated = datetime.now(tz=timezone.utc)
        self.last_error = None
        logger.info(
            "Telemetry poll matched %s of %s aircraft", len(matched), len(records)
        )
        return True

    async def run(self) -> None:
        """Poll immediately, then every `interval` seconds until stopped or cancelled."""

        loop = asyncio.get_running_loop()
        logger.info("Telemetry poller started (interval=%ss)", self.interval)
        try:
            while not self._closed:
                started = loop.time()
                try:
                    await self.poll_once()
                except Exception as exc:
                    logger.warning("Telemetry poll cycle error: %s", exc)
                if self._closed:
                    break
                elapsed = loop.time() - started
                await asyncio.sleep(max(self.interval - elapsed, 0.0))
        except asyncio.CancelledError:
            logger.info("Telemetry poller cancelled")
            raise
        logger.info("Telemetry poller stopped")


__all__ = ["TelemetryPoller"]
