from __future__ import annotations

import asyncio
import contextlib
import logging
import time

from fastapi import FastAPI, Request

from routewatch.api import api_router
from routewatch.config import settings
from routewatch.ingestors import TelemetryPoller

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("routewatch")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the telemetry poller on startup and tear it down on shutdown."""

    if settings.enable_poller:
        app.state.poller = TelemetryPoller()
        app.state.poller_task = asyncio.create_task(app.state.poller.run())
        logger.info("Telemetry poller scheduled")
    else:
        logger.info("Telemetry poller disabled; serving an empty flight feed")

    try:
        yield
    finally:
        poller: TelemetryPoller | None = getattr(app.state, "poller", None)
        if poller:
            poller.stop()

        task = getattr(app.state, "poller_task", None)
        if task:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task


app = FastAPI(title="RouteWatch", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log basic request information for observability."""

    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "HTTP %s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


app.include_router(api_router)
