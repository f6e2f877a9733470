"""Configuration settings for the RouteWatch service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger("routewatch.config")


def _get_bool(env_var: str, default: bool = False) -> bool:
    """Parse an environment variable into a boolean with a default."""

    value = os.getenv(env_var)
    if value is None:
        return default

    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application configuration loaded from environment variables."""

    routewatch_env: str = os.getenv("ROUTEWATCH_ENV", "local")
    log_level: str = os.getenv("ROUTEWATCH_LOG_LEVEL", "INFO")

    # OpenSky telemetry polling
    enable_poller: bool = _get_bool("ENABLE_POLLER", default=True)
    opensky_states_url: str = os.getenv(
        "OPENSKY_STATES_URL",
        "https://opensky-network.org/api/states/all",
    )
    opensky_timeout: float = float(os.getenv("OPENSKY_TIMEOUT", "10.0"))
    poll_interval_seconds: float = float(os.getenv("POLL_INTERVAL_SECONDS", "10.0"))


settings = Settings()

if settings.poll_interval_seconds <= 0:
    logger.warning(
        "Invalid POLL_INTERVAL_SECONDS=%s; falling back to 10 seconds",
        settings.poll_interval_seconds,
    )
    settings.poll_interval_seconds = 10.0

__all__ = ["settings", "Settings"]
