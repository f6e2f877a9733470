"""Models for airports, routes and the aircraft telemetry matched against them."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from routewatch.domain.codes import AirportCode


class Airport(BaseModel):
    """A fixed airport on the tracked route network."""

    code: AirportCode = Field(..., description="ICAO airport code")
    name: str = Field(..., description="Display name")
    lat: float = Field(..., description="Latitude in decimal degrees")
    lon: float = Field(..., description="Longitude in decimal degrees")

    model_config = ConfigDict(frozen=True)


class Route(BaseModel):
    """Origin and destination assigned to a tracked flight designator."""

    flight_id: str = Field(..., description="Flight designator, e.g. UAL2402")
    origin: Airport
    destination: Airport

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_endpoints(self) -> "Route":
        if self.origin.code == self.destination.code:
            raise ValueError(
                f"Route {self.flight_id} has identical origin and destination"
            )
        return self


class TelemetryRecord(BaseModel):
    """One aircraft state vector from a single poll."""

    icao24: str = Field(default="", description="ICAO 24-bit transponder address")
    callsign: str = Field(default="", description="Reported callsign, untrimmed")
    origin_country: str = Field(default="", description="Country of registration")
    longitude: float = Field(default=0.0, description="Longitude in decimal degrees")
    latitude: float = Field(default=0.0, description="Latitude in decimal degrees")
    baro_altitude: float = Field(default=0.0, description="Barometric altitude in meters")
    velocity: float = Field(default=0.0, description="Ground speed in meters per second")
    true_track: float = Field(default=0.0, description="Track angle in degrees")

    model_config = ConfigDict(extra="ignore")


class TrackedFlightView(BaseModel):
    """A telemetry record placed on its route for display."""

    flight_id: str
    record: TelemetryRecord
    route: Route
    lat: float = Field(..., description="Latitude of the position projected onto the route")
    lon: float = Field(..., description="Longitude of the position projected onto the route")
    bearing: float = Field(..., description="Bearing toward the destination in degrees")
    distance_to_destination_km: float = Field(
        ..., description="Great-circle distance from the projected position"
    )


class TelemetrySnapshot(BaseModel):
    """Latest telemetry set held by the poller."""

    records: list[TelemetryRecord] = Field(default_factory=list)
    loading: bool = False
    last_updated: Optional[datetime] = Field(
        default=None, description="Time of the last successful poll (UTC)"
    )
    last_error: Optional[str] = Field(
        default=None, description="Short description of the last failed poll"
    )


__all__ = [
    "Airport",
    "Route",
    "TelemetryRecord",
    "TelemetrySnapshot",
    "TrackedFlightView",
]
