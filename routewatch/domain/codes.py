"""Airport code definitions for the tracked route network."""

from __future__ import annotations

from enum import Enum


class AirportCode(str, Enum):
    """ICAO codes of the airports served by tracked routes."""

    KLAX = "KLAX"
    KBOS = "KBOS"
    KJFK = "KJFK"
    EGLL = "EGLL"
    EDDF = "EDDF"
    LFPG = "LFPG"
    YSSY = "YSSY"
    RJTT = "RJTT"
    EHAM = "EHAM"
    WSSS = "WSSS"
    OMDB = "OMDB"


__all__ = ["AirportCode"]
