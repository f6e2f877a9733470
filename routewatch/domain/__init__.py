"""Static reference data for the tracked route network."""

from .codes import AirportCode

__all__ = ["AirportCode"]
