from .entity import Flight
from .factory import FlightDetails, FlightFactory
from .repository import FlightRepository
from .value_object import FlightNumber

__all__ = [
    "Flight",
    "FlightNumber",
    "FlightRepository",
    "FlightFactory",
    "FlightDetails",
]
