from .flight_number import FlightNumber

__all__ = ["FlightNumber"]
