from .entity import Passenger
from .factory import PassengerDetails, PassengerFactory
from .repository import PassengerRepository
from .value_object import EmailAddress

__all__ = [
    "Passenger",
    "EmailAddress",
    "PassengerRepository",
    "PassengerFactory",
    "PassengerDetails",
]
