from .entity import Booking
from .factory import BookingFactory
from .repository import BookingRepository
from .view import BookingView, populate

__all__ = [
    "Booking",
    "BookingRepository",
    "BookingFactory",
    "BookingView",
    "populate",
]
