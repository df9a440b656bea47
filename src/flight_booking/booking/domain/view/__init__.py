from .booking_view import BookingView, populate

__all__ = ["BookingView", "populate"]
