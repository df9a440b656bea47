from flight_booking.booking.domain.repository import BookingRepository
from flight_booking.booking.domain.view import BookingView, populate
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.passenger.domain.repository import PassengerRepository


class ListBookingsService:
    """予約一覧取得サービス

    予約を作成日時の降順で取得し、フライト・搭乗者をそれぞれ一括取得して展開する。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        flight_repository: FlightRepository,
        passenger_repository: PassengerRepository,
    ) -> None:
        self._bookings = booking_repository
        self._flights = flight_repository
        self._passengers = passenger_repository

    def list(self) -> list[BookingView]:
        bookings = self._bookings.find_all()
        if not bookings:
            return []

        flights = self._flights.find_by_ids({b.flight_id for b in bookings})
        passengers = self._passengers.find_by_ids({b.passenger_id for b in bookings})
        return [populate(booking, flights, passengers) for booking in bookings]
