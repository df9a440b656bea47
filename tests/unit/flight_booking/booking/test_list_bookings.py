from unittest.mock import MagicMock

from flight_booking.booking.applications.list_bookings import ListBookingsService
from flight_booking.shared.domain import EntityId

FLIGHT_ID = "11111111-1111-4111-8111-111111111111"
PASSENGER_ID = "22222222-2222-4222-8222-222222222222"


class TestListBookingsService:
    """ListBookingsService のテスト"""

    def test_list_populates_references_in_one_batch(
        self, create_booking, create_flight, create_passenger
    ):
        # Arrange
        newer = create_booking(
            booking_id="55555555-5555-4555-8555-555555555555",
            created_at="2025-01-03T00:00:00Z",
        )
        older = create_booking(created_at="2025-01-02T00:00:00Z")
        bookings = MagicMock()
        bookings.find_all.return_value = [newer, older]
        flights = MagicMock()
        flights.find_by_ids.return_value = {EntityId(FLIGHT_ID): create_flight()}
        passengers = MagicMock()
        passengers.find_by_ids.return_value = {
            EntityId(PASSENGER_ID): create_passenger()
        }
        service = ListBookingsService(
            booking_repository=bookings,
            flight_repository=flights,
            passenger_repository=passengers,
        )

        # Act
        views = service.list()

        # Assert
        assert [v.booking for v in views] == [newer, older]
        assert all(str(v.flight.flight_number) == "AA101" for v in views)
        assert all(v.passenger.full_name == "Jane Doe" for v in views)
        flights.find_by_ids.assert_called_once_with({EntityId(FLIGHT_ID)})
        passengers.find_by_ids.assert_called_once_with({EntityId(PASSENGER_ID)})

    def test_no_bookings_skips_lookups(self):
        bookings = MagicMock()
        bookings.find_all.return_value = []
        flights = MagicMock()
        passengers = MagicMock()
        service = ListBookingsService(bookings, flights, passengers)

        assert service.list() == []
        flights.find_by_ids.assert_not_called()
        passengers.find_by_ids.assert_not_called()
