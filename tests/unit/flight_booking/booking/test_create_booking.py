from unittest.mock import MagicMock

import pytest

from flight_booking.booking.applications.create_booking import CreateBookingService
from flight_booking.booking.domain.entity import Booking
from flight_booking.booking.domain.factory import BookingFactory
from flight_booking.booking.domain.view import BookingView
from flight_booking.shared.domain import EntityId
from flight_booking.shared.domain.exception import (
    InvalidIdentifierException,
    MissingReferenceException,
    ResourceNotFoundException,
)

FLIGHT_ID = "11111111-1111-4111-8111-111111111111"
PASSENGER_ID = "22222222-2222-4222-8222-222222222222"


@pytest.fixture
def repositories(create_flight, create_passenger):
    bookings = MagicMock()
    flights = MagicMock()
    passengers = MagicMock()
    flights.find_by_id.return_value = create_flight()
    passengers.find_by_id.return_value = create_passenger()
    return bookings, flights, passengers


@pytest.fixture
def service(repositories):
    bookings, flights, passengers = repositories
    return CreateBookingService(
        booking_repository=bookings,
        flight_repository=flights,
        passenger_repository=passengers,
        factory=BookingFactory(),
    )


class TestCreateBookingService:
    """CreateBookingService のテスト"""

    def test_create_saves_booking_and_returns_populated_view(self, service, repositories):
        # Arrange
        bookings, flights, passengers = repositories

        # Act
        view = service.create(FLIGHT_ID, PASSENGER_ID, seat_number="12A")

        # Assert
        assert isinstance(view, BookingView)
        assert isinstance(view.booking, Booking)
        assert view.booking.flight_id == EntityId(FLIGHT_ID)
        assert view.booking.passenger_id == EntityId(PASSENGER_ID)
        assert view.booking.seat_number == "12A"
        assert str(view.flight.flight_number) == "AA101"
        assert view.passenger.full_name == "Jane Doe"

        bookings.save.assert_called_once_with(view.booking)
        flights.find_by_id.assert_called_once_with(EntityId(FLIGHT_ID))
        passengers.find_by_id.assert_called_once_with(EntityId(PASSENGER_ID))

    def test_flight_and_passenger_are_not_mutated(self, service, repositories):
        """Booking 以外は書き込まない"""
        _, flights, passengers = repositories

        service.create(FLIGHT_ID, PASSENGER_ID)

        flights.save.assert_not_called()
        passengers.save.assert_not_called()

    @pytest.mark.parametrize(
        "flight_id, passenger_id",
        [(None, PASSENGER_ID), (FLIGHT_ID, None), ("", ""), (None, None)],
    )
    def test_missing_reference(self, service, repositories, flight_id, passenger_id):
        bookings, flights, _ = repositories

        with pytest.raises(
            MissingReferenceException, match="Flight ID and Passenger ID are required."
        ):
            service.create(flight_id, passenger_id)

        flights.find_by_id.assert_not_called()
        bookings.save.assert_not_called()

    def test_malformed_flight_id(self, service, repositories):
        """形式不正のIDは検索せずに InvalidIdentifierException"""
        bookings, flights, _ = repositories

        with pytest.raises(InvalidIdentifierException) as exc_info:
            service.create("not-an-id", PASSENGER_ID)

        assert exc_info.value.field == "flight"
        assert str(exc_info.value) == "Invalid format for flight ID."
        flights.find_by_id.assert_not_called()
        bookings.save.assert_not_called()

    def test_malformed_passenger_id(self, service):
        with pytest.raises(InvalidIdentifierException, match="passenger"):
            service.create(FLIGHT_ID, "not-an-id")

    def test_flight_not_found(self, service, repositories):
        """存在しないフライトの場合は書き込まない"""
        bookings, flights, _ = repositories
        flights.find_by_id.return_value = None

        with pytest.raises(
            ResourceNotFoundException, match=f"Flight with ID {FLIGHT_ID} not found."
        ):
            service.create(FLIGHT_ID, PASSENGER_ID)

        bookings.save.assert_not_called()

    def test_passenger_not_found(self, service, repositories):
        bookings, _, passengers = repositories
        passengers.find_by_id.return_value = None

        with pytest.raises(
            ResourceNotFoundException,
            match=f"Passenger with ID {PASSENGER_ID} not found.",
        ):
            service.create(FLIGHT_ID, PASSENGER_ID)

        bookings.save.assert_not_called()

    def test_duplicate_bookings_are_not_prevented(self, service, repositories):
        """同一搭乗者・同一便の重複予約は確認しない（既知の制約）"""
        bookings, _, _ = repositories

        first = service.create(FLIGHT_ID, PASSENGER_ID)
        second = service.create(FLIGHT_ID, PASSENGER_ID)

        assert first.booking.id != second.booking.id
        assert bookings.save.call_count == 2
