from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from flight_booking.booking.domain.entity import Booking
from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.value_object import FlightNumber
from flight_booking.passenger.domain.entity import Passenger
from flight_booking.passenger.domain.value_object import EmailAddress
from flight_booking.shared.domain import EntityId, IsoDateTime, Price

FLIGHT_ID = "11111111-1111-4111-8111-111111111111"
PASSENGER_ID = "22222222-2222-4222-8222-222222222222"
BOOKING_ID = "33333333-3333-4333-8333-333333333333"


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: str = FLIGHT_ID,
        flight_number: str = "AA101",
        origin: str = "Toronto Pearson Intl (YYZ)",
        destination: str = "New York LaGuardia (LGA)",
        departure_time: str = "2025-07-10T08:00:00Z",
        arrival_time: str = "2025-07-10T09:35:00Z",
        price: Decimal = Decimal("275.50"),
        created_at: str = "2025-01-01T00:00:00Z",
    ) -> Flight:
        return Flight(
            id=EntityId(value=flight_id),
            flight_number=FlightNumber(value=flight_number),
            origin=origin,
            destination=destination,
            departure_time=IsoDateTime.from_string(departure_time),
            arrival_time=IsoDateTime.from_string(arrival_time),
            price=Price(amount=price),
            created_at=IsoDateTime.from_string(created_at),
        )

    return _factory


@pytest.fixture
def create_passenger():
    """Passenger を生成する Factory fixture"""

    def _factory(
        passenger_id: str = PASSENGER_ID,
        full_name: str = "Jane Doe",
        email: str = "jane@example.com",
        phone: str | None = None,
        created_at: str = "2025-01-01T00:00:00Z",
    ) -> Passenger:
        return Passenger(
            id=EntityId(value=passenger_id),
            full_name=full_name,
            email=EmailAddress(value=email),
            phone=phone,
            created_at=IsoDateTime.from_string(created_at),
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = BOOKING_ID,
        flight_id: str = FLIGHT_ID,
        passenger_id: str = PASSENGER_ID,
        seat_number: str | None = None,
        created_at: str = "2025-01-02T00:00:00Z",
    ) -> Booking:
        return Booking(
            id=EntityId(value=booking_id),
            flight_id=EntityId(value=flight_id),
            passenger_id=EntityId(value=passenger_id),
            seat_number=seat_number,
            created_at=IsoDateTime.from_string(created_at),
        )

    return _factory
