import json
from typing import Iterable

import pytest

from flight_booking.booking.applications.create_booking import CreateBookingService
from flight_booking.booking.applications.list_bookings import ListBookingsService
from flight_booking.booking.domain.entity import Booking
from flight_booking.booking.domain.factory import BookingFactory
from flight_booking.booking.domain.repository import BookingRepository
from flight_booking.flight.applications.list_flights import ListFlightsService
from flight_booking.flight.applications.seed_flights import SeedFlightsService
from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.factory import FlightFactory
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.passenger.applications.register_passenger import (
    RegisterPassengerService,
)
from flight_booking.passenger.domain.entity import Passenger
from flight_booking.passenger.domain.factory import PassengerFactory
from flight_booking.passenger.domain.repository import PassengerRepository
from flight_booking.shared.domain import EntityId
from flight_booking.shared.domain.exception import DuplicateResourceException


class InMemoryFlightRepository(FlightRepository):
    def __init__(self) -> None:
        self.items: dict[EntityId, Flight] = {}

    def save(self, flight: Flight) -> None:
        if any(f.flight_number == flight.flight_number for f in self.items.values()):
            raise DuplicateResourceException(
                f"Flight {flight.flight_number} already exists."
            )
        self.items[flight.id] = flight

    def find_by_id(self, flight_id: EntityId) -> Flight | None:
        return self.items.get(flight_id)

    def find_by_ids(self, flight_ids: Iterable[EntityId]) -> dict[EntityId, Flight]:
        return {i: self.items[i] for i in flight_ids if i in self.items}

    def find_all(self) -> list[Flight]:
        return sorted(self.items.values(), key=lambda f: str(f.departure_time))

    def delete_all(self) -> int:
        count = len(self.items)
        self.items.clear()
        return count


class InMemoryPassengerRepository(PassengerRepository):
    def __init__(self) -> None:
        self.items: dict[EntityId, Passenger] = {}

    def save(self, passenger: Passenger) -> None:
        if any(p.email == passenger.email for p in self.items.values()):
            raise DuplicateResourceException("Passenger with this email already exists.")
        self.items[passenger.id] = passenger

    def find_by_id(self, passenger_id: EntityId) -> Passenger | None:
        return self.items.get(passenger_id)

    def find_by_ids(
        self, passenger_ids: Iterable[EntityId]
    ) -> dict[EntityId, Passenger]:
        return {i: self.items[i] for i in passenger_ids if i in self.items}


class InMemoryBookingRepository(BookingRepository):
    def __init__(self) -> None:
        self.items: list[Booking] = []

    def save(self, booking: Booking) -> None:
        self.items.append(booking)

    def find_all(self) -> list[Booking]:
        # 同一時刻の場合は後から作成した予約を先頭にする
        return sorted(
            reversed(self.items), key=lambda b: str(b.created_at), reverse=True
        )


@pytest.fixture
def flights():
    return InMemoryFlightRepository()


@pytest.fixture
def passengers():
    return InMemoryPassengerRepository()


@pytest.fixture
def bookings():
    return InMemoryBookingRepository()


@pytest.fixture
def seeded_flights(flights):
    """既定のフライト4便を投入済みのリポジトリ"""
    SeedFlightsService(repository=flights, factory=FlightFactory()).seed()
    return flights


@pytest.fixture
def services(flights, passengers, bookings):
    """build_services と同じキーでインメモリ実装を組み立てる"""
    return {
        "list_flights": ListFlightsService(repository=flights),
        "register_passenger": RegisterPassengerService(
            repository=passengers, factory=PassengerFactory()
        ),
        "create_booking": CreateBookingService(
            booking_repository=bookings,
            flight_repository=flights,
            passenger_repository=passengers,
            factory=BookingFactory(),
        ),
        "list_bookings": ListBookingsService(
            booking_repository=bookings,
            flight_repository=flights,
            passenger_repository=passengers,
        ),
    }


@pytest.fixture
def http_event():
    """API Gateway HTTP API (payload v2.0) のイベントを生成する Factory fixture"""

    def _factory(method: str, path: str, body: object = None) -> dict:
        if body is None or isinstance(body, str):
            raw_body = body
        else:
            raw_body = json.dumps(body)
        return {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": path,
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "api-id",
                "domainName": "api-id.execute-api.us-east-1.amazonaws.com",
                "http": {
                    "method": method,
                    "path": path,
                    "protocol": "HTTP/1.1",
                    "sourceIp": "127.0.0.1",
                    "userAgent": "pytest",
                },
                "requestId": "request-id",
                "routeKey": "$default",
                "stage": "$default",
                "time": "10/Jul/2025:08:00:00 +0000",
                "timeEpoch": 1752134400000,
            },
            "body": raw_body,
            "isBase64Encoded": False,
        }

    return _factory
