from decimal import Decimal

import pytest

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.factory import FlightDetails, FlightFactory
from flight_booking.shared.domain import EntityId


class TestFlightFactory:
    def test_create_flight(self):
        factory = FlightFactory()
        details: FlightDetails = {
            "flight_number": "aa101",
            "origin": "Toronto Pearson Intl (YYZ)",
            "destination": "New York LaGuardia (LGA)",
            "departure_time": "2025-07-10T08:00:00Z",
            "arrival_time": "2025-07-10T09:35:00Z",
            "price": Decimal("275.50"),
        }

        flight = factory.create(details)

        assert isinstance(flight, Flight)
        assert EntityId.is_valid(flight.id.value)
        assert str(flight.flight_number) == "AA101"
        assert str(flight.departure_time) == "2025-07-10T08:00:00.000Z"

    def test_negative_price_raises_error(self):
        with pytest.raises(ValueError, match="negative"):
            FlightFactory().create(
                {
                    "flight_number": "AA101",
                    "origin": "YYZ",
                    "destination": "LGA",
                    "departure_time": "2025-07-10T08:00:00Z",
                    "arrival_time": "2025-07-10T09:35:00Z",
                    "price": Decimal("-1"),
                }
            )
