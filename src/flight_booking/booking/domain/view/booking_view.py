from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from flight_booking.booking.domain.entity import Booking
from flight_booking.flight.domain.entity import Flight
from flight_booking.passenger.domain.entity import Passenger
from flight_booking.shared.domain import EntityId


@dataclass(frozen=True)
class BookingView:
    """参照先を展開した予約

    参照先が削除済みの場合、flight / passenger は None になる。
    """

    booking: Booking
    flight: Flight | None
    passenger: Passenger | None


def populate(
    booking: Booking,
    flights: Mapping[EntityId, Flight],
    passengers: Mapping[EntityId, Passenger],
) -> BookingView:
    """予約の参照IDを、取得済みのフライト・搭乗者で置き換える"""
    return BookingView(
        booking=booking,
        flight=flights.get(booking.flight_id),
        passenger=passengers.get(booking.passenger_id),
    )
