from concurrent.futures import ThreadPoolExecutor

from aws_lambda_powertools import Logger

from flight_booking.booking.domain.factory import BookingFactory
from flight_booking.booking.domain.repository import BookingRepository
from flight_booking.booking.domain.view import BookingView
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.passenger.domain.repository import PassengerRepository
from flight_booking.shared.domain import EntityId
from flight_booking.shared.domain.exception import (
    InvalidIdentifierException,
    MissingReferenceException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class CreateBookingService:
    """フライト予約作成サービス

    1. フライトIDと搭乗者IDの有無・形式を確認する
    2. フライトと搭乗者を並行して取得し、存在を確認する
    3. 予約を1件書き込み、参照先を展開して返す

    書き込むのは Booking のみで、Flight / Passenger は変更しない。
    座席の空き状況や同一搭乗者・同一便の重複予約は確認しない（既知の制約）。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        flight_repository: FlightRepository,
        passenger_repository: PassengerRepository,
        factory: BookingFactory,
    ) -> None:
        self._bookings = booking_repository
        self._flights = flight_repository
        self._passengers = passenger_repository
        self._factory = factory

    def create(
        self,
        flight_id: str | None,
        passenger_id: str | None,
        seat_number: str | None = None,
    ) -> BookingView:
        """予約を作成する"""
        if not flight_id or not passenger_id:
            raise MissingReferenceException("Flight ID and Passenger ID are required.")

        flight_key = _parse_id("flight", flight_id)
        passenger_key = _parse_id("passenger", passenger_id)

        with ThreadPoolExecutor(max_workers=2) as executor:
            flight_future = executor.submit(self._flights.find_by_id, flight_key)
            passenger_future = executor.submit(
                self._passengers.find_by_id, passenger_key
            )
            flight = flight_future.result()
            passenger = passenger_future.result()

        if flight is None:
            raise ResourceNotFoundException(f"Flight with ID {flight_id} not found.")
        if passenger is None:
            raise ResourceNotFoundException(
                f"Passenger with ID {passenger_id} not found."
            )

        booking = self._factory.create(flight.id, passenger.id, seat_number)
        self._bookings.save(booking)

        logger.info(
            "Booking created",
            extra={
                "booking_id": str(booking.id),
                "flight_id": str(flight.id),
                "passenger_id": str(passenger.id),
            },
        )
        return BookingView(booking=booking, flight=flight, passenger=passenger)


def _parse_id(field: str, value: str) -> EntityId:
    """文字列を EntityId に変換する（形式不正は InvalidIdentifierException）"""
    try:
        return EntityId(value=value)
    except ValueError as e:
        raise InvalidIdentifierException(field, value) from e
