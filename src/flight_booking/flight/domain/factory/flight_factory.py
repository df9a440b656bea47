from decimal import Decimal
from typing import TypedDict

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.value_object import FlightNumber
from flight_booking.shared.domain import EntityId, IsoDateTime, Price


class FlightDetails(TypedDict):
    """フライト詳細の入力データ構造"""

    flight_number: str
    origin: str
    destination: str
    departure_time: str
    arrival_time: str
    price: Decimal


class FlightFactory:
    """フライトエンティティのファクトリ

    - ID の採番と作成日時の設定
    - プリミティブ型から Value Object への変換
    """

    def create(self, details: FlightDetails) -> Flight:
        """新規フライトエンティティを生成する

        Args:
            details: フライト詳細情報（検証済み）

        Returns:
            Flight: 生成されたフライトエンティティ
        """
        return Flight(
            id=EntityId.generate(),
            flight_number=FlightNumber(details["flight_number"]),
            origin=details["origin"],
            destination=details["destination"],
            departure_time=IsoDateTime.from_string(details["departure_time"]),
            arrival_time=IsoDateTime.from_string(details["arrival_time"]),
            price=Price(amount=details["price"]),
            created_at=IsoDateTime.now(),
        )
