from typing import NotRequired, TypedDict

from flight_booking.passenger.domain.entity import Passenger
from flight_booking.passenger.domain.value_object import EmailAddress
from flight_booking.shared.domain import EntityId, IsoDateTime


class PassengerDetails(TypedDict):
    """搭乗者情報の入力データ構造"""

    full_name: str
    email: str
    phone: NotRequired[str | None]


class PassengerFactory:
    """搭乗者エンティティのファクトリ"""

    def create(self, details: PassengerDetails) -> Passenger:
        """新規搭乗者エンティティを生成する"""
        return Passenger(
            id=EntityId.generate(),
            full_name=details["full_name"],
            email=EmailAddress(details["email"]),
            phone=details.get("phone") or None,
            created_at=IsoDateTime.now(),
        )
