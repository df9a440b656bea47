from typing import Iterable

from flight_booking.passenger.domain.entity import Passenger
from flight_booking.passenger.domain.repository import PassengerRepository
from flight_booking.passenger.domain.value_object import EmailAddress
from flight_booking.shared.domain import EntityId, IsoDateTime
from flight_booking.shared.infrastructure.dynamodb_store import (
    DynamoDBStore,
    translate_errors,
)

ENTITY_TYPE = "PASSENGER"
METADATA = "METADATA"


class DynamoDBPassengerRepository(PassengerRepository):
    """DynamoDBを使用したPassengerRepository の具象実装

    - 本体: PK=PASSENGER#<id>, SK=METADATA
    - 一意性マーカー: PK=PASSENGER_EMAIL#<email>, SK=UNIQUE
    """

    def __init__(self, store: DynamoDBStore) -> None:
        self._store = store

    def save(self, passenger: Passenger) -> None:
        """搭乗者とメールアドレスの一意性マーカーを保存する"""
        marker = {
            "PK": f"PASSENGER_EMAIL#{passenger.email}",
            "SK": "UNIQUE",
            "entity_type": "PASSENGER_EMAIL",
            "passenger_id": str(passenger.id),
        }
        with translate_errors("Error adding passenger"):
            self._store.put_unique(
                [self._to_item(passenger), marker],
                conflict_message="Passenger with this email already exists.",
            )

    def find_by_id(self, passenger_id: EntityId) -> Passenger | None:
        """搭乗者IDで検索"""
        with translate_errors("Error fetching passenger"):
            item = self._store.get(_key(passenger_id))
        if not item:
            return None
        return self._to_entity(item)

    def find_by_ids(
        self, passenger_ids: Iterable[EntityId]
    ) -> dict[EntityId, Passenger]:
        """複数の搭乗者IDでまとめて検索"""
        keys = [_key(passenger_id) for passenger_id in passenger_ids]
        if not keys:
            return {}
        with translate_errors("Error fetching passengers"):
            items = self._store.batch_get(keys)
        passengers = [self._to_entity(item) for item in items]
        return {passenger.id: passenger for passenger in passengers}

    def _to_item(self, passenger: Passenger) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        return {
            "PK": f"PASSENGER#{passenger.id}",
            "SK": METADATA,
            "entity_type": ENTITY_TYPE,
            "passenger_id": str(passenger.id),
            "full_name": passenger.full_name,
            "email": str(passenger.email),
            "phone": passenger.phone,
            "created_at": str(passenger.created_at),
            "updated_at": str(passenger.updated_at),
        }

    def _to_entity(self, item: dict) -> Passenger:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Passenger(
            id=EntityId(value=item["passenger_id"]),
            full_name=item["full_name"],
            email=EmailAddress(value=item["email"]),
            phone=item.get("phone"),
            created_at=IsoDateTime.from_string(item["created_at"]),
            updated_at=IsoDateTime.from_string(item["updated_at"]),
        )


def _key(passenger_id: EntityId) -> dict:
    return {"PK": f"PASSENGER#{passenger_id}", "SK": METADATA}
