from typing import Iterable

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightNumber
from flight_booking.shared.domain import EntityId, IsoDateTime, Price
from flight_booking.shared.infrastructure.dynamodb_store import (
    DynamoDBStore,
    translate_errors,
)

ENTITY_TYPE = "FLIGHT"
LIST_PARTITION = "FLIGHTS"
METADATA = "METADATA"
UNIQUE = "UNIQUE"


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装

    - 本体: PK=FLIGHT#<id>, SK=METADATA
    - 一意性マーカー: PK=FLIGHT_NUMBER#<flight_number>, SK=UNIQUE
    - GSI1: GSI1PK=FLIGHTS, GSI1SK=<departure_time>#<id>（出発時刻順）
    """

    def __init__(self, store: DynamoDBStore) -> None:
        self._store = store

    def save(self, flight: Flight) -> None:
        """フライトと一意性マーカーを保存する"""
        marker = {
            "PK": _marker_pk(flight.flight_number),
            "SK": UNIQUE,
            "entity_type": "FLIGHT_NUMBER",
            "flight_id": str(flight.id),
        }
        with translate_errors("Error saving flight"):
            self._store.put_unique(
                [self._to_item(flight), marker],
                conflict_message=f"Flight {flight.flight_number} already exists.",
            )

    def find_by_id(self, flight_id: EntityId) -> Flight | None:
        """フライトIDで検索"""
        with translate_errors("Error fetching flight"):
            item = self._store.get(_key(flight_id))
        if not item:
            return None
        return self._to_entity(item)

    def find_by_ids(self, flight_ids: Iterable[EntityId]) -> dict[EntityId, Flight]:
        """複数のフライトIDでまとめて検索"""
        keys = [_key(flight_id) for flight_id in flight_ids]
        if not keys:
            return {}
        with translate_errors("Error fetching flights"):
            items = self._store.batch_get(keys)
        flights = [self._to_entity(item) for item in items]
        return {flight.id: flight for flight in flights}

    def find_all(self) -> list[Flight]:
        """出発時刻の昇順で全件取得"""
        with translate_errors("Error fetching flights"):
            items = self._store.query_index(LIST_PARTITION, ascending=True)
        return [self._to_entity(item) for item in items]

    def delete_all(self) -> int:
        """全フライトを一意性マーカーごと削除する"""
        with translate_errors("Error deleting flights"):
            items = self._store.query_index(LIST_PARTITION)
            keys = []
            for item in items:
                keys.append({"PK": item["PK"], "SK": item["SK"]})
                keys.append(
                    {"PK": _marker_pk(FlightNumber(item["flight_number"])), "SK": UNIQUE}
                )
            self._store.batch_delete(keys)
        return len(items)

    def _to_item(self, flight: Flight) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        return {
            "PK": f"FLIGHT#{flight.id}",
            "SK": METADATA,
            "entity_type": ENTITY_TYPE,
            "flight_id": str(flight.id),
            "flight_number": str(flight.flight_number),
            "origin": flight.origin,
            "destination": flight.destination,
            "departure_time": str(flight.departure_time),
            "arrival_time": str(flight.arrival_time),
            "price": flight.price.amount,
            "created_at": str(flight.created_at),
            "updated_at": str(flight.updated_at),
            "GSI1PK": LIST_PARTITION,
            "GSI1SK": f"{flight.departure_time}#{flight.id}",
        }

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Flight(
            id=EntityId(value=item["flight_id"]),
            flight_number=FlightNumber(value=item["flight_number"]),
            origin=item["origin"],
            destination=item["destination"],
            departure_time=IsoDateTime.from_string(item["departure_time"]),
            arrival_time=IsoDateTime.from_string(item["arrival_time"]),
            price=Price(amount=item["price"]),
            created_at=IsoDateTime.from_string(item["created_at"]),
            updated_at=IsoDateTime.from_string(item["updated_at"]),
        )


def _key(flight_id: EntityId) -> dict:
    return {"PK": f"FLIGHT#{flight_id}", "SK": METADATA}


def _marker_pk(flight_number: FlightNumber) -> str:
    return f"FLIGHT_NUMBER#{flight_number}"
