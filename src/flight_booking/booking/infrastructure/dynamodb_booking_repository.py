from flight_booking.booking.domain.entity import Booking
from flight_booking.booking.domain.repository import BookingRepository
from flight_booking.shared.domain import EntityId, IsoDateTime
from flight_booking.shared.infrastructure.dynamodb_store import (
    DynamoDBStore,
    translate_errors,
)

ENTITY_TYPE = "BOOKING"
LIST_PARTITION = "BOOKINGS"
METADATA = "METADATA"


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    - 本体: PK=BOOKING#<id>, SK=METADATA
    - GSI1: GSI1PK=BOOKINGS, GSI1SK=<created_at>#<id>（作成日時順）
    """

    def __init__(self, store: DynamoDBStore) -> None:
        self._store = store

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        with translate_errors("Booking failed"):
            self._store.put(
                self._to_item(booking),
                conflict_message=f"Booking already exists: {booking.id}",
            )

    def find_all(self) -> list[Booking]:
        """作成日時の降順で全件取得"""
        with translate_errors("Error fetching bookings"):
            items = self._store.query_index(LIST_PARTITION, ascending=False)
        return [self._to_entity(item) for item in items]

    def _to_item(self, booking: Booking) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        return {
            "PK": f"BOOKING#{booking.id}",
            "SK": METADATA,
            "entity_type": ENTITY_TYPE,
            "booking_id": str(booking.id),
            "flight_id": str(booking.flight_id),
            "passenger_id": str(booking.passenger_id),
            "seat_number": booking.seat_number,
            "created_at": str(booking.created_at),
            "updated_at": str(booking.updated_at),
            "GSI1PK": LIST_PARTITION,
            "GSI1SK": f"{booking.created_at}#{booking.id}",
        }

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=EntityId(value=item["booking_id"]),
            flight_id=EntityId(value=item["flight_id"]),
            passenger_id=EntityId(value=item["passenger_id"]),
            seat_number=item.get("seat_number"),
            created_at=IsoDateTime.from_string(item["created_at"]),
            updated_at=IsoDateTime.from_string(item["updated_at"]),
        )
