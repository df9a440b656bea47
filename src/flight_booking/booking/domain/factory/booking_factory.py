from flight_booking.booking.domain.entity import Booking
from flight_booking.shared.domain import EntityId, IsoDateTime


class BookingFactory:
    """フライト予約エンティティのファクトリ

    - ID の採番
    - 作成日時の設定
    """

    def create(
        self,
        flight_id: EntityId,
        passenger_id: EntityId,
        seat_number: str | None = None,
    ) -> Booking:
        """新規予約エンティティを生成する

        Args:
            flight_id: 存在確認済みのフライトID
            passenger_id: 存在確認済みの搭乗者ID
            seat_number: 座席番号（任意）

        Returns:
            Booking: 生成された予約エンティティ
        """
        return Booking(
            id=EntityId.generate(),
            flight_id=flight_id,
            passenger_id=passenger_id,
            seat_number=seat_number or None,
            created_at=IsoDateTime.now(),
        )
