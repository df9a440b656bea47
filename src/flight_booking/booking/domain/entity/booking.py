from flight_booking.shared.domain import Entity, EntityId, IsoDateTime


class Booking(Entity):
    """フライト予約

    Flight と Passenger を ID で参照する。作成後は更新・削除しない。
    参照先の存在は永続化層では保証されないため、作成時にアプリケーション層で確認する。
    """

    def __init__(
        self,
        id: EntityId,
        flight_id: EntityId,
        passenger_id: EntityId,
        created_at: IsoDateTime,
        seat_number: str | None = None,
        updated_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id, created_at, updated_at)

        self._flight_id = flight_id
        self._passenger_id = passenger_id
        self._seat_number = seat_number

    @property
    def flight_id(self) -> EntityId:
        return self._flight_id

    @property
    def passenger_id(self) -> EntityId:
        return self._passenger_id

    @property
    def seat_number(self) -> str | None:
        return self._seat_number
