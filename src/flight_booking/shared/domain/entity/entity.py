from __future__ import annotations

from abc import ABC

from flight_booking.shared.domain.value_object import EntityId, IsoDateTime


class Entity(ABC):
    """Entity 基底クラス

    - ID は永続化前にファクトリで採番する
    - 作成日時・更新日時を保持する（本システムでは作成後に更新しない）
    """

    def __init__(
        self,
        id: EntityId,
        created_at: IsoDateTime,
        updated_at: IsoDateTime | None = None,
    ) -> None:
        self._id = id
        self._created_at = created_at
        self._updated_at = updated_at or created_at

    @property
    def id(self) -> EntityId:
        return self._id

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def updated_at(self) -> IsoDateTime:
        return self._updated_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)
