from abc import abstractmethod
from typing import Iterable

from flight_booking.passenger.domain.entity import Passenger
from flight_booking.shared.domain import EntityId, Repository


class PassengerRepository(Repository[Passenger]):
    """搭乗者レポジトリ

    - email は一意（重複時は DuplicateResourceException）
    """

    @abstractmethod
    def find_by_id(self, passenger_id: EntityId) -> Passenger | None:
        """搭乗者IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_ids(
        self, passenger_ids: Iterable[EntityId]
    ) -> dict[EntityId, Passenger]:
        """複数IDでまとめて検索する（見つからないIDは結果に含まれない）"""
        raise NotImplementedError
