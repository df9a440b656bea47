from abc import abstractmethod
from typing import Iterable

from flight_booking.flight.domain.entity import Flight
from flight_booking.shared.domain import EntityId, Repository


class FlightRepository(Repository[Flight]):
    """フライトレポジトリ

    - flight_number は一意（重複時は DuplicateResourceException）
    - find_all は出発時刻の昇順
    """

    @abstractmethod
    def find_by_id(self, flight_id: EntityId) -> Flight | None:
        """フライトIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_ids(self, flight_ids: Iterable[EntityId]) -> dict[EntityId, Flight]:
        """複数IDでまとめて検索する（見つからないIDは結果に含まれない）"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Flight]:
        """全件を出発時刻の昇順で取得する"""
        raise NotImplementedError

    @abstractmethod
    def delete_all(self) -> int:
        """全フライトを削除し、削除件数を返す"""
        raise NotImplementedError
