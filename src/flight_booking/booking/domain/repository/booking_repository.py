from abc import abstractmethod

from flight_booking.booking.domain.entity import Booking
from flight_booking.shared.domain import Repository


class BookingRepository(Repository[Booking]):
    """フライト予約レポジトリ"""

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全件を作成日時の降順（新しい予約が先頭）で取得する"""
        raise NotImplementedError
