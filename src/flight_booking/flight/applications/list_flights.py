from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository


class ListFlightsService:
    """フライト一覧取得サービス"""

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def list(self) -> list[Flight]:
        """出発時刻の昇順でフライトを返す"""
        return self._repository.find_all()
