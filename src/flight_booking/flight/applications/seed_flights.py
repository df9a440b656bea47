from decimal import Decimal

from aws_lambda_powertools import Logger

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.factory import FlightDetails, FlightFactory
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.shared.domain.exception import ValidationException

logger = Logger(child=True)


DEFAULT_FLIGHTS: list[FlightDetails] = [
    {
        "flight_number": "AA101",
        "origin": "Toronto Pearson Intl (YYZ)",
        "destination": "New York LaGuardia (LGA)",
        "departure_time": "2025-07-10T08:00:00Z",
        "arrival_time": "2025-07-10T09:35:00Z",
        "price": Decimal("275.50"),
    },
    {
        "flight_number": "UA202",
        "origin": "Vancouver Intl (YVR)",
        "destination": "Los Angeles Intl (LAX)",
        "departure_time": "2025-07-15T09:30:00Z",
        "arrival_time": "2025-07-15T12:15:00Z",
        "price": Decimal("350.00"),
    },
    {
        "flight_number": "AC303",
        "origin": "Calgary Intl (YYC)",
        "destination": "Chicago O'Hare (ORD)",
        "departure_time": "2025-07-20T14:00:00Z",
        "arrival_time": "2025-07-20T17:50:00Z",
        "price": Decimal("410.75"),
    },
    {
        "flight_number": "DL404",
        "origin": "New York LaGuardia (LGA)",
        "destination": "Toronto Pearson Intl (YYZ)",
        "departure_time": "2025-07-11T11:00:00Z",
        "arrival_time": "2025-07-11T12:30:00Z",
        "price": Decimal("260.00"),
    },
]


class SeedFlightsService:
    """フライト初期データ投入サービス（管理用）

    replace=True の場合は既存フライトを全削除してから投入する。
    既存の予約が参照するフライトも削除されるため、一覧では null として展開される。
    """

    def __init__(self, repository: FlightRepository, factory: FlightFactory) -> None:
        self._repository = repository
        self._factory = factory

    def seed(
        self, flights: list[FlightDetails] | None = None, replace: bool = True
    ) -> list[Flight]:
        """フライトを投入する"""
        details = DEFAULT_FLIGHTS if flights is None else flights

        # 全件を先に生成し、不正なデータがあれば1件も書き込まない
        created = [self._factory.create(d) for d in details]
        _reject_duplicates(created)

        if replace:
            deleted = self._repository.delete_all()
            logger.info("Deleted existing flights", extra={"count": deleted})

        for flight in created:
            self._repository.save(flight)

        logger.info("Inserted flights", extra={"count": len(created)})
        return created


def _reject_duplicates(flights: list[Flight]) -> None:
    """投入データ内のフライト番号の重複を検出する"""
    seen: set[str] = set()
    errors = []
    for index, flight in enumerate(flights):
        number = str(flight.flight_number)
        if number in seen:
            errors.append(f"flights.{index}.flight_number: Duplicate flight number {number}")
        seen.add(number)
    if errors:
        raise ValidationException(errors)
