from flight_booking.flight.domain.value_object import FlightNumber
from flight_booking.shared.domain import Entity, EntityId, IsoDateTime, Price
from flight_booking.shared.domain.exception import BusinessRuleViolationException


class Flight(Entity):
    """フライト

    管理用のシード処理でのみ作成され、通常運用では変更されない。
    """

    def __init__(
        self,
        id: EntityId,
        flight_number: FlightNumber,
        origin: str,
        destination: str,
        departure_time: IsoDateTime,
        arrival_time: IsoDateTime,
        price: Price,
        created_at: IsoDateTime,
        updated_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id, created_at, updated_at)

        self._flight_number = flight_number
        self._origin = origin
        self._destination = destination
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._price = price

        self._validate_schedule()

    def _validate_schedule(self) -> None:
        """出発時刻 < 到着時刻"""
        if not self._departure_time.is_before(self._arrival_time):
            raise BusinessRuleViolationException(
                f"Departure time must be before arrival time: {self._flight_number}"
            )

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def departure_time(self) -> IsoDateTime:
        return self._departure_time

    @property
    def arrival_time(self) -> IsoDateTime:
        return self._arrival_time

    @property
    def price(self) -> Price:
        return self._price
