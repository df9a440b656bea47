from flight_booking.passenger.domain.value_object import EmailAddress
from flight_booking.shared.domain import Entity, EntityId, IsoDateTime
from flight_booking.shared.domain.exception import BusinessRuleViolationException


class Passenger(Entity):
    """搭乗者"""

    def __init__(
        self,
        id: EntityId,
        full_name: str,
        email: EmailAddress,
        created_at: IsoDateTime,
        phone: str | None = None,
        updated_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id, created_at, updated_at)

        if not full_name or not full_name.strip():
            raise BusinessRuleViolationException("Full name is required")

        self._full_name = full_name.strip()
        self._email = email
        self._phone = phone

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def email(self) -> EmailAddress:
        return self._email

    @property
    def phone(self) -> str | None:
        return self._phone
