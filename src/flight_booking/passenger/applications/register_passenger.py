from aws_lambda_powertools import Logger

from flight_booking.passenger.domain.entity import Passenger
from flight_booking.passenger.domain.factory import PassengerDetails, PassengerFactory
from flight_booking.passenger.domain.repository import PassengerRepository

logger = Logger(child=True)


class RegisterPassengerService:
    """搭乗者登録サービス

    Factory と Repository を使用してエンティティの生成・永続化を行う。
    メールアドレスの重複はリポジトリが DuplicateResourceException として送出する。
    """

    def __init__(
        self, repository: PassengerRepository, factory: PassengerFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def register(self, details: PassengerDetails) -> Passenger:
        """搭乗者を登録する"""
        passenger = self._factory.create(details)
        self._repository.save(passenger)
        logger.info("Passenger created", extra={"passenger_id": str(passenger.id)})
        return passenger
