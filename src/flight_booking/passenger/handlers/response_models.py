from pydantic import BaseModel, ConfigDict, Field

from flight_booking.passenger.domain.entity import Passenger


class PassengerData(BaseModel):
    """搭乗者のレスポンスモデル"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    full_name: str
    email: str
    phone: str | None = None
    created_at: str = Field(serialization_alias="createdAt")
    updated_at: str = Field(serialization_alias="updatedAt")


class PassengerSummary(BaseModel):
    """予約一覧に埋め込む搭乗者概要"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    full_name: str
    email: str


class SuccessResponse(BaseModel):
    """登録成功レスポンスモデル"""

    message: str = "Passenger created successfully"
    passengerId: str
    passenger: PassengerData


def to_passenger_data(passenger: Passenger) -> PassengerData:
    """Passenger エンティティをレスポンスモデルに変換する"""
    return PassengerData(
        id=str(passenger.id),
        full_name=passenger.full_name,
        email=str(passenger.email),
        phone=passenger.phone,
        created_at=str(passenger.created_at),
        updated_at=str(passenger.updated_at),
    )


def to_passenger_summary(passenger: Passenger) -> PassengerSummary:
    """Passenger エンティティを概要モデルに変換する"""
    return PassengerSummary(
        id=str(passenger.id),
        full_name=passenger.full_name,
        email=str(passenger.email),
    )


def to_response(passenger: Passenger) -> dict:
    """登録結果をレスポンス辞書に変換する"""
    return SuccessResponse(
        passengerId=str(passenger.id),
        passenger=to_passenger_data(passenger),
    ).model_dump(mode="json", by_alias=True, exclude_none=True)
