from pydantic import BaseModel, ConfigDict, Field

from flight_booking.booking.domain.view import BookingView
from flight_booking.flight.handlers.response_models import (
    FlightData,
    FlightSummary,
    to_flight_data,
    to_flight_summary,
)
from flight_booking.passenger.handlers.response_models import (
    PassengerData,
    PassengerSummary,
    to_passenger_data,
    to_passenger_summary,
)


class BookingData(BaseModel):
    """予約のレスポンスモデル（参照先を全項目展開）"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    flight: FlightData | None
    passenger: PassengerData | None
    seat_number: str | None = None
    created_at: str = Field(serialization_alias="createdAt")
    updated_at: str = Field(serialization_alias="updatedAt")


class BookingListItem(BaseModel):
    """予約一覧の要素（参照先を概要のみ展開）"""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    flight: FlightSummary | None
    passenger: PassengerSummary | None
    seat_number: str | None = None
    created_at: str = Field(serialization_alias="createdAt")
    updated_at: str = Field(serialization_alias="updatedAt")


class SuccessResponse(BaseModel):
    """予約成功レスポンスモデル"""

    message: str = "Booking successful"
    booking: BookingData


def to_response(view: BookingView) -> dict:
    """作成した予約をレスポンス辞書に変換する"""
    booking = view.booking
    return SuccessResponse(
        booking=BookingData(
            id=str(booking.id),
            flight=to_flight_data(view.flight) if view.flight else None,
            passenger=to_passenger_data(view.passenger) if view.passenger else None,
            seat_number=booking.seat_number,
            created_at=str(booking.created_at),
            updated_at=str(booking.updated_at),
        )
    ).model_dump(mode="json", by_alias=True, exclude_none=True)


def to_list_response(views: list[BookingView]) -> list[dict]:
    """予約一覧をレスポンス配列に変換する"""
    return [
        BookingListItem(
            id=str(view.booking.id),
            flight=to_flight_summary(view.flight) if view.flight else None,
            passenger=to_passenger_summary(view.passenger) if view.passenger else None,
            seat_number=view.booking.seat_number,
            created_at=str(view.booking.created_at),
            updated_at=str(view.booking.updated_at),
        ).model_dump(
            mode="json",
            by_alias=True,
            # 参照先の null は残し、未指定の座席番号のみ省略する
            exclude=None if view.booking.seat_number else {"seat_number"},
        )
        for view in views
    ]
