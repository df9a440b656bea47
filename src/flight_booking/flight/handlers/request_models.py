from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from flight_booking.flight.domain.value_object import FlightNumber
from flight_booking.shared.domain import IsoDateTime
from flight_booking.shared.utils.validators import to_decimal


class FlightDetailsRequest(BaseModel):
    """フライト詳細の入力スキーマ"""

    flight_number: str = Field(
        ...,
        description="フライト番号（大文字に正規化）",
        examples=["AA101", "UA202"],
    )

    origin: str = Field(..., min_length=1, description="出発地")

    destination: str = Field(..., min_length=1, description="到着地")

    departure_time: str = Field(
        ...,
        description="出発時刻（ISO 8601形式）",
        examples=["2025-07-10T08:00:00Z"],
    )

    arrival_time: str = Field(
        ...,
        description="到着時刻（ISO 8601形式）",
        examples=["2025-07-10T09:35:00Z"],
    )

    price: Decimal = Field(..., ge=0, description="運賃", examples=[275.50])

    @field_validator("flight_number")
    @classmethod
    def normalize_flight_number(cls, v: str) -> str:
        """大文字に正規化する（空文字は不可）"""
        return str(FlightNumber(v))

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def validate_timestamp(cls, v: str) -> str:
        """ISO 8601 として解釈できることを検証する"""
        return str(IsoDateTime.from_string(v))

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        """Decimalに変換する"""
        if v is None or isinstance(v, bool):
            return v
        try:
            return to_decimal(v)
        except ArithmeticError:
            return v


class SeedFlightsRequest(BaseModel):
    """フライト初期データ投入リクエストスキーマ

    flights を省略した場合は既定のフライト一覧を投入する。
    """

    flights: list[FlightDetailsRequest] | None = None

    replace: bool = Field(default=True, description="既存フライトを削除してから投入する")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "replace": True,
                    "flights": [
                        {
                            "flight_number": "AA101",
                            "origin": "Toronto Pearson Intl (YYZ)",
                            "destination": "New York LaGuardia (LGA)",
                            "departure_time": "2025-07-10T08:00:00Z",
                            "arrival_time": "2025-07-10T09:35:00Z",
                            "price": 275.50,
                        }
                    ],
                }
            ]
        }
    }
