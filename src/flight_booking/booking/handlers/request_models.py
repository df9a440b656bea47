from pydantic import BaseModel, Field, field_validator


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ

    flight_id / passenger_id の欠落と形式チェックは CreateBookingService が行う。
    """

    flight_id: str | None = Field(default=None, description="フライトID")

    passenger_id: str | None = Field(default=None, description="搭乗者ID")

    seat_number: str | None = Field(
        default=None,
        min_length=1,
        max_length=8,
        description="座席番号",
        examples=["12A"],
    )

    @field_validator("seat_number", mode="before")
    @classmethod
    def blank_seat_to_none(cls, v):
        """空文字は未指定として扱う"""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "flight_id": "3f2b8c1e-9d4a-4e6b-8f0a-1c2d3e4f5a6b",
                    "passenger_id": "7a1c9e20-4b3d-4f5e-a6b7-c8d9e0f1a2b3",
                    "seat_number": "12A",
                }
            ]
        }
    }
