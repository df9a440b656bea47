from pydantic import BaseModel, Field, field_validator

from flight_booking.passenger.domain.value_object import EmailAddress


class RegisterPassengerRequest(BaseModel):
    """搭乗者登録リクエストスキーマ"""

    full_name: str = Field(
        ...,
        description="氏名",
        examples=["Jane Doe"],
    )

    email: str = Field(
        ...,
        description="メールアドレス（小文字に正規化）",
        examples=["jane@example.com"],
    )

    phone: str | None = Field(default=None, description="電話番号")

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Full name is required")
        return v.strip()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """小文字に正規化し、形式を検証する"""
        return str(EmailAddress(v))

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "full_name": "Jane Doe",
                    "email": "jane@example.com",
                    "phone": "+1-555-0100",
                }
            ]
        }
    }
