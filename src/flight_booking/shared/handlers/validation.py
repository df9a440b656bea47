from typing import TypeVar

from aws_lambda_powertools.utilities.data_classes.common import BaseProxyEvent
from pydantic import BaseModel, ValidationError

from flight_booking.shared.domain.exception import ValidationException

M = TypeVar("M", bound=BaseModel)


def parse_body(event: BaseProxyEvent) -> object:
    """リクエストボディを JSON として読み込む（空ボディは空オブジェクト扱い）"""
    if not event.body:
        return {}
    try:
        return event.json_body
    except ValueError as e:
        raise ValidationException(["body: Malformed JSON"]) from e


def validate_payload(model: type[M], payload: object) -> M:
    """Pydantic モデルで検証し、失敗時は全フィールドのエラーを集約して送出する"""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise ValidationException(to_messages(e)) from e


def to_messages(error: ValidationError) -> list[str]:
    """ValidationError を "<field>: <message>" のリストに変換する"""
    messages = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "body"
        message = detail["msg"].removeprefix("Value error, ")
        messages.append(f"{field}: {message}")
    return messages
