import json

from aws_lambda_powertools.event_handler import Response, content_types


def api_response(status_code: int, body: dict | list) -> Response:
    """API Gateway HTTP API のレスポンスを生成する"""
    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=json.dumps(body, default=str),
    )


def error_response(
    status_code: int, message: str, errors: list[str] | None = None
) -> Response:
    """エラーレスポンスを生成する（errors はバリデーション時のみ）"""
    body: dict = {"message": message}
    if errors is not None:
        body["errors"] = errors
    return api_response(status_code, body)
