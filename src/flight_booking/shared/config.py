import os
from dataclasses import dataclass
from typing import Mapping

from flight_booking.shared.domain.exception import ConfigurationException


@dataclass(frozen=True)
class Settings:
    """環境変数から読み込む実行時設定

    - TABLE_NAME: 必須。DynamoDB テーブル名（ストアの接続先）
    - DYNAMODB_ENDPOINT_URL: 任意。ローカル DynamoDB 等のエンドポイント
    """

    table_name: str
    endpoint_url: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ

        table_name = env.get("TABLE_NAME", "").strip()
        if not table_name:
            raise ConfigurationException(
                "FATAL ERROR: TABLE_NAME environment variable is not set."
            )

        return cls(
            table_name=table_name,
            endpoint_url=env.get("DYNAMODB_ENDPOINT_URL") or None,
        )
