from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Iterator

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from flight_booking.shared.config import Settings
from flight_booking.shared.domain.exception import (
    DuplicateResourceException,
    StoreException,
)

logger = Logger(child=True)

# DynamoDB API の1リクエストあたりの上限
BATCH_GET_LIMIT = 100
BATCH_WRITE_LIMIT = 25
MAX_UNPROCESSED_RETRIES = 5
# 未処理キーの再送間隔（秒）。再送ごとに倍にする
RETRY_BASE_DELAY = 0.05

GSI1 = "GSI1"


@contextmanager
def translate_errors(message: str) -> Iterator[None]:
    """botocore の例外を StoreException に変換する

    ドメイン例外（DuplicateResourceException 等）はそのまま送出する。
    """
    try:
        yield
    except (BotoCoreError, ClientError) as e:
        raise StoreException(message) from e


class DynamoDBStore:
    """DynamoDB テーブルへの接続ハンドル

    - スレッドセーフな低レベルクライアントのみを保持する
    - 起動時に verify() で疎通を確認し、終了時に close() で解放する
    - Python 値と DynamoDB 型表現の相互変換を担う
    """

    def __init__(
        self,
        table_name: str,
        client: Any | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        self.table_name = table_name
        self.client = client or boto3.client("dynamodb", endpoint_url=endpoint_url)
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    @classmethod
    def from_settings(cls, settings: Settings) -> DynamoDBStore:
        return cls(table_name=settings.table_name, endpoint_url=settings.endpoint_url)

    def verify(self) -> None:
        """テーブルに到達できることを確認する"""
        try:
            self.client.describe_table(TableName=self.table_name)
        except (BotoCoreError, ClientError) as e:
            raise StoreException(
                f"DynamoDB table is not reachable: {self.table_name}"
            ) from e
        logger.info("Connected to DynamoDB", extra={"table_name": self.table_name})

    def close(self) -> None:
        """クライアントのコネクションを解放する"""
        self.client.close()

    def serialize(self, item: dict) -> dict:
        """None の属性は書き込まない"""
        return {
            k: self._serializer.serialize(v) for k, v in item.items() if v is not None
        }

    def deserialize(self, item: dict) -> dict:
        return {k: self._deserializer.deserialize(v) for k, v in item.items()}

    def get(self, key: dict) -> dict | None:
        """主キーで1件取得する"""
        response = self.client.get_item(
            TableName=self.table_name,
            Key=self.serialize(key),
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self.deserialize(item)

    def put(self, item: dict, conflict_message: str) -> None:
        """PK が存在しない場合のみ書き込む"""
        try:
            self.client.put_item(
                TableName=self.table_name,
                Item=self.serialize(item),
                ConditionExpression="attribute_not_exists(PK)",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(conflict_message) from e
            raise

    def put_unique(self, items: list[dict], conflict_message: str) -> None:
        """本体と一意性マーカーを1トランザクションで書き込む

        items[0] が本体、以降が一意性マーカー。
        いずれかのアイテムの PK が既に存在する場合は全体がキャンセルされる。
        """
        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": self.serialize(item),
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    }
                    for item in items
                ]
            )
        except ClientError as e:
            if _is_condition_cancelled(e):
                raise DuplicateResourceException(conflict_message) from e
            raise

    def batch_get(self, keys: list[dict]) -> list[dict]:
        """主キーのリストでまとめて取得する（順序は保証しない）"""
        unique_keys = list({(k["PK"], k["SK"]): k for k in keys}.values())
        items: list[dict] = []

        for start in range(0, len(unique_keys), BATCH_GET_LIMIT):
            chunk = unique_keys[start : start + BATCH_GET_LIMIT]
            request = {
                self.table_name: {
                    "Keys": [self.serialize(k) for k in chunk],
                    "ConsistentRead": True,
                }
            }
            for attempt in range(MAX_UNPROCESSED_RETRIES):
                _backoff(attempt)
                response = self.client.batch_get_item(RequestItems=request)
                items.extend(
                    self.deserialize(item)
                    for item in response.get("Responses", {}).get(self.table_name, [])
                )
                request = response.get("UnprocessedKeys") or {}
                if not request:
                    break
            else:
                raise StoreException("BatchGetItem left unprocessed keys")

        return items

    def query_index(self, partition: str, ascending: bool = True) -> list[dict]:
        """GSI1 のパーティションを全件取得する（GSI1SK 順）"""
        items: list[dict] = []
        kwargs: dict = {
            "TableName": self.table_name,
            "IndexName": GSI1,
            "KeyConditionExpression": "GSI1PK = :pk",
            "ExpressionAttributeValues": {":pk": {"S": partition}},
            "ScanIndexForward": ascending,
        }

        while True:
            response = self.client.query(**kwargs)
            items.extend(self.deserialize(item) for item in response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    def batch_delete(self, keys: list[dict]) -> None:
        """主キーのリストでまとめて削除する"""
        for start in range(0, len(keys), BATCH_WRITE_LIMIT):
            chunk = keys[start : start + BATCH_WRITE_LIMIT]
            request = {
                self.table_name: [
                    {"DeleteRequest": {"Key": self.serialize(k)}} for k in chunk
                ]
            }
            for attempt in range(MAX_UNPROCESSED_RETRIES):
                _backoff(attempt)
                response = self.client.batch_write_item(RequestItems=request)
                request = response.get("UnprocessedItems") or {}
                if not request:
                    break
            else:
                raise StoreException("BatchWriteItem left unprocessed items")


def _backoff(attempt: int) -> None:
    """再送前に待機する（初回は待たない）"""
    if attempt:
        time.sleep(RETRY_BASE_DELAY * 2 ** (attempt - 1))


def _is_condition_cancelled(error: ClientError) -> bool:
    """一意性の競合によるトランザクションキャンセルかどうか

    条件チェック失敗に加え、一意性マーカー（先頭以外のアイテム）での
    TransactionConflict も同じキーへの同時書き込みとして扱う。
    """
    if error.response["Error"]["Code"] != "TransactionCanceledException":
        return False
    reasons = error.response.get("CancellationReasons") or []
    codes = [reason.get("Code") for reason in reasons]
    if "ConditionalCheckFailed" in codes:
        return True
    if "TransactionConflict" in codes[1:]:
        return True
    return "ConditionalCheckFailed" in error.response["Error"].get("Message", "")
