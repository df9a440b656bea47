from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Repository 基底クラス

    - エンティティの永続化を抽象化する
    - 検索系のメソッドは各コンテキストのリポジトリが必要な分だけ定義する
    - ID の形式チェックは EntityId 生成時に済んでいる前提
    """

    @abstractmethod
    def save(self, entity: T) -> None:
        """エンティティを新規に永続化する"""
        raise NotImplementedError
