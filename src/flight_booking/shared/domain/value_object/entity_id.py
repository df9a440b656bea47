from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class EntityId:
    """システムが採番するエンティティID

    正規形の UUID 文字列（小文字、8-4-4-4-12）。
    例: "3f2b8c1e-9d4a-4e6b-8f0a-1c2d3e4f5a6b"
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$"
    )

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError(f"Invalid identifier: {self.value!r}")
        normalized = self.value.strip().lower()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid identifier: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> EntityId:
        """新しいIDを採番する"""
        return cls(value=str(uuid.uuid4()))

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """ID として解釈できる文字列かどうか"""
        return isinstance(value, str) and bool(cls.PATTERN.match(value.strip().lower()))
