from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    UTC に正規化して保持する。タイムゾーン指定のない入力は UTC とみなす。
    文字列表現はミリ秒固定長（例: 2025-07-10T08:00:00.000Z）のため、
    文字列比較で時系列順に並ぶ。
    """

    value: datetime

    def __post_init__(self) -> None:
        dt = self.value
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        object.__setattr__(self, "value", dt.astimezone(timezone.utc))

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    @classmethod
    def now(cls) -> IsoDateTime:
        """現在時刻"""
        return cls(value=datetime.now(timezone.utc))

    def __str__(self) -> str:
        return self.value.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value
