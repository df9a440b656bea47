from dataclasses import dataclass


@dataclass(frozen=True)
class FlightNumber:
    """フライト番号

    前後の空白を除き、大文字に正規化して保持する。書式は航空会社ごとに異なるため検証しない。
    例: AA101, UA202, BA2490A
    """

    value: str

    def __post_init__(self) -> None:
        normalized = str(self.value).strip().upper()
        if not normalized:
            raise ValueError("Flight number is required")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
