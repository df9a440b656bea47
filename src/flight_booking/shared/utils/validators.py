from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") や Value Object から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    bool は数値として扱わない。
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise TypeError("Boolean is not a number")
    return Decimal(str(v))
