from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from flight_booking.shared.utils.validators import to_decimal


@dataclass(frozen=True)
class Price:
    """運賃（0 以上の数値）"""

    amount: Decimal

    def __post_init__(self) -> None:
        try:
            amount = to_decimal(self.amount)
        except (InvalidOperation, TypeError) as e:
            raise ValueError(f"Price must be numeric: {self.amount}") from e
        if not amount.is_finite():
            raise ValueError(f"Price must be numeric: {self.amount}")
        if amount < 0:
            raise ValueError("Price cannot be negative")
        object.__setattr__(self, "amount", amount)

    def __str__(self) -> str:
        return str(self.amount)

    def __float__(self) -> float:
        return float(self.amount)
