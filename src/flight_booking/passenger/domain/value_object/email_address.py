import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class EmailAddress:
    """メールアドレス

    local@domain.tld の基本形のみを検証し、小文字に正規化して保持する。
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^.+@.+\..+$")

    def __post_init__(self) -> None:
        normalized = str(self.value).strip().lower()
        if not self.PATTERN.match(normalized):
            raise ValueError("Please fill a valid email address")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
