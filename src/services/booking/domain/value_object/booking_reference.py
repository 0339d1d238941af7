import re
from dataclasses import dataclass
from datetime import date
from typing import ClassVar


@dataclass(frozen=True)
class BookingReference:
    """予約番号

    "WW-" + 日付（YYYYMMDD）+ "-" + 4桁の数字（1000-9999）。
    例: WW-20261019-4821
    """

    value: str

    PREFIX: ClassVar[str] = "WW"
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^WW-(\d{8})-([1-9]\d{3})$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid booking reference format: {self.value}. "
                "Expected format: WW-YYYYMMDD-NNNN"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @property
    def issued_on(self) -> date:
        """採番日"""
        digits = self.value.split("-")[1]
        return date(int(digits[:4]), int(digits[4:6]), int(digits[6:]))

    @property
    def suffix(self) -> int:
        """末尾の乱数部"""
        return int(self.value.rsplit("-", 1)[1])
