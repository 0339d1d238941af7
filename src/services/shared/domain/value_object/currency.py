from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    カタログ価格は INR。未知の目的地では送信された金額をそのまま使うため USD も許可する。
    """

    # 通貨コード -> 小数点以下の桁数
    MINOR_UNITS: ClassVar[dict[str, int]] = {"INR": 2, "USD": 2}

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.strip().upper()
        if normalized not in self.MINOR_UNITS:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.MINOR_UNITS))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    def format(self, amount: Decimal) -> str:
        """表示用の金額（例: INR 24,000.00）"""
        return f"{self.code} {amount:,.{self.MINOR_UNITS[self.code]}f}"

    @classmethod
    def inr(cls) -> Currency:
        return cls("INR")

    @classmethod
    def usd(cls) -> Currency:
        return cls("USD")
