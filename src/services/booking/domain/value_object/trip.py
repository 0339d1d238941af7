from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from services.shared.domain import IsoDateTime


@dataclass(frozen=True)
class Destination:
    """旅行先（前後の空白を除いて 2 文字以上）"""

    value: str

    MIN_LENGTH: ClassVar[int] = 2

    def __post_init__(self) -> None:
        normalized = self.value.strip()
        if len(normalized) < self.MIN_LENGTH:
            raise ValueError("Destination must be at least 2 characters")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TravelerCount:
    """旅行者数（1〜20 の整数）"""

    value: int

    MIN: ClassVar[int] = 1
    MAX: ClassVar[int] = 20

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Number of travelers must be a whole number")
        if self.value < self.MIN:
            raise ValueError("At least 1 person is required")
        if self.value > self.MAX:
            raise ValueError("Maximum 20 people allowed")

    def __int__(self) -> int:
        return self.value

    @classmethod
    def parse(cls, raw: object) -> TravelerCount:
        """JSON 由来の値（int / 整数値の float / 数字文字列）から生成"""
        if isinstance(raw, bool):
            raise ValueError("Number of travelers must be a whole number")
        if isinstance(raw, float):
            if not raw.is_integer():
                raise ValueError("Number of travelers must be a whole number")
            raw = int(raw)
        elif isinstance(raw, str):
            try:
                raw = int(raw.strip())
            except ValueError as e:
                raise ValueError("Number of travelers must be a whole number") from e
        return cls(raw)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Trip:
    """旅行内容"""

    destination: Destination
    travel_date: IsoDateTime
    traveler_count: TravelerCount

    def time_until_departure(self, now: datetime) -> float:
        """出発までの残り時間（時間単位、過去なら負）"""
        return self.travel_date.until(now).total_seconds() / 3600
