from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class BookingId:
    """予約ID（内部識別子、予約番号とは別物）

    例: "3f2b9c0e8a4d4d6f9a1b2c3d4e5f6a7b"
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> BookingId:
        """新しい BookingId を採番する"""
        return cls(value=uuid.uuid4().hex)
