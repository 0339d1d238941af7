from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class SpecialRequests:
    """要望事項（任意、500 文字以内）"""

    value: str

    MAX_LENGTH: ClassVar[int] = 500

    def __post_init__(self) -> None:
        normalized = self.value.strip()
        if len(normalized) > self.MAX_LENGTH:
            raise ValueError("Special requests cannot exceed 500 characters")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
