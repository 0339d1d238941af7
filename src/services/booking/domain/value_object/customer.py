import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class CustomerName:
    """顧客名（前後の空白を除いて 2〜50 文字）"""

    value: str

    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 50

    def __post_init__(self) -> None:
        normalized = self.value.strip()
        if len(normalized) < self.MIN_LENGTH:
            raise ValueError("Customer name must be at least 2 characters")
        if len(normalized) > self.MAX_LENGTH:
            raise ValueError("Customer name cannot exceed 50 characters")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EmailAddress:
    """メールアドレス（local@domain.tld、小文字に正規化）"""

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower()
        if not self.PATTERN.match(normalized):
            raise ValueError("Please provide a valid email address")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PhoneNumber:
    """連絡先電話番号

    空白・ハイフン・括弧を除いた数字が 10〜16 桁。
    入力された表記（前後の空白を除く）をそのまま保持する。
    """

    value: str

    SEPARATORS: ClassVar[re.Pattern[str]] = re.compile(r"[\s\-()]")
    DIGITS: ClassVar[re.Pattern[str]] = re.compile(r"^\d{10,16}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip()
        if not self.DIGITS.match(self.SEPARATORS.sub("", normalized)):
            raise ValueError("Contact number must be 10-16 digits")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @property
    def digits(self) -> str:
        return self.SEPARATORS.sub("", self.value)


@dataclass(frozen=True)
class Customer:
    """予約者情報"""

    name: CustomerName
    email: EmailAddress
    phone: PhoneNumber
