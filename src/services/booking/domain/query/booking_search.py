from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, Iterable

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.shared.domain.exception import ValidationFailedException, Violation


class SortOrder(str, Enum):
    """並び順"""

    ASC = "asc"
    DESC = "desc"


_SORT_KEYS: dict[str, Callable[[Booking], Any]] = {
    "created_at": lambda b: b.created_at.value,
    "updated_at": lambda b: b.updated_at.value,
    "travel_date": lambda b: b.trip.travel_date.value,
    "total_amount": lambda b: b.total_amount.amount,
    "traveler_count": lambda b: int(b.trip.traveler_count),
    "customer_name": lambda b: str(b.customer.name).casefold(),
    "customer_email": lambda b: str(b.customer.email),
    "destination": lambda b: str(b.trip.destination).casefold(),
    "reference": lambda b: str(b.reference),
    "booking_status": lambda b: b.booking_status.value,
    "payment_status": lambda b: b.payment_status.value,
}


@dataclass(frozen=True)
class BookingSearchCriteria:
    """予約検索条件

    text は顧客名・旅行先・予約番号・メールアドレスのいずれかに
    大文字小文字を区別せず部分一致すれば該当とする（OR 条件）。
    """

    text: str | None = None
    payment_status: PaymentStatus | None = None
    booking_status: BookingStatus | None = None
    page: int = 1
    page_size: int = 10
    sort_field: str = "created_at"
    sort_order: SortOrder = SortOrder.DESC

    MAX_PAGE_SIZE: ClassVar[int] = 100
    SORT_FIELDS: ClassVar[frozenset[str]] = frozenset(_SORT_KEYS)

    def __post_init__(self) -> None:
        violations: list[Violation] = []
        if self.page < 1:
            violations.append(Violation("page", "Page must be at least 1"))
        if not 1 <= self.page_size <= self.MAX_PAGE_SIZE:
            violations.append(
                Violation("limit", f"Limit must be between 1 and {self.MAX_PAGE_SIZE}")
            )
        if self.sort_field not in self.SORT_FIELDS:
            violations.append(
                Violation("sort_by", f"Cannot sort by {self.sort_field}")
            )
        if violations:
            raise ValidationFailedException(violations)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.page_size

    def matches(self, booking: Booking) -> bool:
        if self.payment_status is not None and booking.payment_status != self.payment_status:
            return False
        if self.booking_status is not None and booking.booking_status != self.booking_status:
            return False
        if not self.text:
            return True
        needle = self.text.casefold()
        return any(
            needle in str(value).casefold()
            for value in (
                booking.customer.name,
                booking.trip.destination,
                booking.reference,
                booking.customer.email,
            )
        )


@dataclass(frozen=True)
class Pagination:
    """ページ情報（page は 1 始まり）"""

    page: int
    limit: int
    total: int
    pages: int

    @classmethod
    def of(cls, page: int, limit: int, total: int) -> Pagination:
        return cls(page=page, limit=limit, total=total, pages=math.ceil(total / limit))


@dataclass(frozen=True)
class BookingSearchResult:
    items: list[Booking] = field(default_factory=list)
    pagination: Pagination = field(default_factory=lambda: Pagination(1, 10, 0, 0))


def search_bookings(
    bookings: Iterable[Booking], criteria: BookingSearchCriteria
) -> BookingSearchResult:
    """条件に一致する予約を絞り込み、並べ替えてページ単位で返す"""
    matched = [b for b in bookings if criteria.matches(b)]
    matched.sort(
        key=_SORT_KEYS[criteria.sort_field],
        reverse=criteria.sort_order == SortOrder.DESC,
    )
    page_items = matched[criteria.skip : criteria.skip + criteria.page_size]
    return BookingSearchResult(
        items=page_items,
        pagination=Pagination.of(criteria.page, criteria.page_size, len(matched)),
    )
