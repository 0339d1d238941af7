from __future__ import annotations

from typing import ClassVar

from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.shared.domain.exception import BusinessRuleViolationException


class StatusTransitionPolicy:
    """ステータス遷移ポリシー

    既定（permissive）は列挙値であればどの状態からどの状態へも遷移できる。
    strict を有効にすると遷移表にない変更を拒否する。
    """

    BOOKING_TRANSITIONS: ClassVar[dict[BookingStatus, frozenset[BookingStatus]]] = {
        BookingStatus.PENDING: frozenset(
            {BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.CANCELLED}
        ),
        BookingStatus.CONFIRMED: frozenset(
            {BookingStatus.CONFIRMED, BookingStatus.COMPLETED, BookingStatus.CANCELLED}
        ),
        BookingStatus.CANCELLED: frozenset({BookingStatus.CANCELLED}),
        BookingStatus.COMPLETED: frozenset({BookingStatus.COMPLETED}),
    }

    PAYMENT_TRANSITIONS: ClassVar[dict[PaymentStatus, frozenset[PaymentStatus]]] = {
        PaymentStatus.PENDING: frozenset(
            {
                PaymentStatus.PENDING,
                PaymentStatus.PAID,
                PaymentStatus.FAILED,
                PaymentStatus.CANCELLED,
            }
        ),
        PaymentStatus.FAILED: frozenset(
            {
                PaymentStatus.FAILED,
                PaymentStatus.PENDING,
                PaymentStatus.PAID,
                PaymentStatus.CANCELLED,
            }
        ),
        PaymentStatus.PAID: frozenset({PaymentStatus.PAID, PaymentStatus.REFUNDED}),
        PaymentStatus.CANCELLED: frozenset(
            {PaymentStatus.CANCELLED, PaymentStatus.REFUNDED}
        ),
        PaymentStatus.REFUNDED: frozenset({PaymentStatus.REFUNDED}),
    }

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    @classmethod
    def permissive(cls) -> StatusTransitionPolicy:
        return cls(strict=False)

    @classmethod
    def strict_table(cls) -> StatusTransitionPolicy:
        return cls(strict=True)

    def check_booking(self, current: BookingStatus, new: BookingStatus) -> None:
        """予約ステータスの遷移可否を検証する"""
        if self._strict and new not in self.BOOKING_TRANSITIONS[current]:
            raise BusinessRuleViolationException(
                f"Booking status cannot change from {current.value} to {new.value}"
            )

    def check_payment(self, current: PaymentStatus, new: PaymentStatus) -> None:
        """決済ステータスの遷移可否を検証する"""
        if self._strict and new not in self.PAYMENT_TRANSITIONS[current]:
            raise BusinessRuleViolationException(
                f"Payment status cannot change from {current.value} to {new.value}"
            )
