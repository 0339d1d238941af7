import pytest

from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.service import StatusTransitionPolicy
from services.shared.domain.exception import BusinessRuleViolationException


class TestStatusTransitionPolicy:
    """StatusTransitionPolicy のテスト"""

    def test_permissive_allows_any_move(self):
        policy = StatusTransitionPolicy.permissive()
        policy.check_booking(BookingStatus.CANCELLED, BookingStatus.CONFIRMED)
        policy.check_payment(PaymentStatus.REFUNDED, PaymentStatus.PAID)

    def test_strict_allows_listed_moves(self):
        policy = StatusTransitionPolicy.strict_table()
        policy.check_booking(BookingStatus.PENDING, BookingStatus.CONFIRMED)
        policy.check_booking(BookingStatus.CONFIRMED, BookingStatus.COMPLETED)
        policy.check_payment(PaymentStatus.PENDING, PaymentStatus.PAID)
        policy.check_payment(PaymentStatus.PAID, PaymentStatus.REFUNDED)

    @pytest.mark.parametrize(
        "current, new",
        [
            (BookingStatus.CANCELLED, BookingStatus.CONFIRMED),
            (BookingStatus.COMPLETED, BookingStatus.PENDING),
            (BookingStatus.PENDING, BookingStatus.COMPLETED),
        ],
    )
    def test_strict_rejects_booking_moves(self, current, new):
        with pytest.raises(BusinessRuleViolationException):
            StatusTransitionPolicy.strict_table().check_booking(current, new)

    def test_strict_rejects_leaving_refunded(self):
        with pytest.raises(BusinessRuleViolationException):
            StatusTransitionPolicy.strict_table().check_payment(
                PaymentStatus.REFUNDED, PaymentStatus.PAID
            )
