from enum import Enum
from typing import TypeVar

from aws_lambda_powertools import Logger

from services.booking.applications.booking_event_publisher import (
    BookingEventPublisher,
)
from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import StatusTransitionPolicy
from services.booking.domain.value_object import BookingId
from services.shared.domain.exception import (
    ResourceNotFoundException,
    ValidationFailedException,
    Violation,
)
from services.shared.utils.clock import Clock, utc_now

logger = Logger(child=True)

E = TypeVar("E", bound=Enum)


class UpdateBookingStatusService:
    """予約・決済ステータス更新ユースケース

    指定されたフィールドのみを変更する。値は列挙値であることを検証し、
    遷移の可否は StatusTransitionPolicy に委ねる（既定は制限なし）。
    """

    def __init__(
        self,
        repository: BookingRepository,
        publisher: BookingEventPublisher,
        policy: StatusTransitionPolicy | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._publisher = publisher
        self._policy = policy or StatusTransitionPolicy.permissive()
        self._clock = clock

    def update(
        self,
        booking_id: str,
        booking_status: BookingStatus | str | None = None,
        payment_status: PaymentStatus | str | None = None,
    ) -> Booking:
        """ステータスを更新し、更新後の予約を返す"""
        violations: list[Violation] = []
        new_booking_status = _parse(
            BookingStatus, booking_status, "booking_status", violations
        )
        new_payment_status = _parse(
            PaymentStatus, payment_status, "payment_status", violations
        )
        if violations:
            raise ValidationFailedException(violations)

        try:
            key = BookingId(value=booking_id)
        except ValueError as e:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}") from e
        booking = self._repository.find_by_id(key)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        if new_booking_status is None and new_payment_status is None:
            return booking

        expected_booking_status = booking.booking_status
        expected_payment_status = booking.payment_status
        booking.update_status(
            self._clock(),
            booking_status=new_booking_status,
            payment_status=new_payment_status,
            policy=self._policy,
        )
        self._repository.update_status(
            booking,
            expected_booking_status=expected_booking_status,
            expected_payment_status=expected_payment_status,
        )
        logger.info(
            "Booking status updated",
            extra={
                "booking_id": booking_id,
                "booking_status": booking.booking_status.value,
                "payment_status": booking.payment_status.value,
            },
        )
        self._publisher.publish(booking)
        return booking


def _parse(
    enum_type: type[E], value: E | str | None, field: str, violations: list[Violation]
) -> E | None:
    """列挙値に変換する（不正な値は違反として記録）"""
    if value is None:
        return None
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_type)
        violations.append(
            Violation(field=field, message=f"{value!s} is not one of: {allowed}")
        )
        return None
