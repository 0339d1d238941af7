from aws_lambda_powertools import Logger

from services.booking.applications.booking_event_publisher import (
    BookingEventPublisher,
)
from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain.exception import ResourceNotFoundException
from services.shared.utils.clock import Clock, utc_now

logger = Logger(child=True)


class CancelBookingService:
    """予約キャンセルユースケース（物理削除はしない）"""

    def __init__(
        self,
        repository: BookingRepository,
        publisher: BookingEventPublisher,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._publisher = publisher
        self._clock = clock

    def cancel(self, booking_id: str) -> Booking:
        """予約をキャンセルする

        キャンセル不可の場合は CancellationNotAllowedException（状態は変更しない）。
        """
        try:
            key = BookingId(value=booking_id)
        except ValueError as e:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}") from e
        booking = self._repository.find_by_id(key)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        expected_booking_status = booking.booking_status
        expected_payment_status = booking.payment_status
        booking.cancel(self._clock())
        self._repository.update_status(
            booking,
            expected_booking_status=expected_booking_status,
            expected_payment_status=expected_payment_status,
        )
        logger.info(
            "Booking cancelled",
            extra={"booking_id": booking_id, "reference": str(booking.reference)},
        )
        self._publisher.publish(booking)
        return booking
