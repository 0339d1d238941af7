from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.event import BookingCancelled, BookingCreated
from services.notification.domain import NotificationScheduler, NotificationTrigger

logger = Logger(child=True)


class BookingEventPublisher:
    """永続化後にドメインイベントを取り出し、通知処理を起動する

    永続化が成功した後にのみ呼び出すこと。
    """

    def __init__(self, scheduler: NotificationScheduler) -> None:
        self._scheduler = scheduler

    def publish(self, booking: Booking) -> None:
        for event in booking.flush_domain_events():
            if isinstance(event, BookingCreated):
                self._scheduler.schedule(
                    event.booking_id, NotificationTrigger.BOOKING_CREATED
                )
            elif isinstance(event, BookingCancelled):
                self._scheduler.schedule(
                    event.booking_id, NotificationTrigger.BOOKING_CANCELLED
                )
            else:
                logger.debug(
                    "No notification for event",
                    extra={"event": event.name, "booking_id": str(booking.id)},
                )
