from aws_lambda_powertools import Logger

from services.booking.applications.dispatch_notifications import (
    DispatchNotificationsService,
)
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.notification.domain import NotificationKind
from services.shared.config import AppConfig
from services.shared.utils.clock import Clock, utc_now

logger = Logger(child=True)


class SendTravelRemindersService:
    """出発前リマインダー送信ユースケース（日次バッチ）

    確定済みの予約のうち、出発日がちょうど reminder_days_ahead 日後のものに送る。
    """

    def __init__(
        self,
        repository: BookingRepository,
        dispatcher: DispatchNotificationsService,
        config: AppConfig,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._dispatcher = dispatcher
        self._config = config
        self._clock = clock

    def send_reminders(self) -> list[str]:
        """リマインダーを送信し、送信できた予約番号を返す"""
        now = self._clock()
        tz = self._config.timezone
        days_ahead = self._config.reminder_days_ahead

        sent: list[str] = []
        for booking in self._repository.find_all():
            if booking.booking_status != BookingStatus.CONFIRMED:
                continue
            if booking.days_until_travel(now, tz) != days_ahead:
                continue
            if booking.is_notification_sent(NotificationKind.REMINDER):
                continue
            if self._dispatcher.deliver(booking, NotificationKind.REMINDER, now):
                sent.append(str(booking.reference))

        logger.info(
            "Travel reminders processed",
            extra={"days_ahead": days_ahead, "sent": len(sent)},
        )
        return sent
