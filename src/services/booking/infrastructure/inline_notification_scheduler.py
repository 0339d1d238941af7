from aws_lambda_powertools import Logger

from services.booking.applications.dispatch_notifications import (
    DispatchNotificationsService,
)
from services.notification.domain import NotificationScheduler, NotificationTrigger

logger = Logger(child=True)


class InlineNotificationScheduler(NotificationScheduler):
    """同じ実行単位の中で通知を送信する（通知用 Lambda 未設定時）"""

    def __init__(self, dispatcher: DispatchNotificationsService) -> None:
        self._dispatcher = dispatcher

    def schedule(self, booking_id: str, trigger: NotificationTrigger) -> None:
        try:
            self._dispatcher.dispatch(booking_id, trigger)
        except Exception:
            logger.exception(
                "Inline notification dispatch failed",
                extra={"booking_id": booking_id, "trigger": trigger.value},
            )
