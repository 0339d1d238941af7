from datetime import datetime
from typing import ClassVar

from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.notification.domain import (
    NotificationKind,
    NotificationTrigger,
    Notifier,
)
from services.shared.config import AppConfig
from services.shared.domain.exception import (
    NotificationFailureException,
    PersistenceFailureException,
)
from services.shared.utils.clock import Clock, utc_now

logger = Logger(child=True)


class DispatchNotificationsService:
    """通知送信と送信済みフラグの管理

    - フラグが未送信の通知のみ送信する（冪等）
    - 成功したらそのフラグだけを更新する（予約全体は再保存しない）
    - 失敗はログに残してフラグを未送信のままにする（再試行はしない）
    - 1件の失敗は他の通知を妨げない
    """

    KINDS_BY_TRIGGER: ClassVar[dict[NotificationTrigger, tuple[NotificationKind, ...]]] = {
        NotificationTrigger.BOOKING_CREATED: (
            NotificationKind.CONFIRMATION,
            NotificationKind.TEAM_ALERT,
        ),
        NotificationTrigger.BOOKING_CANCELLED: (NotificationKind.CANCELLATION,),
    }

    def __init__(
        self,
        repository: BookingRepository,
        notifier: Notifier,
        config: AppConfig,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._notifier = notifier
        self._config = config
        self._clock = clock

    def dispatch(
        self, booking_id: str, trigger: NotificationTrigger
    ) -> dict[NotificationKind, bool]:
        """予約イベントに対応する通知を送信し、種類ごとの結果を返す"""
        booking = self._repository.find_by_id(BookingId(value=booking_id))
        if booking is None:
            logger.warning(
                "Booking not found for notification",
                extra={"booking_id": booking_id, "trigger": trigger.value},
            )
            return {}

        return {
            kind: self.deliver(booking, kind)
            for kind in self.KINDS_BY_TRIGGER[trigger]
        }

    def deliver(
        self, booking: Booking, kind: NotificationKind, now: datetime | None = None
    ) -> bool:
        """1種類の通知を送信する（送信済みなら何もしない）"""
        log_context = {
            "booking_id": str(booking.id),
            "reference": str(booking.reference),
            "kind": kind.value,
        }
        if booking.is_notification_sent(kind):
            logger.debug("Notification already sent", extra=log_context)
            return True

        payload = booking.to_notification_payload(
            self._config.timezone, now or self._clock()
        )
        try:
            result = self._notifier.send(kind, payload)
        except NotificationFailureException as e:
            logger.warning(
                "Notification failed",
                extra={**log_context, "error": str(e.__cause__ or e)},
            )
            return False
        except Exception:
            logger.exception("Notifier raised an error", extra=log_context)
            return False

        if not result.success:
            logger.warning(
                "Notification failed", extra={**log_context, "error": result.error}
            )
            return False

        booking.mark_notification_sent(kind)
        try:
            self._repository.mark_notification_sent(booking.id, kind)
        except PersistenceFailureException:
            logger.exception("Failed to record notification state", extra=log_context)
            return False

        logger.info(
            "Notification sent",
            extra={**log_context, "message_id": result.message_id},
        )
        return True
