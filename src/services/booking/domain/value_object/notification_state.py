from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar

from services.notification.domain import NotificationKind


@dataclass(frozen=True)
class NotificationState:
    """通知の送信済みフラグ（冪等な送信管理に使う）"""

    confirmation_sent: bool = False
    team_notification_sent: bool = False
    cancellation_sent: bool = False
    reminder_sent: bool = False

    FIELDS: ClassVar[dict[NotificationKind, str]] = {
        NotificationKind.CONFIRMATION: "confirmation_sent",
        NotificationKind.TEAM_ALERT: "team_notification_sent",
        NotificationKind.CANCELLATION: "cancellation_sent",
        NotificationKind.REMINDER: "reminder_sent",
    }

    @classmethod
    def field_for(cls, kind: NotificationKind) -> str:
        return cls.FIELDS[kind]

    def is_sent(self, kind: NotificationKind) -> bool:
        return getattr(self, self.field_for(kind))

    def mark_sent(self, kind: NotificationKind) -> NotificationState:
        return replace(self, **{self.field_for(kind): True})

    def to_dict(self) -> dict[str, bool]:
        return {name: getattr(self, name) for name in self.FIELDS.values()}
