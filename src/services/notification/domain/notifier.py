from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from .notification_kind import NotificationKind


@dataclass(frozen=True)
class NotificationPayload:
    """通知に渡す予約情報

    テンプレートのレンダリングは Notifier 実装側の責務。
    """

    customer_email: str
    customer_name: str
    destination: str
    travel_date: str
    formatted_date: str
    travelers: int
    total_amount: Decimal
    currency: str
    booking_reference: str
    contact_number: str
    special_requests: str | None = None
    days_until_travel: int | None = None


@dataclass(frozen=True)
class NotificationResult:
    """送信結果"""

    success: bool
    message_id: str | None = None
    error: str | None = None

    @classmethod
    def sent(cls, message_id: str | None = None) -> NotificationResult:
        return cls(success=True, message_id=message_id)

    @classmethod
    def failed(cls, error: str) -> NotificationResult:
        return cls(success=False, error=error)


class Notifier(ABC):
    """通知送信の抽象（メール送信等の具体的な手段は外部）

    タイムアウトは実装側（送信クライアント）が管理する。
    """

    @abstractmethod
    def send(
        self, kind: NotificationKind, payload: NotificationPayload
    ) -> NotificationResult:
        """通知を送信し、結果を返す"""
        raise NotImplementedError
