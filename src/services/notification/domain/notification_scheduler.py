from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class NotificationTrigger(str, Enum):
    """通知を発生させた予約イベント"""

    BOOKING_CREATED = "booking_created"
    BOOKING_CANCELLED = "booking_cancelled"


class NotificationScheduler(ABC):
    """通知処理の非同期起動

    呼び出し元（予約作成・キャンセル）は永続化の完了で応答し、
    通知は別の実行単位で行う（fire-and-forget）。
    """

    @abstractmethod
    def schedule(self, booking_id: str, trigger: NotificationTrigger) -> None:
        """通知処理を起動する。失敗しても例外は送出しない"""
        raise NotImplementedError
