from abc import ABC, abstractmethod
from typing import Optional

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.value_object import BookingId, BookingReference
from services.notification.domain import NotificationKind


class BookingRepository(ABC):
    """予約レポジトリ

    1予約 = 1アイテム。条件付き書き込みの失敗はドメイン例外として送出する。
    """

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規予約を永続化する

        予約番号が既に使われている場合は DuplicateResourceException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_reference(self, reference: BookingReference) -> Optional[Booking]:
        """予約番号で検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Booking]:
        """全予約を取得する（作成日時の新しい順）"""
        raise NotImplementedError

    @abstractmethod
    def update_status(
        self,
        booking: Booking,
        expected_booking_status: BookingStatus | None = None,
        expected_payment_status: PaymentStatus | None = None,
    ) -> None:
        """予約・決済ステータスを更新する

        期待値を指定した場合、現在値と異なれば OptimisticLockException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def mark_notification_sent(
        self, booking_id: BookingId, kind: NotificationKind
    ) -> None:
        """通知フラグのみを更新する（予約全体は再保存しない）"""
        raise NotImplementedError
