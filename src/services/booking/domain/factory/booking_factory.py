from datetime import datetime

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.service.booking_validator import ValidatedBooking
from services.booking.domain.value_object import (
    BookingId,
    BookingMetadata,
    BookingReference,
    NotificationState,
)
from services.shared.domain import IsoDateTime, Money


class BookingFactory:
    """予約エンティティのファクトリ

    - 検証済みの予約内容から初期状態（pending / pending）の予約を生成する
    - 通知フラグはすべて未送信
    """

    def create(
        self,
        booking_id: BookingId,
        validated: ValidatedBooking,
        reference: BookingReference,
        total_amount: Money,
        now: datetime,
        metadata: BookingMetadata | None = None,
    ) -> Booking:
        """新規予約エンティティを生成する

        Args:
            booking_id: 予約ID（再試行の間も同じIDを使う）
            validated: 検証済みの予約内容
            reference: 予約番号の候補
            total_amount: 確定金額
            now: 作成日時
            metadata: 受付情報

        Returns:
            Booking: 生成された予約エンティティ（作成イベント記録済み）
        """
        created_at = IsoDateTime(now)
        booking = Booking(
            id=booking_id,
            reference=reference,
            customer=validated.customer,
            trip=validated.trip,
            total_amount=total_amount,
            special_requests=validated.special_requests,
            booking_status=BookingStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
            notification_state=NotificationState(),
            metadata=metadata or BookingMetadata(),
            created_at=created_at,
            updated_at=created_at,
        )
        booking.record_created()
        return booking
