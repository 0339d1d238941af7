from __future__ import annotations

from datetime import datetime, tzinfo
from typing import ClassVar

from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.event import (
    BookingCancelled,
    BookingCreated,
    BookingStatusChanged,
)
from services.booking.domain.service.status_transition_policy import (
    StatusTransitionPolicy,
)
from services.booking.domain.value_object import (
    BookingId,
    BookingMetadata,
    BookingReference,
    Customer,
    NotificationState,
    SpecialRequests,
    Trip,
)
from services.notification.domain import NotificationKind, NotificationPayload
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import CancellationNotAllowedException


class Booking(AggregateRoot[BookingId]):
    """旅行予約（集約ルート）

    - 予約番号は生成時に一度だけ割り当て、以後変更しない
    - キャンセルは物理削除ではなくステータスの変更
    """

    CANCELLATION_WINDOW_HOURS: ClassVar[int] = 24

    def __init__(
        self,
        id: BookingId,
        reference: BookingReference,
        customer: Customer,
        trip: Trip,
        total_amount: Money,
        created_at: IsoDateTime,
        updated_at: IsoDateTime | None = None,
        special_requests: SpecialRequests | None = None,
        booking_status: BookingStatus = BookingStatus.PENDING,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        notification_state: NotificationState | None = None,
        metadata: BookingMetadata | None = None,
    ) -> None:
        super().__init__(id)

        self._reference = reference
        self._customer = customer
        self._trip = trip
        self._total_amount = total_amount
        self._special_requests = special_requests
        self._booking_status = booking_status
        self._payment_status = payment_status
        self._notification_state = notification_state or NotificationState()
        self._metadata = metadata or BookingMetadata()
        self._created_at = created_at
        self._updated_at = updated_at or created_at

    @property
    def reference(self) -> BookingReference:
        return self._reference

    @property
    def customer(self) -> Customer:
        return self._customer

    @property
    def trip(self) -> Trip:
        return self._trip

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def special_requests(self) -> SpecialRequests | None:
        return self._special_requests

    @property
    def booking_status(self) -> BookingStatus:
        return self._booking_status

    @property
    def payment_status(self) -> PaymentStatus:
        return self._payment_status

    @property
    def notification_state(self) -> NotificationState:
        return self._notification_state

    @property
    def metadata(self) -> BookingMetadata:
        return self._metadata

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def updated_at(self) -> IsoDateTime:
        return self._updated_at

    def record_created(self) -> None:
        """作成イベントを記録する（Factory から呼ばれる）"""
        self.add_domain_event(
            BookingCreated(
                booking_id=str(self.id),
                reference=str(self._reference),
                occurred_at=self._created_at.value,
            )
        )

    def can_be_cancelled(self, now: datetime) -> bool:
        """キャンセル可能か

        出発まで24時間を超えており、キャンセル済み・返金済みでないこと。
        """
        if self._booking_status == BookingStatus.CANCELLED:
            return False
        if self._payment_status in (PaymentStatus.REFUNDED, PaymentStatus.CANCELLED):
            return False
        return self._trip.time_until_departure(now) > self.CANCELLATION_WINDOW_HOURS

    def cancel(self, now: datetime) -> None:
        """予約をキャンセルする

        不可の場合は状態を変更せずに CancellationNotAllowedException を送出する。
        """
        if not self.can_be_cancelled(now):
            raise CancellationNotAllowedException(
                "This booking cannot be cancelled "
                "(travel date too close or already processed)"
            )
        self._booking_status = BookingStatus.CANCELLED
        self._payment_status = PaymentStatus.CANCELLED
        self._updated_at = IsoDateTime(now)
        self.add_domain_event(
            BookingCancelled(
                booking_id=str(self.id),
                reference=str(self._reference),
                occurred_at=now,
            )
        )

    def update_status(
        self,
        now: datetime,
        booking_status: BookingStatus | None = None,
        payment_status: PaymentStatus | None = None,
        policy: StatusTransitionPolicy | None = None,
    ) -> None:
        """指定されたステータスのみを更新する"""
        policy = policy or StatusTransitionPolicy.permissive()
        if booking_status is not None:
            policy.check_booking(self._booking_status, booking_status)
        if payment_status is not None:
            policy.check_payment(self._payment_status, payment_status)

        if booking_status is not None:
            self._booking_status = booking_status
        if payment_status is not None:
            self._payment_status = payment_status
        self._updated_at = IsoDateTime(now)
        self.add_domain_event(
            BookingStatusChanged(
                booking_id=str(self.id),
                booking_status=self._booking_status.value,
                payment_status=self._payment_status.value,
                occurred_at=now,
            )
        )

    def is_notification_sent(self, kind: NotificationKind) -> bool:
        return self._notification_state.is_sent(kind)

    def mark_notification_sent(self, kind: NotificationKind) -> None:
        self._notification_state = self._notification_state.mark_sent(kind)

    def days_until_travel(self, now: datetime, tz: tzinfo) -> int:
        """出発日までの日数（tz のカレンダー日付基準）"""
        today = now.astimezone(tz).date()
        return (self._trip.travel_date.local_date(tz) - today).days

    def to_notification_payload(
        self, tz: tzinfo, now: datetime | None = None
    ) -> NotificationPayload:
        """通知用の予約情報を組み立てる"""
        travel_day = self._trip.travel_date.local_date(tz)
        return NotificationPayload(
            customer_email=str(self._customer.email),
            customer_name=str(self._customer.name),
            destination=str(self._trip.destination),
            travel_date=travel_day.isoformat(),
            formatted_date=(
                f"{travel_day:%A}, {travel_day.day} {travel_day:%B} {travel_day:%Y}"
            ),
            travelers=int(self._trip.traveler_count),
            total_amount=self._total_amount.amount,
            currency=str(self._total_amount.currency),
            booking_reference=str(self._reference),
            contact_number=str(self._customer.phone),
            special_requests=(
                str(self._special_requests) if self._special_requests else None
            ),
            days_until_travel=(
                self.days_until_travel(now, tz) if now is not None else None
            ),
        )
