from dataclasses import dataclass

from services.shared.domain import DomainEvent


@dataclass(frozen=True)
class BookingCreated(DomainEvent):
    """予約が作成された（確認メールとチームへの通知の起点）"""

    booking_id: str
    reference: str


@dataclass(frozen=True)
class BookingStatusChanged(DomainEvent):
    booking_id: str
    booking_status: str
    payment_status: str


@dataclass(frozen=True)
class BookingCancelled(DomainEvent):
    """予約がキャンセルされた（キャンセル通知の起点）"""

    booking_id: str
    reference: str
