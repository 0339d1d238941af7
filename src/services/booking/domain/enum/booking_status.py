from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス"""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"
