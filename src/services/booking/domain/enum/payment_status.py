from enum import Enum


class PaymentStatus(str, Enum):
    """決済ステータス（決済は擬似的に扱い、外部ゲートウェイ連携はしない）"""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"
