from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from services.booking.domain.entity import Booking


@dataclass(frozen=True)
class BookingStats:
    """予約の集計"""

    total_bookings: int = 0
    total_revenue: Decimal = Decimal("0")
    avg_booking_value: Decimal = Decimal("0")
    total_travelers: int = 0
    status_breakdown: list[dict[str, str]] = field(default_factory=list)


def compute_booking_stats(
    bookings: Iterable[Booking],
    start: datetime | None = None,
    end: datetime | None = None,
) -> BookingStats:
    """作成日時が [start, end] の予約を集計する（未指定の端は制限なし）"""
    selected = [
        b
        for b in bookings
        if (start is None or b.created_at.value >= start)
        and (end is None or b.created_at.value <= end)
    ]
    if not selected:
        return BookingStats()

    revenue = sum((b.total_amount.amount for b in selected), Decimal("0"))
    return BookingStats(
        total_bookings=len(selected),
        total_revenue=revenue,
        avg_booking_value=(revenue / len(selected)).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        ),
        total_travelers=sum(int(b.trip.traveler_count) for b in selected),
        status_breakdown=[
            {
                "booking_status": b.booking_status.value,
                "payment_status": b.payment_status.value,
            }
            for b in selected
        ],
    )
