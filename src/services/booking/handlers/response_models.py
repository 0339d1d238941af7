from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from services.booking.domain.entity import Booking
from services.booking.domain.query import BookingSearchResult, BookingStats
from services.booking.domain.service import ValidatedBooking


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class NotificationStateData(CamelModel):
    confirmation_sent: bool
    team_notification_sent: bool
    cancellation_sent: bool
    reminder_sent: bool


class BookingData(CamelModel):
    """予約データのレスポンスモデル"""

    id: str
    reference: str
    customer_name: str
    customer_email: str
    phone: str
    destination: str
    travel_date: str
    traveler_count: int
    total_amount: str
    currency: str
    special_requests: str | None = None
    booking_status: str
    payment_status: str
    notification_state: NotificationStateData
    source: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, booking: Booking) -> BookingData:
        return cls(
            id=str(booking.id),
            reference=str(booking.reference),
            customer_name=str(booking.customer.name),
            customer_email=str(booking.customer.email),
            phone=str(booking.customer.phone),
            destination=str(booking.trip.destination),
            travel_date=str(booking.trip.travel_date),
            traveler_count=int(booking.trip.traveler_count),
            total_amount=str(booking.total_amount.amount),
            currency=str(booking.total_amount.currency),
            special_requests=(
                str(booking.special_requests) if booking.special_requests else None
            ),
            booking_status=booking.booking_status.value,
            payment_status=booking.payment_status.value,
            notification_state=NotificationStateData(
                **booking.notification_state.to_dict()
            ),
            source=booking.metadata.source,
            created_at=str(booking.created_at),
            updated_at=str(booking.updated_at),
        )


class CreatedBookingResponse(CamelModel):
    """予約作成レスポンス"""

    reference: str
    payment_url: str
    booking: BookingData


class PaginationData(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class BookingListResponse(CamelModel):
    """予約一覧レスポンス"""

    items: list[BookingData]
    pagination: PaginationData

    @classmethod
    def from_result(cls, result: BookingSearchResult) -> BookingListResponse:
        p = result.pagination
        return cls(
            items=[BookingData.from_entity(b) for b in result.items],
            pagination=PaginationData(
                page=p.page, limit=p.limit, total=p.total, pages=p.pages
            ),
        )


class ValidatedBookingData(CamelModel):
    """検証のみ（永続化なし）の結果"""

    valid: bool = True
    customer_name: str
    customer_email: str
    phone: str
    destination: str
    travel_date: str
    traveler_count: int
    total_amount: str
    currency: str
    special_requests: str | None = None

    @classmethod
    def from_validated(cls, validated: ValidatedBooking) -> ValidatedBookingData:
        return cls(
            customer_name=str(validated.customer.name),
            customer_email=str(validated.customer.email),
            phone=str(validated.customer.phone),
            destination=str(validated.trip.destination),
            travel_date=str(validated.trip.travel_date),
            traveler_count=int(validated.trip.traveler_count),
            total_amount=str(validated.total_amount.amount),
            currency=str(validated.total_amount.currency),
            special_requests=(
                str(validated.special_requests) if validated.special_requests else None
            ),
        )


class StatusBreakdownData(CamelModel):
    booking_status: str
    payment_status: str


class BookingStatsData(CamelModel):
    """予約集計レスポンス"""

    total_bookings: int
    total_revenue: str
    avg_booking_value: str
    total_travelers: int
    status_breakdown: list[StatusBreakdownData]

    @classmethod
    def from_stats(cls, stats: BookingStats) -> BookingStatsData:
        return cls(
            total_bookings=stats.total_bookings,
            total_revenue=str(stats.total_revenue),
            avg_booking_value=str(stats.avg_booking_value),
            total_travelers=stats.total_travelers,
            status_breakdown=[
                StatusBreakdownData(**row) for row in stats.status_breakdown
            ],
        )
