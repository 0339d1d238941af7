from datetime import datetime

from services.booking.domain.query import (
    BookingSearchCriteria,
    BookingSearchResult,
    BookingStats,
    compute_booking_stats,
    search_bookings,
)
from services.booking.domain.repository import BookingRepository


class SearchBookingsService:
    """予約検索・集計ユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def search(self, criteria: BookingSearchCriteria) -> BookingSearchResult:
        """条件に一致する予約をページ単位で返す"""
        return search_bookings(self._repository.find_all(), criteria)

    def stats(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> BookingStats:
        """作成日時で絞り込んだ予約の集計"""
        return compute_booking_stats(self._repository.find_all(), start, end)
