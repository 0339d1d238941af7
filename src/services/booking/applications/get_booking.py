from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, BookingReference
from services.shared.domain.exception import ResourceNotFoundException


class GetBookingService:
    """予約取得ユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def get(self, booking_id: str) -> Booking:
        """予約IDで取得する"""
        try:
            key = BookingId(value=booking_id)
        except ValueError as e:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}") from e
        booking = self._repository.find_by_id(key)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        return booking

    def get_by_reference(self, reference: str) -> Booking:
        """予約番号で取得する（大文字に正規化して完全一致）"""
        try:
            key = BookingReference(value=reference)
        except ValueError as e:
            raise ResourceNotFoundException(f"Booking not found: {reference}") from e
        booking = self._repository.find_by_reference(key)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {reference}")
        return booking
