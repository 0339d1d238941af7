import copy
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import BookingSubmission
from services.booking.domain.value_object import (
    BookingId,
    BookingReference,
    Customer,
    CustomerName,
    Destination,
    EmailAddress,
    NotificationState,
    PhoneNumber,
    SpecialRequests,
    TravelerCount,
    Trip,
)
from services.notification.domain import NotificationKind
from services.shared.domain import IsoDateTime, Money
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)


class FakeBookingRepository(BookingRepository):
    """インメモリの BookingRepository（保存時・取得時にコピーする）"""

    def __init__(self, taken_references: set[str] | None = None) -> None:
        self.bookings: dict[str, Booking] = {}
        self.taken_references: set[str] = set(taken_references or ())
        self.save_attempts = 0
        self.flag_updates: list[tuple[str, NotificationKind]] = []

    def save(self, booking: Booking) -> None:
        self.save_attempts += 1
        reference = str(booking.reference)
        if reference in self.taken_references or str(booking.id) in self.bookings:
            raise DuplicateResourceException(f"duplicate: {reference}")
        self.taken_references.add(reference)
        self.bookings[str(booking.id)] = copy.deepcopy(booking)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        booking = self.bookings.get(str(booking_id))
        return copy.deepcopy(booking) if booking else None

    def find_by_reference(self, reference: BookingReference) -> Booking | None:
        for booking in self.bookings.values():
            if booking.reference == reference:
                return copy.deepcopy(booking)
        return None

    def find_all(self) -> list[Booking]:
        return sorted(
            (copy.deepcopy(b) for b in self.bookings.values()),
            key=lambda b: b.created_at.value,
            reverse=True,
        )

    def update_status(
        self,
        booking: Booking,
        expected_booking_status: BookingStatus | None = None,
        expected_payment_status: PaymentStatus | None = None,
    ) -> None:
        stored = self.bookings[str(booking.id)]
        if (
            expected_booking_status is not None
            and stored.booking_status != expected_booking_status
        ) or (
            expected_payment_status is not None
            and stored.payment_status != expected_payment_status
        ):
            raise OptimisticLockException("status changed")
        self.bookings[str(booking.id)] = copy.deepcopy(booking)

    def mark_notification_sent(
        self, booking_id: BookingId, kind: NotificationKind
    ) -> None:
        self.flag_updates.append((str(booking_id), kind))
        self.bookings[str(booking_id)].mark_notification_sent(kind)


@pytest.fixture
def fake_repository():
    return FakeBookingRepository()


@pytest.fixture
def submission():
    """予約申込データを生成する Factory fixture"""

    def _factory(**overrides) -> BookingSubmission:
        data: BookingSubmission = {
            "customer_name": "Asha Verma",
            "customer_email": "Asha.Verma@Example.com",
            "phone": "98765-43210",
            "destination": "Agra",
            "travel_date": "2026-11-20",
            "traveler_count": 2,
            "total_amount": 24000,
            "special_requests": None,
        }
        data.update(overrides)  # type: ignore[typeddict-item]
        return data

    return _factory


@pytest.fixture
def create_booking(now):
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "booking-1",
        reference: str = "WW-20261019-4821",
        travel_date: datetime | None = None,
        booking_status: BookingStatus = BookingStatus.PENDING,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        destination: str = "Agra",
        traveler_count: int = 2,
        total_amount: Decimal = Decimal("24000"),
        customer_name: str = "Asha Verma",
        customer_email: str = "asha.verma@example.com",
        special_requests: str | None = None,
        created_at: datetime | None = None,
        notification_state: NotificationState | None = None,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            reference=BookingReference(value=reference),
            customer=Customer(
                name=CustomerName(customer_name),
                email=EmailAddress(customer_email),
                phone=PhoneNumber("98765-43210"),
            ),
            trip=Trip(
                destination=Destination(destination),
                travel_date=IsoDateTime(travel_date or now + timedelta(days=30)),
                traveler_count=TravelerCount(traveler_count),
            ),
            total_amount=Money.inr(total_amount),
            special_requests=(
                SpecialRequests(special_requests) if special_requests else None
            ),
            booking_status=booking_status,
            payment_status=payment_status,
            notification_state=notification_state,
            created_at=IsoDateTime(created_at or now),
        )

    return _factory
