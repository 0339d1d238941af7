from unittest.mock import MagicMock

import pytest

from services.booking.applications.booking_event_publisher import (
    BookingEventPublisher,
)
from services.booking.applications.update_booking_status import (
    UpdateBookingStatusService,
)
from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.service import StatusTransitionPolicy
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    OptimisticLockException,
    ResourceNotFoundException,
    ValidationFailedException,
)


class TestUpdateBookingStatusService:
    """UpdateBookingStatusService のテスト"""

    @pytest.fixture
    def scheduler(self):
        return MagicMock()

    @pytest.fixture
    def create_service(self, fake_repository, scheduler, clock):
        def _factory(policy=None, repository=fake_repository):
            return UpdateBookingStatusService(
                repository=repository,
                publisher=BookingEventPublisher(scheduler),
                policy=policy,
                clock=clock,
            )

        return _factory

    def test_update_payment_status_only(
        self, create_service, fake_repository, create_booking, scheduler
    ):
        fake_repository.save(create_booking())

        booking = create_service().update("booking-1", payment_status="paid")

        stored = fake_repository.find_by_id(booking.id)
        assert stored.payment_status == PaymentStatus.PAID
        assert stored.booking_status == BookingStatus.PENDING
        scheduler.schedule.assert_not_called()

    def test_update_both_statuses(self, create_service, fake_repository, create_booking):
        fake_repository.save(create_booking())

        booking = create_service().update(
            "booking-1",
            booking_status=BookingStatus.CONFIRMED,
            payment_status=PaymentStatus.PAID,
        )

        assert booking.booking_status == BookingStatus.CONFIRMED
        assert booking.payment_status == PaymentStatus.PAID

    def test_invalid_values_are_all_reported(self, create_service, fake_repository):
        """不正な列挙値は検索前に両方とも報告される"""
        with pytest.raises(ValidationFailedException) as exc_info:
            create_service().update(
                "booking-1", booking_status="shipped", payment_status="free"
            )

        assert [v.field for v in exc_info.value.violations] == [
            "booking_status",
            "payment_status",
        ]

    @pytest.mark.parametrize("booking_id", ["missing", "", "   "])
    def test_unknown_booking(self, create_service, booking_id):
        with pytest.raises(ResourceNotFoundException):
            create_service().update(booking_id, payment_status="paid")

    def test_empty_update_returns_booking_unchanged(
        self, create_service, fake_repository, create_booking
    ):
        original = create_booking()
        fake_repository.save(original)

        booking = create_service().update("booking-1")

        assert booking.updated_at == original.updated_at

    def test_strict_policy_rejects_illegal_move(
        self, create_service, fake_repository, create_booking
    ):
        fake_repository.save(create_booking(booking_status=BookingStatus.CANCELLED))

        with pytest.raises(BusinessRuleViolationException):
            create_service(policy=StatusTransitionPolicy.strict_table()).update(
                "booking-1", booking_status="confirmed"
            )

        stored = fake_repository.find_by_id(create_booking().id)
        assert stored.booking_status == BookingStatus.CANCELLED

    def test_concurrent_change_is_reported(self, create_service, create_booking):
        repository = MagicMock()
        repository.find_by_id.return_value = create_booking()
        repository.update_status.side_effect = OptimisticLockException("changed")

        with pytest.raises(OptimisticLockException):
            create_service(repository=repository).update(
                "booking-1", payment_status="paid"
            )

        repository.update_status.assert_called_once()
        _, kwargs = repository.update_status.call_args
        assert kwargs["expected_payment_status"] == PaymentStatus.PENDING
