from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from services.booking.applications.dispatch_notifications import (
    DispatchNotificationsService,
)
from services.booking.applications.send_travel_reminders import (
    SendTravelRemindersService,
)
from services.booking.domain.enum import BookingStatus
from services.notification.domain import NotificationKind, NotificationResult


class TestSendTravelRemindersService:
    """SendTravelRemindersService のテスト"""

    @pytest.fixture
    def notifier(self):
        notifier = MagicMock()
        notifier.send.return_value = NotificationResult.sent("msg-1")
        return notifier

    @pytest.fixture
    def service(self, fake_repository, notifier, config, clock):
        dispatcher = DispatchNotificationsService(
            fake_repository, notifier, config, clock
        )
        return SendTravelRemindersService(fake_repository, dispatcher, config, clock)

    def test_reminds_confirmed_bookings_seven_days_ahead(
        self, service, fake_repository, notifier, create_booking, now
    ):
        fake_repository.save(
            create_booking(
                booking_id="due",
                reference="WW-20261019-1001",
                travel_date=now + timedelta(days=7),
                booking_status=BookingStatus.CONFIRMED,
            )
        )
        fake_repository.save(
            create_booking(
                booking_id="pending",
                reference="WW-20261019-1002",
                travel_date=now + timedelta(days=7),
            )
        )
        fake_repository.save(
            create_booking(
                booking_id="later",
                reference="WW-20261019-1003",
                travel_date=now + timedelta(days=8),
                booking_status=BookingStatus.CONFIRMED,
            )
        )

        sent = service.send_reminders()

        assert sent == ["WW-20261019-1001"]
        kind, payload = notifier.send.call_args.args
        assert kind == NotificationKind.REMINDER
        assert payload.days_until_travel == 7

    def test_reminder_is_sent_once(self, service, fake_repository, notifier, create_booking, now):
        fake_repository.save(
            create_booking(
                travel_date=now + timedelta(days=7),
                booking_status=BookingStatus.CONFIRMED,
            )
        )

        service.send_reminders()
        second = service.send_reminders()

        assert second == []
        notifier.send.assert_called_once()
