from unittest.mock import MagicMock

import pytest

from services.booking.applications.dispatch_notifications import (
    DispatchNotificationsService,
)
from services.booking.domain.value_object import NotificationState
from services.notification.domain import (
    NotificationKind,
    NotificationResult,
    NotificationTrigger,
)
from services.shared.domain.exception import (
    NotificationFailureException,
    PersistenceFailureException,
)


class TestDispatchNotificationsService:
    """DispatchNotificationsService のテスト"""

    @pytest.fixture
    def notifier(self):
        notifier = MagicMock()
        notifier.send.return_value = NotificationResult.sent("msg-1")
        return notifier

    @pytest.fixture
    def service(self, fake_repository, notifier, config, clock):
        return DispatchNotificationsService(fake_repository, notifier, config, clock)

    def test_created_sends_confirmation_and_team_alert(
        self, service, fake_repository, notifier, create_booking
    ):
        fake_repository.save(create_booking())

        results = service.dispatch("booking-1", NotificationTrigger.BOOKING_CREATED)

        assert results == {
            NotificationKind.CONFIRMATION: True,
            NotificationKind.TEAM_ALERT: True,
        }
        sent_kinds = [c.args[0] for c in notifier.send.call_args_list]
        assert sent_kinds == [NotificationKind.CONFIRMATION, NotificationKind.TEAM_ALERT]
        stored = fake_repository.find_by_id(create_booking().id)
        assert stored.notification_state.confirmation_sent
        assert stored.notification_state.team_notification_sent

    def test_dispatch_is_idempotent(
        self, service, fake_repository, notifier, create_booking
    ):
        """送信済みのフラグが立っていれば再送しない"""
        fake_repository.save(create_booking())

        service.dispatch("booking-1", NotificationTrigger.BOOKING_CREATED)
        service.dispatch("booking-1", NotificationTrigger.BOOKING_CREATED)

        assert notifier.send.call_count == 2
        assert len(fake_repository.flag_updates) == 2

    def test_one_failure_does_not_block_the_other(
        self, service, fake_repository, notifier, create_booking
    ):
        """確認メールが失敗してもチーム通知は送信され、失敗側のフラグは false のまま"""
        fake_repository.save(create_booking())
        notifier.send.side_effect = [
            NotificationResult.failed("mailbox unavailable"),
            NotificationResult.sent("msg-2"),
        ]

        results = service.dispatch("booking-1", NotificationTrigger.BOOKING_CREATED)

        assert results[NotificationKind.CONFIRMATION] is False
        assert results[NotificationKind.TEAM_ALERT] is True
        stored = fake_repository.find_by_id(create_booking().id)
        assert stored.notification_state.confirmation_sent is False
        assert stored.notification_state.team_notification_sent is True

    @pytest.mark.parametrize(
        "error", [NotificationFailureException("ses"), RuntimeError("boom")]
    )
    def test_notifier_exception_is_contained(
        self, service, fake_repository, notifier, create_booking, error
    ):
        fake_repository.save(create_booking())
        notifier.send.side_effect = error

        results = service.dispatch("booking-1", NotificationTrigger.BOOKING_CANCELLED)

        assert results == {NotificationKind.CANCELLATION: False}
        assert fake_repository.flag_updates == []

    def test_flag_write_failure_is_contained(
        self, notifier, config, clock, create_booking
    ):
        repository = MagicMock()
        repository.find_by_id.return_value = create_booking()
        repository.mark_notification_sent.side_effect = PersistenceFailureException(
            "down"
        )
        service = DispatchNotificationsService(repository, notifier, config, clock)

        results = service.dispatch("booking-1", NotificationTrigger.BOOKING_CANCELLED)

        assert results == {NotificationKind.CANCELLATION: False}

    def test_already_sent_flag_is_skipped(
        self, service, fake_repository, notifier, create_booking
    ):
        fake_repository.save(
            create_booking(
                notification_state=NotificationState(confirmation_sent=True)
            )
        )

        service.dispatch("booking-1", NotificationTrigger.BOOKING_CREATED)

        notifier.send.assert_called_once()
        assert notifier.send.call_args.args[0] == NotificationKind.TEAM_ALERT

    def test_missing_booking(self, service, notifier):
        assert service.dispatch("missing", NotificationTrigger.BOOKING_CREATED) == {}
        notifier.send.assert_not_called()
