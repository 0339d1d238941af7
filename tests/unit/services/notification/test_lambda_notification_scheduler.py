import json
from unittest.mock import MagicMock

from botocore.exceptions import ClientError

from services.notification.domain import NotificationTrigger
from services.notification.infrastructure.lambda_notification_scheduler import (
    LambdaNotificationScheduler,
)


class TestLambdaNotificationScheduler:
    """LambdaNotificationScheduler のテスト"""

    def test_invokes_notify_function_asynchronously(self):
        client = MagicMock()
        scheduler = LambdaNotificationScheduler("notify-fn", client=client)

        scheduler.schedule("booking-1", NotificationTrigger.BOOKING_CREATED)

        kwargs = client.invoke.call_args.kwargs
        assert kwargs["FunctionName"] == "notify-fn"
        assert kwargs["InvocationType"] == "Event"
        assert json.loads(kwargs["Payload"]) == {
            "bookingId": "booking-1",
            "event": "booking_created",
        }

    def test_invoke_error_is_not_raised(self):
        client = MagicMock()
        client.invoke.side_effect = ClientError(
            {"Error": {"Code": "TooManyRequestsException", "Message": "slow down"}},
            "Invoke",
        )
        scheduler = LambdaNotificationScheduler("notify-fn", client=client)

        scheduler.schedule("booking-1", NotificationTrigger.BOOKING_CANCELLED)

        client.invoke.assert_called_once()

    def test_unconfigured_function_is_skipped(self):
        client = MagicMock()
        LambdaNotificationScheduler("", client=client).schedule(
            "booking-1", NotificationTrigger.BOOKING_CREATED
        )
        client.invoke.assert_not_called()
