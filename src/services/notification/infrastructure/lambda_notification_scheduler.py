import json
from typing import Any

import boto3
from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from services.notification.domain import NotificationScheduler, NotificationTrigger

logger = Logger(child=True)


class LambdaNotificationScheduler(NotificationScheduler):
    """通知用 Lambda を非同期（InvocationType=Event）で起動する"""

    def __init__(self, function_name: str, client: Any = None) -> None:
        self._function_name = function_name
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("lambda")
        return self._client

    def schedule(self, booking_id: str, trigger: NotificationTrigger) -> None:
        if not self._function_name:
            logger.warning(
                "Notify function is not configured, notification skipped",
                extra={"booking_id": booking_id, "trigger": trigger.value},
            )
            return

        payload = {"bookingId": booking_id, "event": trigger.value}
        try:
            self.client.invoke(
                FunctionName=self._function_name,
                InvocationType="Event",
                Payload=json.dumps(payload).encode("utf-8"),
            )
        except (ClientError, BotoCoreError):
            logger.exception(
                "Failed to schedule notification",
                extra={"booking_id": booking_id, "trigger": trigger.value},
            )
            return

        logger.info(
            "Notification scheduled",
            extra={"booking_id": booking_id, "trigger": trigger.value},
        )
