from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from services.notification.domain import (
    NotificationKind,
    NotificationPayload,
    NotificationResult,
    Notifier,
)
from services.shared.domain import Currency
from services.shared.domain.exception import NotificationFailureException

NOT_CONFIGURED = "Email credentials not configured"

# 送信1回あたりの上限（秒）
SES_CLIENT_CONFIG = Config(
    connect_timeout=5, read_timeout=10, retries={"max_attempts": 2}
)


class SesNotifier(Notifier):
    """Amazon SES によるメール通知

    チームへの通知は team_email 宛、それ以外は顧客のメールアドレス宛。
    """

    SUBJECTS = {
        NotificationKind.CONFIRMATION: "Booking Confirmed - {destination} Trip | {reference}",
        NotificationKind.TEAM_ALERT: "New Booking Alert - {destination} | {reference}",
        NotificationKind.CANCELLATION: "Booking Cancelled - {destination} Trip | {reference}",
        NotificationKind.REMINDER: "Trip Reminder - {destination} in {days} days | {reference}",
    }

    def __init__(self, sender: str, team_email: str = "", client: Any = None) -> None:
        self._sender = sender
        self._team_email = team_email or sender
        self._client = client

    @property
    def configured(self) -> bool:
        return bool(self._sender)

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client("ses", config=SES_CLIENT_CONFIG)
        return self._client

    def send(
        self, kind: NotificationKind, payload: NotificationPayload
    ) -> NotificationResult:
        if not self.configured:
            return NotificationResult.failed(NOT_CONFIGURED)

        recipient = (
            self._team_email
            if kind == NotificationKind.TEAM_ALERT
            else payload.customer_email
        )
        try:
            response = self.client.send_email(
                Source=self._sender,
                Destination={"ToAddresses": [recipient]},
                Message={
                    "Subject": {"Data": self.subject(kind, payload), "Charset": "UTF-8"},
                    "Body": {
                        "Text": {"Data": self.body(kind, payload), "Charset": "UTF-8"}
                    },
                },
            )
        except (ClientError, BotoCoreError) as e:
            raise NotificationFailureException(
                f"SES send_email failed: {kind.value} {payload.booking_reference}"
            ) from e

        return NotificationResult.sent(response.get("MessageId"))

    def subject(self, kind: NotificationKind, payload: NotificationPayload) -> str:
        return self.SUBJECTS[kind].format(
            destination=payload.destination,
            reference=payload.booking_reference,
            days=payload.days_until_travel,
        )

    def body(self, kind: NotificationKind, payload: NotificationPayload) -> str:
        """プレーンテキストの本文"""
        greeting = {
            NotificationKind.CONFIRMATION: (
                f"Dear {payload.customer_name},\n\n"
                f"Your trip to {payload.destination} has been booked."
            ),
            NotificationKind.TEAM_ALERT: (
                f"A new booking was received from {payload.customer_name}."
            ),
            NotificationKind.CANCELLATION: (
                f"Dear {payload.customer_name},\n\n"
                f"Your booking for {payload.destination} has been cancelled."
            ),
            NotificationKind.REMINDER: (
                f"Dear {payload.customer_name},\n\n"
                f"Your trip to {payload.destination} starts in "
                f"{payload.days_until_travel} days."
            ),
        }[kind]

        lines = [
            greeting,
            "",
            f"Booking reference: {payload.booking_reference}",
            f"Destination: {payload.destination}",
            f"Travel date: {payload.formatted_date}",
            f"Travelers: {payload.travelers}",
            f"Total amount: {Currency(payload.currency).format(payload.total_amount)}",
        ]
        if kind == NotificationKind.TEAM_ALERT:
            lines += [
                f"Customer email: {payload.customer_email}",
                f"Contact number: {payload.contact_number}",
            ]
        if payload.special_requests:
            lines.append(f"Special requests: {payload.special_requests}")
        return "\n".join(lines)
