import os
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import BotoCoreError, ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import (
    BookingId,
    BookingMetadata,
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
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
    PersistenceFailureException,
)

BOOKINGS_INDEX = "GSI1"
BOOKINGS_PARTITION = "BOOKINGS"


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    - 予約アイテム:   PK=BOOKING#{id}       SK=BOOKING
    - 予約番号アイテム: PK=REFERENCE#{ref}  SK=REFERENCE（一意制約用）
    - GSI1: GSI1PK=BOOKINGS / GSI1SK={created_at}#{id}（作成日時順の一覧）
    """

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if table is None:
            dynamodb = boto3.resource("dynamodb")
            table = dynamodb.Table(self.table_name)
        self.table = table

    def save(self, booking: Booking) -> None:
        """予約と予約番号アイテムを1トランザクションで保存する

        どちらかが既に存在すれば DuplicateResourceException。
        """
        reference_item = {
            "PK": _reference_pk(booking.reference),
            "SK": "REFERENCE",
            "entity_type": "REFERENCE",
            "booking_id": str(booking.id),
        }
        condition = "attribute_not_exists(PK)"
        try:
            self.table.meta.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table.name,
                            "Item": self._to_item(booking),
                            "ConditionExpression": condition,
                        }
                    },
                    {
                        "Put": {
                            "TableName": self.table.name,
                            "Item": reference_item,
                            "ConditionExpression": condition,
                        }
                    },
                ]
            )
        except ClientError as e:
            if _is_condition_failure(e):
                raise DuplicateResourceException(
                    f"Booking reference already exists: {booking.reference}"
                ) from e
            raise PersistenceFailureException(
                f"Failed to save booking: {booking.id}"
            ) from e
        except BotoCoreError as e:
            raise PersistenceFailureException(
                f"Failed to save booking: {booking.id}"
            ) from e

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        with _persistence_errors("find booking"):
            response = self.table.get_item(
                Key={"PK": _booking_pk(booking_id), "SK": "BOOKING"},
                ConsistentRead=True,
            )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_reference(self, reference: BookingReference) -> Booking | None:
        """予約番号アイテムから予約IDを引いて検索"""
        with _persistence_errors("find booking reference"):
            response = self.table.get_item(
                Key={"PK": _reference_pk(reference), "SK": "REFERENCE"},
                ConsistentRead=True,
            )
        item = response.get("Item")
        if not item:
            return None
        return self.find_by_id(BookingId(value=item["booking_id"]))

    def find_all(self) -> list[Booking]:
        """GSI1 から全予約を作成日時の新しい順に取得する"""
        kwargs: dict = {
            "IndexName": BOOKINGS_INDEX,
            "KeyConditionExpression": Key("GSI1PK").eq(BOOKINGS_PARTITION),
            "ScanIndexForward": False,
        }
        bookings: list[Booking] = []
        with _persistence_errors("list bookings"):
            while True:
                response = self.table.query(**kwargs)
                bookings.extend(self._to_entity(i) for i in response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        return bookings

    def update_status(
        self,
        booking: Booking,
        expected_booking_status: BookingStatus | None = None,
        expected_payment_status: PaymentStatus | None = None,
    ) -> None:
        """予約・決済ステータスを更新する"""
        condition = Attr("PK").exists()
        if expected_booking_status is not None:
            condition &= Attr("booking_status").eq(expected_booking_status.value)
        if expected_payment_status is not None:
            condition &= Attr("payment_status").eq(expected_payment_status.value)

        try:
            self.table.update_item(
                Key={"PK": _booking_pk(booking.id), "SK": "BOOKING"},
                UpdateExpression=(
                    "SET booking_status = :booking_status, "
                    "payment_status = :payment_status, "
                    "updated_at = :updated_at"
                ),
                ExpressionAttributeValues={
                    ":booking_status": booking.booking_status.value,
                    ":payment_status": booking.payment_status.value,
                    ":updated_at": str(booking.updated_at),
                },
                ConditionExpression=condition,
            )
        except ClientError as e:
            if _is_condition_failure(e):
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_booking_status}/{expected_payment_status}, "
                    f"booking_id={booking.id}"
                ) from e
            raise PersistenceFailureException(
                f"Failed to update booking: {booking.id}"
            ) from e
        except BotoCoreError as e:
            raise PersistenceFailureException(
                f"Failed to update booking: {booking.id}"
            ) from e

    def mark_notification_sent(
        self, booking_id: BookingId, kind: NotificationKind
    ) -> None:
        """通知フラグ1つだけを true にする"""
        with _persistence_errors("update notification state"):
            self.table.update_item(
                Key={"PK": _booking_pk(booking_id), "SK": "BOOKING"},
                UpdateExpression="SET notification_state.#flag = :sent",
                ExpressionAttributeNames={
                    "#flag": NotificationState.field_for(kind)
                },
                ExpressionAttributeValues={":sent": True},
            )

    def _to_item(self, booking: Booking) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        item = {
            "PK": _booking_pk(booking.id),
            "SK": "BOOKING",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "reference": str(booking.reference),
            "customer_name": str(booking.customer.name),
            "customer_email": str(booking.customer.email),
            "phone": str(booking.customer.phone),
            "destination": str(booking.trip.destination),
            "travel_date": str(booking.trip.travel_date),
            "traveler_count": int(booking.trip.traveler_count),
            "total_amount": str(booking.total_amount.amount),
            "currency": str(booking.total_amount.currency),
            "booking_status": booking.booking_status.value,
            "payment_status": booking.payment_status.value,
            "notification_state": booking.notification_state.to_dict(),
            "source": booking.metadata.source,
            "created_at": str(booking.created_at),
            "updated_at": str(booking.updated_at),
            "GSI1PK": BOOKINGS_PARTITION,
            "GSI1SK": f"{booking.created_at}#{booking.id}",
        }
        optional = {
            "special_requests": (
                str(booking.special_requests) if booking.special_requests else None
            ),
            "ip_address": booking.metadata.ip_address,
            "user_agent": booking.metadata.user_agent,
        }
        item.update({k: v for k, v in optional.items() if v})
        return item

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        flags = item.get("notification_state", {})
        special_requests = item.get("special_requests")
        return Booking(
            id=BookingId(value=item["booking_id"]),
            reference=BookingReference(value=item["reference"]),
            customer=Customer(
                name=CustomerName(item["customer_name"]),
                email=EmailAddress(item["customer_email"]),
                phone=PhoneNumber(item["phone"]),
            ),
            trip=Trip(
                destination=Destination(item["destination"]),
                travel_date=IsoDateTime.from_string(item["travel_date"]),
                traveler_count=TravelerCount(int(item["traveler_count"])),
            ),
            total_amount=Money(
                amount=Decimal(item["total_amount"]),
                currency=Currency(item["currency"]),
            ),
            special_requests=(
                SpecialRequests(special_requests) if special_requests else None
            ),
            booking_status=BookingStatus(item["booking_status"]),
            payment_status=PaymentStatus(item["payment_status"]),
            notification_state=NotificationState(
                **{
                    name: bool(flags.get(name, False))
                    for name in NotificationState.FIELDS.values()
                }
            ),
            metadata=BookingMetadata(
                source=item.get("source", "website"),
                ip_address=item.get("ip_address"),
                user_agent=item.get("user_agent"),
            ),
            created_at=IsoDateTime.from_string(item["created_at"]),
            updated_at=IsoDateTime.from_string(item["updated_at"]),
        )


def _booking_pk(booking_id: BookingId) -> str:
    return f"BOOKING#{booking_id}"


def _reference_pk(reference: BookingReference) -> str:
    return f"REFERENCE#{reference}"


def _is_condition_failure(error: ClientError) -> bool:
    code = error.response.get("Error", {}).get("Code")
    if code == "ConditionalCheckFailedException":
        return True
    if code == "TransactionCanceledException":
        reasons = error.response.get("CancellationReasons", [])
        return any(r.get("Code") == "ConditionalCheckFailed" for r in reasons)
    return False


@contextmanager
def _persistence_errors(action: str) -> Iterator[None]:
    """boto3 の例外を PersistenceFailureException に変換する"""
    try:
        yield
    except (ClientError, BotoCoreError) as e:
        raise PersistenceFailureException(f"Failed to {action}") from e
