from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.value_object import BookingId, BookingReference
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.notification.domain import NotificationKind
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
    PersistenceFailureException,
)


def _client_error(code: str, operation: str, **extra) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}, **extra}, operation)


class TestDynamoDBBookingRepository:
    """DynamoDBBookingRepository のテスト（テーブルはモック）"""

    @pytest.fixture
    def table(self):
        table = MagicMock()
        table.name = "test-table"
        return table

    @pytest.fixture
    def repository(self, table):
        return DynamoDBBookingRepository(table=table)

    def test_save_writes_booking_and_reference_guard(
        self, repository, table, create_booking
    ):
        """予約と予約番号アイテムを1トランザクションで条件付き書き込みする"""
        repository.save(create_booking(special_requests="Window seat"))

        items = table.meta.client.transact_write_items.call_args.kwargs["TransactItems"]
        booking_put, reference_put = items[0]["Put"], items[1]["Put"]
        assert booking_put["Item"]["PK"] == "BOOKING#booking-1"
        assert booking_put["Item"]["GSI1PK"] == "BOOKINGS"
        assert booking_put["Item"]["special_requests"] == "Window seat"
        assert "ip_address" not in booking_put["Item"]
        assert reference_put["Item"]["PK"] == "REFERENCE#WW-20261019-4821"
        assert reference_put["Item"]["booking_id"] == "booking-1"
        assert all(
            put["Put"]["ConditionExpression"] == "attribute_not_exists(PK)"
            for put in items
        )

    def test_save_reference_collision(self, repository, table, create_booking):
        table.meta.client.transact_write_items.side_effect = _client_error(
            "TransactionCanceledException",
            "TransactWriteItems",
            CancellationReasons=[{"Code": "None"}, {"Code": "ConditionalCheckFailed"}],
        )

        with pytest.raises(DuplicateResourceException):
            repository.save(create_booking())

    def test_save_unavailable_store(self, repository, table, create_booking):
        table.meta.client.transact_write_items.side_effect = EndpointConnectionError(
            endpoint_url="https://dynamodb.ap-south-1.amazonaws.com"
        )

        with pytest.raises(PersistenceFailureException):
            repository.save(create_booking())

    def test_find_by_id_restores_entity(self, repository, table, create_booking):
        booking = create_booking(payment_status=PaymentStatus.PAID)
        item = repository._to_item(booking)
        # DynamoDB の数値は Decimal で返る
        item["traveler_count"] = Decimal(item["traveler_count"])
        table.get_item.return_value = {"Item": item}

        found = repository.find_by_id(BookingId(value="booking-1"))

        assert found == booking
        assert found.reference == booking.reference
        assert found.payment_status == PaymentStatus.PAID
        assert found.total_amount == booking.total_amount
        assert found.trip.travel_date == booking.trip.travel_date
        assert found.notification_state == booking.notification_state

    def test_find_by_id_not_found(self, repository, table):
        table.get_item.return_value = {}
        assert repository.find_by_id(BookingId(value="missing")) is None

    def test_find_by_reference_follows_guard_item(
        self, repository, table, create_booking
    ):
        booking_item = repository._to_item(create_booking())
        table.get_item.side_effect = [
            {"Item": {"PK": "REFERENCE#WW-20261019-4821", "booking_id": "booking-1"}},
            {"Item": booking_item},
        ]

        found = repository.find_by_reference(BookingReference("WW-20261019-4821"))

        assert str(found.id) == "booking-1"
        second_key = table.get_item.call_args_list[1].kwargs["Key"]
        assert second_key == {"PK": "BOOKING#booking-1", "SK": "BOOKING"}

    def test_find_all_follows_pagination(self, repository, table, create_booking):
        first = repository._to_item(create_booking(booking_id="a"))
        second = repository._to_item(
            create_booking(booking_id="b", reference="WW-20261019-1234")
        )
        table.query.side_effect = [
            {"Items": [first], "LastEvaluatedKey": {"PK": "BOOKING#a"}},
            {"Items": [second]},
        ]

        bookings = repository.find_all()

        assert [str(b.id) for b in bookings] == ["a", "b"]
        assert table.query.call_args_list[0].kwargs["ScanIndexForward"] is False
        assert table.query.call_args_list[1].kwargs["ExclusiveStartKey"] == {
            "PK": "BOOKING#a"
        }

    def test_update_status_conflict(self, repository, table, create_booking):
        table.update_item.side_effect = _client_error(
            "ConditionalCheckFailedException", "UpdateItem"
        )

        with pytest.raises(OptimisticLockException):
            repository.update_status(
                create_booking(),
                expected_booking_status=BookingStatus.PENDING,
                expected_payment_status=PaymentStatus.PENDING,
            )

    def test_update_status_writes_both_statuses(self, repository, table, create_booking):
        booking = create_booking(booking_status=BookingStatus.CONFIRMED)

        repository.update_status(booking)

        values = table.update_item.call_args.kwargs["ExpressionAttributeValues"]
        assert values[":booking_status"] == "confirmed"
        assert values[":payment_status"] == "pending"

    def test_mark_notification_sent_updates_single_flag(self, repository, table):
        repository.mark_notification_sent(
            BookingId(value="booking-1"), NotificationKind.TEAM_ALERT
        )

        kwargs = table.update_item.call_args.kwargs
        assert kwargs["UpdateExpression"] == "SET notification_state.#flag = :sent"
        assert kwargs["ExpressionAttributeNames"] == {"#flag": "team_notification_sent"}

    def test_mark_notification_sent_failure(self, repository, table):
        table.update_item.side_effect = _client_error(
            "ProvisionedThroughputExceededException", "UpdateItem"
        )

        with pytest.raises(PersistenceFailureException):
            repository.mark_notification_sent(
                BookingId(value="booking-1"), NotificationKind.CONFIRMATION
            )
