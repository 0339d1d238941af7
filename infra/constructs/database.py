from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct

# DynamoDBBookingRepository のキー設計と一致させること
PARTITION_KEY = "PK"
SORT_KEY = "SK"
LISTING_INDEX = "GSI1"


def _string_key(name: str) -> dynamodb.Attribute:
    return dynamodb.Attribute(name=name, type=dynamodb.AttributeType.STRING)


class Database(Construct):
    """予約用シングルテーブル

    予約アイテム（BOOKING#）と予約番号の重複防止アイテム（REFERENCE#）を同じテーブルに置く。
    予約は削除しない運用のため、スタック削除時もテーブルは残す。
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.table = dynamodb.Table(
            self,
            "BookingTable",
            partition_key=_string_key(PARTITION_KEY),
            sort_key=_string_key(SORT_KEY),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery_specification=dynamodb.PointInTimeRecoverySpecification(
                point_in_time_recovery_enabled=True
            ),
            deletion_protection=True,
            removal_policy=RemovalPolicy.RETAIN,
        )

        # 作成日時の新しい順に予約を一覧する
        self.table.add_global_secondary_index(
            index_name=LISTING_INDEX,
            partition_key=_string_key(f"{LISTING_INDEX}PK"),
            sort_key=_string_key(f"{LISTING_INDEX}SK"),
        )
