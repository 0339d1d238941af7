from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

SERVICE_NAME = "travel-booking"


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        environment: dict[str, str] | None = None,
    ) -> None:
        super().__init__(scope, id)

        self._table = table
        self._common_layer = common_layer
        self._environment = {
            "TABLE_NAME": table.table_name,
            "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
            **(environment or {}),
        }

        # 通知（予約作成・キャンセル後に非同期で起動）
        self.notify = self._create_function(
            "NotifyLambda", "services.booking.handlers.notify.lambda_handler"
        )
        self.remind = self._create_function(
            "RemindLambda",
            "services.booking.handlers.remind.lambda_handler",
            timeout=Duration.minutes(5),
        )
        for fn in [self.notify, self.remind]:
            table.grant_read_write_data(fn)
            fn.add_to_role_policy(
                iam.PolicyStatement(
                    actions=["ses:SendEmail", "ses:SendRawEmail"],
                    resources=["*"],
                )
            )

        notify_env = {"NOTIFY_FUNCTION_NAME": self.notify.function_name}

        self.create_booking = self._create_function(
            "CreateBookingLambda",
            "services.booking.handlers.create.lambda_handler",
            notify_env,
        )
        self.update_status = self._create_function(
            "UpdateStatusLambda",
            "services.booking.handlers.update_status.lambda_handler",
            notify_env,
        )
        self.cancel_booking = self._create_function(
            "CancelBookingLambda",
            "services.booking.handlers.cancel.lambda_handler",
            notify_env,
        )
        for fn in [self.create_booking, self.update_status, self.cancel_booking]:
            table.grant_read_write_data(fn)
            self.notify.grant_invoke(fn)

        self.get_booking = self._create_function(
            "GetBookingLambda", "services.booking.handlers.get.lambda_handler"
        )
        self.get_by_reference = self._create_function(
            "GetBookingByReferenceLambda",
            "services.booking.handlers.get_by_reference.lambda_handler",
        )
        self.list_bookings = self._create_function(
            "ListBookingsLambda",
            "services.booking.handlers.list_bookings.lambda_handler",
        )
        self.stats = self._create_function(
            "BookingStatsLambda", "services.booking.handlers.stats.lambda_handler"
        )
        for fn in [
            self.get_booking,
            self.get_by_reference,
            self.list_bookings,
            self.stats,
        ]:
            table.grant_read_data(fn)

        self.validate_booking = self._create_function(
            "ValidateBookingLambda",
            "services.booking.handlers.validate.lambda_handler",
        )
        self.health = self._create_function(
            "HealthLambda", "services.booking.handlers.health.lambda_handler"
        )

    def _create_function(
        self,
        id: str,
        handler: str,
        environment: dict[str, str] | None = None,
        timeout: Duration = Duration.seconds(30),
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            timeout=timeout,
            environment={**self._environment, **(environment or {})},
        )
