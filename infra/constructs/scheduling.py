from aws_cdk import aws_events as events
from aws_cdk import aws_events_targets as targets
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Scheduling(Construct):
    """日次バッチ（出発前リマインダー）の EventBridge ルール"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        remind: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        # 03:30 UTC = 09:00 IST
        self.reminder_rule = events.Rule(
            self,
            "DailyReminderRule",
            schedule=events.Schedule.cron(minute="30", hour="3"),
        )
        self.reminder_rule.add_target(targets.LambdaFunction(remind))
