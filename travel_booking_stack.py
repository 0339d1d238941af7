from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers, Scheduling


class TravelBookingStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        environment: dict[str, str] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            environment=environment,
        )

        api = Api(
            self,
            "Api",
            create_booking=fns.create_booking,
            list_bookings=fns.list_bookings,
            get_booking=fns.get_booking,
            get_by_reference=fns.get_by_reference,
            update_status=fns.update_status,
            cancel_booking=fns.cancel_booking,
            validate_booking=fns.validate_booking,
            stats=fns.stats,
            health=fns.health,
        )

        Scheduling(self, "Scheduling", remind=fns.remind)

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
