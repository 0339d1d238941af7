from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct（REST API、Lambda プロキシ統合）"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        create_booking: _lambda.IFunction,
        list_bookings: _lambda.IFunction,
        get_booking: _lambda.IFunction,
        get_by_reference: _lambda.IFunction,
        update_status: _lambda.IFunction,
        cancel_booking: _lambda.IFunction,
        validate_booking: _lambda.IFunction,
        stats: _lambda.IFunction,
        health: _lambda.IFunction,
        allowed_origins: list[str] | None = None,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BookingRestApi",
            rest_api_name="Travel Booking API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=20,
                throttling_rate_limit=10,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=allowed_origins or apigw.Cors.ALL_ORIGINS,
                allow_methods=apigw.Cors.ALL_METHODS,
            ),
        )

        # GET /health
        self.rest_api.root.add_resource("health").add_method(
            "GET", apigw.LambdaIntegration(health)
        )

        # /bookings
        bookings = self.rest_api.root.add_resource("bookings")
        bookings.add_method("POST", apigw.LambdaIntegration(create_booking))
        bookings.add_method("GET", apigw.LambdaIntegration(list_bookings))

        bookings.add_resource("validate").add_method(
            "POST", apigw.LambdaIntegration(validate_booking)
        )
        bookings.add_resource("stats").add_method(
            "GET", apigw.LambdaIntegration(stats)
        )
        bookings.add_resource("reference").add_resource("{reference}").add_method(
            "GET", apigw.LambdaIntegration(get_by_reference)
        )

        # /bookings/{id}
        booking = bookings.add_resource("{id}")
        booking.add_method("GET", apigw.LambdaIntegration(get_booking))
        booking.add_method("DELETE", apigw.LambdaIntegration(cancel_booking))
        booking.add_resource("status").add_method(
            "PUT", apigw.LambdaIntegration(update_status)
        )
