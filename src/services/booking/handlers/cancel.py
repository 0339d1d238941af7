from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import build_cancel_service
from services.booking.handlers.errors import handle_error
from services.booking.handlers.response_models import BookingData
from services.shared.config import AppConfig
from services.shared.utils import api_response

logger = Logger()

config = AppConfig.from_env()
service = build_cancel_service(config)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler（DELETE /bookings/{id}）"""
    booking_id = (event.path_parameters or {}).get("id", "")
    logger.info("Received cancel booking request", extra={"booking_id": booking_id})

    try:
        booking = service.cancel(booking_id)
    except Exception as e:
        return handle_error(e)

    return api_response(
        200,
        {
            "message": "Booking cancelled successfully",
            "booking": BookingData.from_entity(booking).to_body(),
        },
    )
