from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import build_update_status_service
from services.booking.handlers.errors import handle_error
from services.booking.handlers.request_models import UpdateStatusRequest
from services.booking.handlers.response_models import BookingData
from services.shared.config import AppConfig
from services.shared.utils import api_response, parse_json_body

logger = Logger()

config = AppConfig.from_env()
service = build_update_status_service(config)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約・決済ステータス更新 Lambda Handler"""
    booking_id = (event.path_parameters or {}).get("id", "")
    logger.info("Received update status request", extra={"booking_id": booking_id})

    try:
        request = UpdateStatusRequest.model_validate(parse_json_body(event.body))
        booking = service.update(
            booking_id,
            booking_status=request.booking_status,
            payment_status=request.payment_status,
        )
    except Exception as e:
        return handle_error(e)

    return api_response(200, BookingData.from_entity(booking).to_body())
