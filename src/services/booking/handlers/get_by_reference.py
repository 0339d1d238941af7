from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import build_get_service
from services.booking.handlers.errors import handle_error
from services.booking.handlers.response_models import BookingData
from services.shared.config import AppConfig
from services.shared.utils import api_response

logger = Logger()

config = AppConfig.from_env()
service = build_get_service(config)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約番号による予約取得 Lambda Handler"""
    reference = (event.path_parameters or {}).get("reference", "")
    logger.info("Fetching booking by reference", extra={"reference": reference})

    try:
        booking = service.get_by_reference(reference)
    except Exception as e:
        return handle_error(e)

    return api_response(200, BookingData.from_entity(booking).to_body())
