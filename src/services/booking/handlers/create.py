from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.domain.value_object import BookingMetadata
from services.booking.handlers.dependencies import build_create_service
from services.booking.handlers.errors import handle_error
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import (
    BookingData,
    CreatedBookingResponse,
)
from services.shared.config import AppConfig
from services.shared.utils import api_response, parse_json_body

logger = Logger()

config = AppConfig.from_env()
service = build_create_service(config)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler"""
    logger.info("Received create booking request")

    identity = event.request_context.identity
    metadata = BookingMetadata(
        ip_address=identity.source_ip,
        user_agent=identity.user_agent,
    )
    try:
        request = CreateBookingRequest.model_validate(parse_json_body(event.body))
        booking = service.create(request.to_submission(), metadata=metadata)
    except Exception as e:
        return handle_error(e)

    response = CreatedBookingResponse(
        reference=str(booking.reference),
        payment_url=config.payment_url(booking.reference),
        booking=BookingData.from_entity(booking),
    )
    return api_response(201, response.to_body())
