from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import build_create_service
from services.booking.handlers.errors import handle_error
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import ValidatedBookingData
from services.shared.config import AppConfig
from services.shared.utils import api_response, parse_json_body

logger = Logger()

config = AppConfig.from_env()
service = build_create_service(config)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約内容の検証のみ（保存しない）"""
    try:
        request = CreateBookingRequest.model_validate(parse_json_body(event.body))
        validated = service.validate(request.to_submission())
    except Exception as e:
        return handle_error(e)

    return api_response(200, ValidatedBookingData.from_validated(validated).to_body())
