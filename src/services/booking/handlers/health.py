from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.config import AppConfig
from services.shared.utils import api_response, utc_now

logger = Logger()

config = AppConfig.from_env()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """ヘルスチェック"""
    return api_response(
        200,
        {
            "status": "OK",
            "timestamp": utc_now().isoformat(),
            "emailConfigured": config.notifier_configured,
        },
    )
