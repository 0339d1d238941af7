from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import build_dispatcher, build_repository
from services.booking.handlers.request_models import NotifyRequest
from services.notification.domain import NotificationTrigger
from services.shared.config import AppConfig

logger = Logger()

config = AppConfig.from_env()
dispatcher = build_dispatcher(config, build_repository(config))


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約通知 Lambda Handler（予約作成・キャンセル時に非同期で起動される）"""
    request = NotifyRequest.model_validate(event)
    trigger = NotificationTrigger(request.event)
    logger.append_keys(booking_id=request.booking_id)
    logger.info("Dispatching notifications", extra={"trigger": trigger.value})

    results = dispatcher.dispatch(request.booking_id, trigger)
    return {
        "bookingId": request.booking_id,
        "results": {kind.value: sent for kind, sent in results.items()},
    }
