from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import build_reminder_service
from services.shared.config import AppConfig

logger = Logger()

config = AppConfig.from_env()
service = build_reminder_service(config)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """出発前リマインダー Lambda Handler（EventBridge により日次で起動）"""
    logger.info(
        "Sending travel reminders",
        extra={"days_ahead": config.reminder_days_ahead},
    )
    references = service.send_reminders()
    logger.info("Travel reminders sent", extra={"count": len(references)})
    return {"sent": references, "count": len(references)}
