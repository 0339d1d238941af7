from aws_lambda_powertools import Logger
from pydantic import ValidationError

from services.shared.domain.exception import (
    DomainException,
    PersistenceFailureException,
)
from services.shared.utils import (
    api_response,
    error_response,
    validation_error_response,
)

logger = Logger(child=True)


def handle_error(error: Exception) -> dict:
    """ハンドラーで捕捉した例外を HTTP レスポンスに変換する

    except 節の中から呼び出すこと（スタックトレースをログに残すため）。
    """
    if isinstance(error, PersistenceFailureException):
        logger.exception("Persistence failure")
        return error_response(error)
    if isinstance(error, DomainException):
        logger.info(
            "Request rejected",
            extra={"error": type(error).__name__, "detail": str(error)},
        )
        return error_response(error)
    if isinstance(error, ValidationError):
        logger.info("Invalid request", extra={"error_count": error.error_count()})
        return validation_error_response(error)
    logger.exception("Unexpected error")
    return api_response(500, {"message": "Internal server error"})
