from datetime import datetime, timedelta

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.handlers.dependencies import build_search_service
from services.booking.handlers.errors import handle_error
from services.booking.handlers.request_models import StatsQuery
from services.booking.handlers.response_models import BookingStatsData
from services.shared.config import AppConfig
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import ValidationFailedException, Violation
from services.shared.utils import api_response

logger = Logger()

config = AppConfig.from_env()
service = build_search_service(config)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約集計 Lambda Handler"""
    params = event.query_string_parameters or {}
    logger.info("Computing booking stats", extra={"query": params})

    try:
        query = StatsQuery.model_validate(params)
        start, end = parse_period(query)
        stats = service.stats(start, end)
    except Exception as e:
        return handle_error(e)

    return api_response(200, BookingStatsData.from_stats(stats).to_body())


def parse_period(query: StatsQuery) -> tuple[datetime | None, datetime | None]:
    """集計期間を解釈する

    日付のみの endDate はその日の終わりまでを含める。
    """
    violations: list[Violation] = []

    def parse(raw: str | None, field: str) -> IsoDateTime | None:
        if not raw:
            return None
        try:
            return IsoDateTime.from_string(raw, config.timezone)
        except ValueError:
            violations.append(Violation(field, "Invalid date format"))
            return None

    start = parse(query.start_date, "start_date")
    end = parse(query.end_date, "end_date")
    if violations:
        raise ValidationFailedException(violations)

    end_value = end.value if end else None
    if end_value is not None and len(query.end_date.strip()) == 10:
        end_value = end_value + timedelta(days=1) - timedelta(microseconds=1)
    return (start.value if start else None), end_value
