from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic.alias_generators import to_snake

from services.booking.domain.enum import BookingStatus, PaymentStatus
from services.booking.domain.query import BookingSearchCriteria
from services.booking.handlers.dependencies import build_search_service
from services.booking.handlers.errors import handle_error
from services.booking.handlers.request_models import ListBookingsQuery
from services.booking.handlers.response_models import BookingListResponse
from services.shared.config import AppConfig
from services.shared.domain.exception import ValidationFailedException, Violation
from services.shared.utils import api_response

logger = Logger()

config = AppConfig.from_env()
service = build_search_service(config)

# status=all はフィルタなし
ALL = "all"


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約一覧取得 Lambda Handler"""
    params = event.query_string_parameters or {}
    logger.info("Listing bookings", extra={"query": params})

    try:
        query = ListBookingsQuery.model_validate(params)
        result = service.search(to_criteria(query))
    except Exception as e:
        return handle_error(e)

    return api_response(200, BookingListResponse.from_result(result).to_body())


def to_criteria(query: ListBookingsQuery) -> BookingSearchCriteria:
    """クエリパラメータを検索条件に変換する"""
    violations: list[Violation] = []

    def status_filter(enum_cls, value, field):
        if not value or value.lower() == ALL:
            return None
        try:
            return enum_cls(value.lower())
        except ValueError:
            allowed = ", ".join(s.value for s in enum_cls)
            violations.append(Violation(field, f"{field} must be one of: {allowed}"))
            return None

    payment_status = status_filter(PaymentStatus, query.status, "status")
    booking_status = status_filter(BookingStatus, query.booking_status, "booking_status")
    if violations:
        raise ValidationFailedException(violations)

    return BookingSearchCriteria(
        text=query.search.strip() if query.search else None,
        payment_status=payment_status,
        booking_status=booking_status,
        page=query.page,
        page_size=query.limit,
        sort_field=to_snake(query.sort_by),
        sort_order=query.order,
    )
