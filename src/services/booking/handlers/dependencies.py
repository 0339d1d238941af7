"""Lambda ハンドラーごとのサービス組み立て

各ハンドラーはコールドスタート時にモジュールレベルで一度だけ呼び出す。
"""

from services.booking.applications.booking_event_publisher import (
    BookingEventPublisher,
)
from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.dispatch_notifications import (
    DispatchNotificationsService,
)
from services.booking.applications.get_booking import GetBookingService
from services.booking.applications.search_bookings import SearchBookingsService
from services.booking.applications.send_travel_reminders import (
    SendTravelRemindersService,
)
from services.booking.applications.update_booking_status import (
    UpdateBookingStatusService,
)
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import (
    BookingReferenceGenerator,
    BookingValidator,
    PricingCalculator,
    StatusTransitionPolicy,
)
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.booking.infrastructure.inline_notification_scheduler import (
    InlineNotificationScheduler,
)
from services.notification.domain import NotificationScheduler
from services.notification.infrastructure.lambda_notification_scheduler import (
    LambdaNotificationScheduler,
)
from services.notification.infrastructure.ses_notifier import SesNotifier
from services.shared.config import AppConfig


def build_repository(config: AppConfig) -> BookingRepository:
    return DynamoDBBookingRepository(table_name=config.table_name)


def build_dispatcher(
    config: AppConfig, repository: BookingRepository
) -> DispatchNotificationsService:
    notifier = SesNotifier(sender=config.email_sender, team_email=config.team_email)
    return DispatchNotificationsService(repository, notifier, config)


def build_publisher(
    config: AppConfig, repository: BookingRepository
) -> BookingEventPublisher:
    """通知用 Lambda が設定されていれば非同期起動、なければ同じ実行内で送信"""
    scheduler: NotificationScheduler
    if config.notify_function_name:
        scheduler = LambdaNotificationScheduler(config.notify_function_name)
    else:
        scheduler = InlineNotificationScheduler(build_dispatcher(config, repository))
    return BookingEventPublisher(scheduler)


def build_create_service(config: AppConfig) -> CreateBookingService:
    repository = build_repository(config)
    pricing = PricingCalculator()
    return CreateBookingService(
        repository=repository,
        factory=BookingFactory(),
        validator=BookingValidator(
            config.timezone,
            max_advance_days=config.max_advance_days,
            currency=pricing.currency,
        ),
        pricing=pricing,
        reference_generator=BookingReferenceGenerator(config.timezone),
        publisher=build_publisher(config, repository),
        config=config,
    )


def build_update_status_service(config: AppConfig) -> UpdateBookingStatusService:
    repository = build_repository(config)
    return UpdateBookingStatusService(
        repository=repository,
        publisher=build_publisher(config, repository),
        policy=StatusTransitionPolicy(strict=config.strict_status_transitions),
    )


def build_cancel_service(config: AppConfig) -> CancelBookingService:
    repository = build_repository(config)
    return CancelBookingService(
        repository=repository,
        publisher=build_publisher(config, repository),
    )


def build_get_service(config: AppConfig) -> GetBookingService:
    return GetBookingService(build_repository(config))


def build_search_service(config: AppConfig) -> SearchBookingsService:
    return SearchBookingsService(build_repository(config))


def build_reminder_service(config: AppConfig) -> SendTravelRemindersService:
    repository = build_repository(config)
    return SendTravelRemindersService(
        repository=repository,
        dispatcher=build_dispatcher(config, repository),
        config=config,
    )
