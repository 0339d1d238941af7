from dataclasses import replace

from aws_lambda_powertools import Logger

from services.booking.applications.booking_event_publisher import (
    BookingEventPublisher,
)
from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository
from services.booking.domain.service import (
    BookingReferenceGenerator,
    BookingSubmission,
    BookingValidator,
    PricingCalculator,
    ValidatedBooking,
)
from services.booking.domain.value_object import BookingId, BookingMetadata
from services.shared.config import AppConfig
from services.shared.domain import Money
from services.shared.domain.exception import (
    DuplicateResourceException,
    ReferenceCollisionExhaustedException,
)
from services.shared.utils.clock import Clock, utc_now

logger = Logger(child=True)


class CreateBookingService:
    """予約作成ユースケース

    検証 → 予約番号の採番 → 料金の確定 → 永続化 → 通知の起動 を順に行う。
    通知は永続化の成功後に非同期で起動し、その失敗は予約を取り消さない。
    """

    def __init__(
        self,
        repository: BookingRepository,
        factory: BookingFactory,
        validator: BookingValidator,
        pricing: PricingCalculator,
        reference_generator: BookingReferenceGenerator,
        publisher: BookingEventPublisher,
        config: AppConfig,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._validator = validator
        self._pricing = pricing
        self._reference_generator = reference_generator
        self._publisher = publisher
        self._config = config
        self._clock = clock

    def validate(self, submission: BookingSubmission) -> ValidatedBooking:
        """永続化せずに検証し、確定金額を反映した予約内容を返す"""
        validated = self._validator.validate(submission, self._clock())
        return replace(validated, total_amount=self._resolve_total(validated))

    def create(
        self,
        submission: BookingSubmission,
        metadata: BookingMetadata | None = None,
    ) -> Booking:
        """予約を作成する"""
        now = self._clock()
        validated = self._validator.validate(submission, now)
        total_amount = self._resolve_total(validated)
        booking_id = BookingId.generate()

        max_attempts = self._config.reference_max_attempts
        for attempt in range(1, max_attempts + 1):
            reference = self._reference_generator.generate(now)
            booking = self._factory.create(
                booking_id=booking_id,
                validated=validated,
                reference=reference,
                total_amount=total_amount,
                now=now,
                metadata=metadata,
            )
            try:
                self._repository.save(booking)
            except DuplicateResourceException:
                logger.warning(
                    "Booking reference collision, regenerating",
                    extra={"reference": str(reference), "attempt": attempt},
                )
                continue

            logger.info(
                "Booking created",
                extra={"booking_id": str(booking.id), "reference": str(reference)},
            )
            self._publisher.publish(booking)
            return booking

        raise ReferenceCollisionExhaustedException(
            f"Could not assign a unique booking reference after {max_attempts} attempts"
        )

    def _resolve_total(self, validated: ValidatedBooking) -> Money:
        destination = str(validated.trip.destination)
        total = self._pricing.resolve_total(
            destination,
            int(validated.trip.traveler_count),
            validated.total_amount,
        )
        if total != validated.total_amount:
            logger.info(
                "Submitted amount replaced by catalog price",
                extra={
                    "destination": destination,
                    "submitted": str(validated.total_amount.amount),
                    "computed": str(total.amount),
                },
            )
        return total
