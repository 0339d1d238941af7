from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Callable, TypedDict, TypeVar

from services.booking.domain.value_object import (
    Customer,
    CustomerName,
    Destination,
    EmailAddress,
    PhoneNumber,
    SpecialRequests,
    TravelerCount,
    Trip,
)
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.domain.exception import ValidationFailedException, Violation
from services.shared.utils.validators import to_decimal

T = TypeVar("T")


class BookingSubmission(TypedDict):
    """予約申込の入力データ構造（未検証のプリミティブ値）"""

    customer_name: str | None
    customer_email: str | None
    phone: str | None
    destination: str | None
    travel_date: str | date | None
    traveler_count: object
    total_amount: object
    special_requests: str | None


@dataclass(frozen=True)
class ValidatedBooking:
    """検証・正規化済みの予約内容"""

    customer: Customer
    trip: Trip
    total_amount: Money
    special_requests: SpecialRequests | None = None


class BookingValidator:
    """予約申込の検証

    - 各項目を独立に検証し、違反をすべて収集する（最初の違反で打ち切らない）
    - 違反が1件でもあれば ValidationFailedException を送出する
    """

    def __init__(
        self,
        tz: tzinfo,
        max_advance_days: int | None = None,
        currency: Currency | None = None,
    ) -> None:
        self._tz = tz
        self._max_advance_days = max_advance_days
        self._currency = currency or Currency.inr()

    def validate(self, submission: BookingSubmission, now: datetime) -> ValidatedBooking:
        """申込内容を検証し、正規化済みの予約内容を返す"""
        violations: list[Violation] = []

        def check(field: str, build: Callable[[], T]) -> T | None:
            try:
                return build()
            except ValueError as e:
                violations.append(Violation(field=field, message=str(e)))
                return None

        name = check(
            "customer_name",
            lambda: CustomerName(
                _required_text(submission.get("customer_name"), "Customer name")
            ),
        )
        email = check(
            "customer_email",
            lambda: EmailAddress(
                _required_text(submission.get("customer_email"), "Customer email")
            ),
        )
        phone = check(
            "phone",
            lambda: PhoneNumber(
                _contact_number(submission.get("phone"))
            ),
        )
        destination = check(
            "destination",
            lambda: Destination(
                _required_text(submission.get("destination"), "Destination")
            ),
        )
        travel_date = check(
            "travel_date",
            lambda: self._travel_date(submission.get("travel_date"), now),
        )
        traveler_count = check(
            "traveler_count",
            lambda: TravelerCount.parse(
                _required(submission.get("traveler_count"), "Number of travelers")
            ),
        )
        total_amount = check(
            "total_amount",
            lambda: self._total_amount(submission.get("total_amount")),
        )
        special_requests = check(
            "special_requests",
            lambda: _special_requests(submission.get("special_requests")),
        )

        if violations:
            raise ValidationFailedException(violations)

        return ValidatedBooking(
            customer=Customer(name=name, email=email, phone=phone),  # type: ignore[arg-type]
            trip=Trip(
                destination=destination,  # type: ignore[arg-type]
                travel_date=travel_date,  # type: ignore[arg-type]
                traveler_count=traveler_count,  # type: ignore[arg-type]
            ),
            total_amount=total_amount,  # type: ignore[arg-type]
            special_requests=special_requests,
        )

    def _travel_date(self, raw: object, now: datetime) -> IsoDateTime:
        raw = _required(raw, "Travel date")
        if isinstance(raw, datetime):
            travel_date = IsoDateTime(raw)
        elif isinstance(raw, date):
            travel_date = IsoDateTime.start_of_day(raw, self._tz)
        elif isinstance(raw, str):
            try:
                travel_date = IsoDateTime.from_string(raw, default_tz=self._tz)
            except ValueError as e:
                raise ValueError("Invalid date format") from e
        else:
            raise ValueError("Invalid date format")

        today = now.astimezone(self._tz).date()
        travel_day = travel_date.local_date(self._tz)
        if travel_day < today:
            raise ValueError("Travel date cannot be in the past")
        if self._max_advance_days is not None and travel_day > today + timedelta(
            days=self._max_advance_days
        ):
            raise ValueError(
                f"Travel date cannot be more than {self._max_advance_days} days "
                "in advance"
            )
        return travel_date

    def _total_amount(self, raw: object) -> Money:
        raw = _required(raw, "Total amount")
        try:
            amount = to_decimal(raw)
        except ValueError as e:
            raise ValueError("Total amount must be a number") from e
        if not amount.is_finite():
            raise ValueError("Total amount must be a finite number")
        if amount < 0:
            raise ValueError("Total amount cannot be negative")
        return Money(amount=amount, currency=self._currency)


def _required(value: T | None, label: str) -> T:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{label} is required")
    return value


def _required_text(value: object, label: str) -> str:
    value = _required(value, label)
    if not isinstance(value, str):
        raise ValueError(f"{label} must be text")
    return value


def _contact_number(value: object) -> str:
    # JSON の数値で送られた番号も受け付ける
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return _required_text(value, "Contact number")


def _special_requests(value: object) -> SpecialRequests | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError("Special requests must be text")
    if not value.strip():
        return None
    return SpecialRequests(value)
