from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from services.booking.domain.query.booking_search import SortOrder
from services.booking.domain.service import BookingSubmission


class CamelModel(BaseModel):
    """camelCase / snake_case のどちらのキーも受け付ける基底モデル"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateBookingRequest(CamelModel):
    """予約作成リクエストモデル

    値の検証はドメインの BookingValidator が全項目まとめて行うため、
    ここでは型を絞らずに受け取る。
    """

    customer_name: Any = Field(
        default=None,
        validation_alias=AliasChoices("customerName", "customer_name", "user"),
    )
    customer_email: Any = Field(
        default=None,
        validation_alias=AliasChoices("customerEmail", "customer_email", "email"),
    )
    phone: Any = Field(
        default=None,
        validation_alias=AliasChoices("phone", "contactNumber", "contact_number"),
    )
    destination: Any = None
    travel_date: Any = Field(
        default=None,
        validation_alias=AliasChoices("travelDate", "travel_date", "date"),
    )
    traveler_count: Any = Field(
        default=None,
        validation_alias=AliasChoices(
            "travelerCount", "traveler_count", "travelers", "people"
        ),
    )
    total_amount: Any = Field(
        default=None,
        validation_alias=AliasChoices("totalAmount", "total_amount"),
    )
    special_requests: Any = Field(
        default=None,
        validation_alias=AliasChoices("specialRequests", "special_requests"),
    )

    def to_submission(self) -> BookingSubmission:
        return {
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "phone": self.phone,
            "destination": self.destination,
            "travel_date": self.travel_date,
            "traveler_count": self.traveler_count,
            "total_amount": self.total_amount,
            "special_requests": self.special_requests,
        }


class UpdateStatusRequest(CamelModel):
    """ステータス更新リクエストモデル（列挙値の検証はサービス側）"""

    booking_status: str | None = None
    payment_status: str | None = None

    @field_validator("booking_status", "payment_status", mode="before")
    @classmethod
    def empty_as_absent(cls, v):
        """空文字は未指定として扱う"""
        return None if v == "" else v


class ListBookingsQuery(CamelModel):
    """予約一覧のクエリパラメータ"""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    status: str | None = None
    booking_status: str | None = None
    search: str | None = None
    sort_by: str = "created_at"
    order: SortOrder = SortOrder.DESC


class StatsQuery(CamelModel):
    """集計期間のクエリパラメータ（ISO 8601）"""

    start_date: str | None = None
    end_date: str | None = None


class NotifyRequest(CamelModel):
    """通知 Lambda の非同期呼び出しペイロード"""

    booking_id: str = Field(..., min_length=1)
    event: str
