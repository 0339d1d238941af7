from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from services.shared.domain import Currency, Money

DEFAULT_CATALOG: Mapping[str, Decimal] = MappingProxyType(
    {
        "Ayodhya": Decimal("15000"),
        "Agra": Decimal("12000"),
        "Kullu Manali": Decimal("20000"),
        "Jaisalmer": Decimal("18000"),
    }
)


class PricingCalculator:
    """料金計算

    旅行先ごとの1人あたり単価 × 旅行者数。
    カタログにない旅行先は正式な料金を持たないため None を返す
    （その場合は申込時の金額を 0 以上であることだけ確認して採用する）。
    """

    def __init__(
        self,
        catalog: Mapping[str, Decimal] = DEFAULT_CATALOG,
        currency: Currency | None = None,
    ) -> None:
        self._currency = currency or Currency.inr()
        self._catalog = {self._key(name): price for name, price in catalog.items()}

    @staticmethod
    def _key(destination: str) -> str:
        return " ".join(destination.split()).casefold()

    def unit_price(self, destination: str) -> Money | None:
        """1人あたりの単価"""
        price = self._catalog.get(self._key(destination))
        if price is None:
            return None
        return Money(amount=price, currency=self._currency)

    def price(self, destination: str, traveler_count: int) -> Money | None:
        """合計金額（カタログ外は None）"""
        unit = self.unit_price(destination)
        if unit is None:
            return None
        return unit.multiply(traveler_count)

    def resolve_total(
        self, destination: str, traveler_count: int, submitted: Money
    ) -> Money:
        """確定金額を決める

        カタログにある旅行先はサーバー側の計算結果を正とする。
        """
        computed = self.price(destination, traveler_count)
        return submitted if computed is None else computed

    @property
    def currency(self) -> Currency:
        return self._currency
