from decimal import Decimal

import pytest

from services.booking.domain.service import PricingCalculator
from services.shared.domain import Money


class TestPricingCalculator:
    """PricingCalculator のテスト"""

    @pytest.fixture
    def pricing(self):
        return PricingCalculator()

    def test_price_is_unit_price_times_travelers(self, pricing):
        assert pricing.price("Agra", 2) == Money.inr(Decimal("24000"))

    def test_destination_lookup_is_normalized(self, pricing):
        """大文字小文字・余分な空白は無視する"""
        assert pricing.price("  kullu   MANALI ", 3) == Money.inr(Decimal("60000"))

    def test_unknown_destination_has_no_price(self, pricing):
        assert pricing.unit_price("Goa") is None
        assert pricing.price("Goa", 2) is None

    def test_catalog_price_overrides_submitted_amount(self, pricing):
        resolved = pricing.resolve_total("Ayodhya", 2, Money.inr(Decimal("1")))
        assert resolved == Money.inr(Decimal("30000"))

    def test_submitted_amount_is_kept_for_unknown_destination(self, pricing):
        submitted = Money.inr(Decimal("12345"))
        assert pricing.resolve_total("Goa", 2, submitted) == submitted

    def test_custom_catalog(self):
        pricing = PricingCalculator({"Goa": Decimal("9000")})
        assert pricing.price("goa", 2) == Money.inr(Decimal("18000"))
        assert pricing.price("Agra", 2) is None
