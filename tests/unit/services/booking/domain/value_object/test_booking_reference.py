from datetime import date

import pytest

from services.booking.domain.value_object import BookingReference


class TestBookingReference:
    """BookingReference 値オブジェクトのテスト"""

    def test_valid_reference(self):
        reference = BookingReference(value="WW-20261019-4821")
        assert str(reference) == "WW-20261019-4821"
        assert reference.issued_on == date(2026, 10, 19)
        assert reference.suffix == 4821

    def test_lowercase_is_normalized(self):
        """小文字・前後の空白は正規化される"""
        reference = BookingReference(value="  ww-20261019-4821 ")
        assert reference.value == "WW-20261019-4821"

    @pytest.mark.parametrize(
        "value",
        [
            "WW-2026101-4821",
            "WW-20261019-0999",
            "WW-20261019-10000",
            "XX-20261019-4821",
            "WW20261019-4821",
            "",
        ],
    )
    def test_invalid_format_raises_error(self, value):
        with pytest.raises(ValueError):
            BookingReference(value=value)
