import pytest

from services.booking.domain.value_object import (
    CustomerName,
    EmailAddress,
    PhoneNumber,
)


class TestCustomerName:
    """CustomerName 値オブジェクトのテスト"""

    def test_name_is_trimmed(self):
        assert CustomerName("  Asha Verma ").value == "Asha Verma"

    def test_too_short_name(self):
        with pytest.raises(ValueError, match="at least 2 characters"):
            CustomerName(" A ")

    def test_boundary_lengths(self):
        assert CustomerName("Al").value == "Al"
        assert len(CustomerName("a" * 50).value) == 50
        with pytest.raises(ValueError, match="cannot exceed 50 characters"):
            CustomerName("a" * 51)


class TestEmailAddress:
    """EmailAddress 値オブジェクトのテスト"""

    def test_email_is_lowercased(self):
        assert EmailAddress(" Asha.Verma@Example.COM ").value == "asha.verma@example.com"

    @pytest.mark.parametrize(
        "value", ["asha", "asha@example", "asha verma@example.com", "@example.com"]
    )
    def test_invalid_email(self, value):
        with pytest.raises(ValueError, match="valid email address"):
            EmailAddress(value)


class TestPhoneNumber:
    """PhoneNumber 値オブジェクトのテスト"""

    def test_separators_are_ignored_for_length(self):
        phone = PhoneNumber("(987) 654-3210")
        assert phone.value == "(987) 654-3210"
        assert phone.digits == "9876543210"

    @pytest.mark.parametrize("value", ["987654321", "12345678901234567", "98765abcde"])
    def test_invalid_phone(self, value):
        with pytest.raises(ValueError, match="10-16 digits"):
            PhoneNumber(value)

    def test_sixteen_digits_is_allowed(self):
        assert PhoneNumber("1234567890123456").digits == "1234567890123456"
