"""
Test suite for the multiplier module
"""

import pytest

from big_integer import ZERO, multiply, parse


class TestMultiply:
    """Test schoolbook multiplication"""

    def test_concrete_products(self):
        """Test known products"""
        assert multiply(parse("123"), parse("456")) == parse("56088")
        assert multiply(parse("-12"), parse("34")) == parse("-408")
        assert multiply(parse("99"), parse("99")) == parse("9801")

    def test_final_carry_becomes_digit(self):
        """Test carry left after the last digit is kept"""
        assert multiply(parse("9"), parse("9")) == parse("81")
        assert multiply(parse("999"), parse("9")) == parse("8991")

    def test_zero_digits_in_operands(self):
        """Test interior zero digits shift correctly"""
        assert multiply(parse("1001"), parse("101")) == parse("101101")
        assert multiply(parse("10"), parse("10")) == parse("100")

    def test_large(self):
        """Test a product beyond 64-bit range"""
        first = parse("123456789012345678901234567890")
        second = parse("987654321098765432109876543210")
        expected = 123456789012345678901234567890 * 987654321098765432109876543210
        assert str(multiply(first, second)) == str(expected)

    @pytest.mark.parametrize("first, second, negative", [
        ("3", "4", False),
        ("-3", "4", True),
        ("3", "-4", True),
        ("-3", "-4", False),
    ])
    def test_sign_rule(self, first, second, negative):
        """Test product is negative iff exactly one operand is"""
        assert multiply(parse(first), parse(second)).negative is negative

    def test_zero_absorbs(self):
        """Test any product with zero is non-negative zero"""
        for text in ["0", "5", "-5", "123456789"]:
            assert multiply(parse(text), ZERO) == ZERO
            assert multiply(ZERO, parse(text)) == ZERO
        assert multiply(parse("-7"), parse("-0")).negative is False

    def test_one_is_identity(self):
        """Test multiplying by one keeps the value"""
        value = parse("-98765")
        assert multiply(value, parse("1")) == value
        assert multiply(parse("1"), value) == value

    def test_inputs_not_modified(self):
        """Test operands are unchanged after the call"""
        first, second = parse("-12"), parse("34")
        multiply(first, second)
        assert first == parse("-12")
        assert second == parse("34")
