"""
Test suite for the adder module

Tests same-sign addition with carry, opposite-sign subtraction with borrow,
sign selection and canonicalization of results.
"""

import pytest

from big_integer import ZERO, add, negate, parse, subtract


class TestAddSameSign:
    """Test addition of operands sharing a sign"""

    def test_simple(self):
        """Test addition without carry"""
        assert add(parse("12"), parse("34")) == parse("46")

    def test_carry_into_new_digit(self):
        """Test a final carry becomes a new most-significant digit"""
        assert add(parse("999"), parse("1")) == parse("1000")
        assert add(parse("50"), parse("50")) == parse("100")

    def test_carry_through_longer_operand(self):
        """Test carry keeps propagating past the shorter operand"""
        assert add(parse("1"), parse("99999")) == parse("100000")
        assert add(parse("99999"), parse("1")) == parse("100000")

    def test_both_negative(self):
        """Test two negatives keep the negative sign"""
        result = add(parse("-999"), parse("-1"))
        assert result == parse("-1000")
        assert result.negative is True


class TestAddOppositeSign:
    """Test addition of operands with different signs"""

    def test_canonicalizes_leading_zeros(self):
        """Test 1000 - 999 gives 1, not 0001"""
        result = add(parse("1000"), parse("-999"))
        assert result == parse("1")
        assert result.digits == (1,)
        assert result.length == 1

    def test_sign_follows_larger_magnitude(self):
        """Test the result takes the sign of the larger operand"""
        assert add(parse("-1000"), parse("999")) == parse("-1")
        assert add(parse("999"), parse("-1000")) == parse("-1")
        assert add(parse("5"), parse("-3")) == parse("2")
        assert add(parse("-5"), parse("3")) == parse("-2")

    def test_equal_length_most_significant_first(self):
        """Test equal-length magnitudes are compared from the top digit"""
        # 91 vs 19: low digits alone would pick the wrong operand
        assert add(parse("91"), parse("-19")) == parse("72")
        assert add(parse("19"), parse("-91")) == parse("-72")
        assert add(parse("-91"), parse("19")) == parse("-72")
        assert add(parse("123"), parse("-321")) == parse("-198")
        assert add(parse("321"), parse("-123")) == parse("198")

    def test_borrow_chain(self):
        """Test borrow propagating through several zero columns"""
        assert add(parse("10000"), parse("-1")) == parse("9999")
        assert add(parse("100200"), parse("-201")) == parse("99999")

    def test_equal_magnitudes_cancel(self):
        """Test x + (-x) is canonical zero"""
        result = add(parse("12345"), parse("-12345"))
        assert result == ZERO
        assert result.negative is False
        assert str(result) == "0"


class TestAddIdentity:
    """Test zero operands"""

    def test_zero_is_identity(self):
        """Test adding zero on either side returns the other value"""
        value = parse("-987")
        assert add(value, ZERO) == value
        assert add(ZERO, value) == value
        assert add(ZERO, ZERO) == ZERO

    def test_inputs_not_modified(self):
        """Test operands are unchanged after the call"""
        first, second = parse("1000"), parse("-999")
        add(first, second)
        assert first == parse("1000")
        assert second == parse("-999")


class TestSubtractAndNegate:
    """Test subtraction helpers"""

    def test_negate(self):
        """Test negation flips the sign except for zero"""
        assert negate(parse("5")) == parse("-5")
        assert negate(parse("-5")) == parse("5")
        assert negate(ZERO) == ZERO
        assert negate(ZERO).negative is False

    @pytest.mark.parametrize("first, second, expected", [
        ("1000", "999", "1"),
        ("999", "1000", "-1"),
        ("-5", "-5", "0"),
        ("-5", "5", "-10"),
        ("0", "7", "-7"),
        ("7", "0", "7"),
    ])
    def test_subtract(self, first, second, expected):
        """Test first - second"""
        assert subtract(parse(first), parse(second)) == parse(expected)
