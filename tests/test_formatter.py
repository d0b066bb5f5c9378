"""
Test suite for the formatter module
"""

import pytest

from big_integer import ZERO, BigInteger, format_integer, parse


class TestFormatInteger:
    """Test canonical rendering"""

    def test_zero(self):
        """Test zero renders as '0' with no sign"""
        assert format_integer(ZERO) == "0"
        assert format_integer(parse("-0")) == "0"
        assert format_integer(BigInteger(negative=True)) == "0"

    def test_positive_reversed_order(self):
        """Test digits render most-significant first"""
        assert format_integer(BigInteger(digits=(5, 3, 2))) == "235"

    def test_negative_prefix(self):
        """Test negative values carry a single leading minus"""
        assert format_integer(BigInteger(negative=True, digits=(1,))) == "-1"
        assert format_integer(parse("-0012")) == "-12"

    def test_interior_zeros_kept(self):
        """Test zeros inside the number are rendered"""
        assert format_integer(parse("100200300")) == "100200300"

    def test_rejects_other_types(self):
        """Test non-BigInteger input raises TypeError"""
        with pytest.raises(TypeError):
            format_integer(12)

    @pytest.mark.parametrize("text", [
        "0", "1", "-1", "10", "-10", "999999999999999999999", "-100000000000000000000",
    ])
    def test_round_trip(self, text):
        """Test parse(format(v)) == v for canonical values"""
        value = parse(text)
        assert format_integer(value) == text
        assert parse(format_integer(value)) == value
