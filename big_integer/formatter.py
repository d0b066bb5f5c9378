"""
Formatter Module

Renders BigInteger values as canonical decimal strings: "0" for zero,
otherwise the minimal digit string with a leading '-' when negative.
"""

from .digits import digits_to_string
from .integer import BigInteger


def format_integer(value: BigInteger) -> str:
    """
    Render a BigInteger as a canonical decimal string

    Args:
        value: Integer to render

    Returns:
        Decimal string, most-significant digit first
    """
    if not isinstance(value, BigInteger):
        raise TypeError(f"Expected BigInteger, got {type(value).__name__}")

    if value.is_zero():
        return "0"

    text = digits_to_string(value.digits)
    return f"-{text}" if value.negative else text
