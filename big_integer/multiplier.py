"""
Multiplier Module

Schoolbook long multiplication. Each digit of the first operand multiplies
the whole second operand, the partial product is shifted by the digit's
position and accumulated into a running total through the adder.
"""

from typing import List, Sequence

from .adder import add
from .digits import DIGIT_BASE
from .integer import ZERO, BigInteger
from .logging_config import get_logger

logger = get_logger("bigint.multiplier")


def multiply(first: BigInteger, second: BigInteger) -> BigInteger:
    """
    Multiply two integers of any sign

    Neither operand is modified.

    Args:
        first: First integer
        second: Second integer

    Returns:
        New canonical BigInteger equal to first * second; negative only when
        exactly one operand is negative and the product is non-zero
    """
    if first.is_zero() or second.is_zero():
        return ZERO

    logger.debug(f"Multiplying {first.length}-digit by {second.length}-digit integer")

    total = ZERO
    for position, digit in enumerate(first.digits):
        partial = _shift(_multiply_by_digit(second.digits, digit), position)
        total = add(total, BigInteger(digits=tuple(partial)))

    return BigInteger(negative=first.negative != second.negative, digits=total.digits)


def _multiply_by_digit(digits: Sequence[int], multiplier: int) -> List[int]:
    result = []
    carry = 0
    for digit in digits:
        value = digit * multiplier + carry
        result.append(value % DIGIT_BASE)
        carry = value // DIGIT_BASE

    if carry:
        result.append(carry)
    return result


def _shift(digits: List[int], places: int) -> List[int]:
    """Multiply by 10**places by prepending zeros at the least-significant end"""
    return [0] * places + digits
