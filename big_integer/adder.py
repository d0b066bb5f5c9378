"""
Adder Module

Signed addition of BigInteger values using schoolbook carry and borrow
propagation. Subtraction is addition of the negated second operand.

Same-sign operands add their magnitudes and keep the common sign. Operands
of opposite sign subtract the smaller magnitude from the larger and take the
sign of the larger; equal magnitudes cancel to zero.
"""

from typing import List, Sequence

from .digits import DIGIT_BASE, canonicalize, compare_magnitudes
from .integer import ZERO, BigInteger


def add(first: BigInteger, second: BigInteger) -> BigInteger:
    """
    Add two integers of any sign

    Neither operand is modified.

    Args:
        first: First integer
        second: Second integer

    Returns:
        New canonical BigInteger equal to first + second
    """
    # Zero is the additive identity
    if first.is_zero():
        return second
    if second.is_zero():
        return first

    if first.negative == second.negative:
        digits = _add_magnitudes(first.digits, second.digits)
        return BigInteger(negative=first.negative, digits=tuple(digits))

    order = compare_magnitudes(first.digits, second.digits)
    if order == 0:
        return ZERO

    larger, smaller = (first, second) if order > 0 else (second, first)
    digits = _subtract_magnitudes(larger.digits, smaller.digits)
    return BigInteger(negative=larger.negative, digits=tuple(digits))


def subtract(first: BigInteger, second: BigInteger) -> BigInteger:
    """Return first - second as a new BigInteger"""
    return add(first, negate(second))


def negate(value: BigInteger) -> BigInteger:
    """Return a new BigInteger with the opposite sign; zero stays zero"""
    return BigInteger(negative=not value.negative, digits=value.digits)


def _add_magnitudes(first: Sequence[int], second: Sequence[int]) -> List[int]:
    result = []
    carry = 0
    for index in range(max(len(first), len(second))):
        column = carry
        if index < len(first):
            column += first[index]
        if index < len(second):
            column += second[index]

        carry = 0
        if column >= DIGIT_BASE:
            column -= DIGIT_BASE
            carry = 1
        result.append(column)

    if carry:
        result.append(carry)
    return result


def _subtract_magnitudes(larger: Sequence[int], smaller: Sequence[int]) -> List[int]:
    """larger - smaller, requires |larger| > |smaller|"""
    result = []
    borrow = 0
    for index in range(len(larger)):
        column = larger[index] - borrow
        if index < len(smaller):
            column -= smaller[index]

        borrow = 0
        if column < 0:
            column += DIGIT_BASE
            borrow = 1
        result.append(column)

    # e.g. 1000 - 999 leaves [1, 0, 0, 0]
    return canonicalize(result)
