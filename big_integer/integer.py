"""
BigInteger Value Type

Immutable signed integer of unbounded size. The magnitude is held as a tuple
of decimal digits, least-significant first, and every instance is kept in
canonical form: no most-significant zero digits, and zero is never negative.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .digits import DIGIT_BASE, canonicalize, compare_magnitudes, validate_digit


@dataclass(frozen=True)
class BigInteger:
    """
    Immutable arbitrary-precision integer.

    Arithmetic never modifies its operands. Digits are copied into an owned
    tuple on construction, so no two instances share mutable storage.
    """
    negative: bool = False
    digits: Tuple[int, ...] = ()

    def __post_init__(self):
        # Copy on construct, then canonicalize so every instance is valid
        digits = canonicalize([validate_digit(digit) for digit in self.digits])
        object.__setattr__(self, 'digits', tuple(digits))
        object.__setattr__(self, 'negative', bool(self.negative) and bool(digits))

    @property
    def sign(self) -> bool:
        """True if negative"""
        return self.negative

    @property
    def length(self) -> int:
        """Number of significant digits; zero has none"""
        return len(self.digits)

    @classmethod
    def parse(cls, text: str) -> 'BigInteger':
        """Parse a decimal string, see parser.parse"""
        from .parser import parse
        return parse(text)

    @classmethod
    def from_int(cls, value: int) -> 'BigInteger':
        """Build from a native Python int"""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Expected int, got {type(value).__name__}")
        magnitude = abs(value)
        digits = []
        while magnitude:
            magnitude, digit = divmod(magnitude, DIGIT_BASE)
            digits.append(digit)
        return cls(negative=value < 0, digits=tuple(digits))

    def is_zero(self) -> bool:
        """Check if value is exactly zero"""
        return not self.digits

    def is_positive(self) -> bool:
        """Check if value is strictly positive"""
        return bool(self.digits) and not self.negative

    def is_negative(self) -> bool:
        """Check if value is strictly negative"""
        return self.negative

    def to_string(self) -> str:
        """Canonical decimal string, see formatter.format_integer"""
        from .formatter import format_integer
        return format_integer(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInteger('{self.to_string()}')"

    def __int__(self) -> int:
        return int(self.to_string())

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> 'BigInteger':
        from .adder import negate
        return negate(self)

    def __abs__(self) -> 'BigInteger':
        return BigInteger(negative=False, digits=self.digits)

    def __add__(self, other: Union['BigInteger', int]) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .adder import add
        return add(self, other)

    def __radd__(self, other: int) -> 'BigInteger':
        return self.__add__(other)

    def __sub__(self, other: Union['BigInteger', int]) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .adder import subtract
        return subtract(self, other)

    def __rsub__(self, other: int) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .adder import subtract
        return subtract(other, self)

    def __mul__(self, other: Union['BigInteger', int]) -> 'BigInteger':
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .multiplier import multiply
        return multiply(self, other)

    def __rmul__(self, other: int) -> 'BigInteger':
        return self.__mul__(other)

    def __lt__(self, other: Union['BigInteger', int]) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: Union['BigInteger', int]) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: Union['BigInteger', int]) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: Union['BigInteger', int]) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return compare(self, other) >= 0


ZERO = BigInteger()


def _coerce(value: object) -> Optional[BigInteger]:
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)
    return None


def compare(first: BigInteger, second: BigInteger) -> int:
    """
    Numeric three-way comparison

    Returns:
        -1 if first < second, 0 if equal, 1 if first > second
    """
    if first.negative != second.negative:
        return -1 if first.negative else 1

    result = compare_magnitudes(first.digits, second.digits)
    return -result if first.negative else result
