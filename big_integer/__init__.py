"""
Big Integer Arithmetic

Arbitrary-precision signed integers held as decimal digit sequences, with
schoolbook addition, subtraction and multiplication, strict string parsing
and canonical formatting.
"""

__version__ = "1.0.0"

from .integer import ZERO, BigInteger, compare
from .parser import FormatError, parse
from .formatter import format_integer
from .adder import add, negate, subtract
from .multiplier import multiply

__all__ = [
    "BigInteger",
    "ZERO",
    "FormatError",
    "add",
    "compare",
    "format_integer",
    "multiply",
    "negate",
    "parse",
    "subtract",
]
