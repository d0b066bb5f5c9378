"""
Digit Sequence Module

Helpers for the internal magnitude representation: a sequence of single
decimal digits stored least-significant first. The canonical sequence never
ends in a zero digit; the empty sequence is the magnitude zero.
"""

from typing import List, Sequence

DIGIT_BASE = 10
ASCII_DIGITS = "0123456789"


def is_digit_char(char: str) -> bool:
    """Check if a character is one of the ASCII digits 0-9"""
    return len(char) == 1 and char in ASCII_DIGITS


def validate_digit(value: object) -> int:
    """
    Validate a single stored digit

    Args:
        value: Candidate digit

    Returns:
        The digit as an int

    Raises:
        ValueError: If value is not an int in [0, 9]
    """
    # bool is an int subclass but never a digit
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Digit must be an int, got {type(value).__name__}")
    if value < 0 or value >= DIGIT_BASE:
        raise ValueError(f"Digit out of range [0, 9]: {value}")
    return value


def canonicalize(digits: Sequence[int]) -> List[int]:
    """
    Strip most-significant zero digits

    Returns a new list; the input is never modified. A sequence made only
    of zeros collapses to the empty list (zero).

    Examples:
        [1, 0, 0, 0] -> [1]     (0001 read most-significant first)
        [0, 0] -> []
    """
    end = len(digits)
    while end > 0 and digits[end - 1] == 0:
        end -= 1
    return list(digits[:end])


def compare_magnitudes(first: Sequence[int], second: Sequence[int]) -> int:
    """
    Compare two canonical magnitudes

    Longer sequences are larger. Equal lengths are compared digit by digit
    starting from the most-significant end.

    Returns:
        -1 if first < second, 0 if equal, 1 if first > second
    """
    if len(first) != len(second):
        return 1 if len(first) > len(second) else -1

    for index in range(len(first) - 1, -1, -1):
        if first[index] != second[index]:
            return 1 if first[index] > second[index] else -1
    return 0


def digits_from_string(text: str) -> List[int]:
    """Convert a most-significant-first digit string to a canonical sequence"""
    return canonicalize([ord(char) - ord("0") for char in reversed(text)])


def digits_to_string(digits: Sequence[int]) -> str:
    """Render a sequence most-significant first; the empty sequence is '0'"""
    if not digits:
        return "0"
    return "".join(ASCII_DIGITS[digit] for digit in reversed(digits))
