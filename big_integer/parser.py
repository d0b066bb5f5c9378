"""
Parser Module

Converts decimal strings into BigInteger values.

Accepted format: optional leading '+' or '-', then one or more ASCII digits.
Leading and trailing whitespace is ignored; nothing else is allowed, not even
whitespace between the sign and the digits. Leading zeros are never
significant, so "0012", "-001" and "+000" parse as 12, -1 and 0.
"""

from .digits import digits_from_string, is_digit_char
from .integer import BigInteger
from .logging_config import get_logger

logger = get_logger("bigint.parser")

SIGN_CHARS = "+-"


class FormatError(ValueError):
    """Raised when a string is not a correctly formatted integer"""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Incorrect format ({reason}): {text!r}")


def parse(text: str) -> BigInteger:
    """
    Parse an integer string into a new BigInteger

    Args:
        text: Integer string, e.g. "  -0012 "

    Returns:
        Canonical BigInteger for the string

    Raises:
        FormatError: If the trimmed string is empty, a bare sign, or contains
            anything other than one optional leading sign and digits
    """
    if not isinstance(text, str):
        raise FormatError(repr(text), "input is not a string")

    clean = text.strip()
    if not clean:
        raise _reject(text, "empty input")

    negative = False
    body = clean
    if clean[0] in SIGN_CHARS:
        negative = clean[0] == '-'
        body = clean[1:]

    if not body:
        raise _reject(text, "sign without digits")

    for position, char in enumerate(body):
        if not is_digit_char(char):
            offset = position + len(clean) - len(body)
            raise _reject(text, f"unexpected character {char!r} at position {offset}")

    # Sign of a zero magnitude is dropped by BigInteger itself
    return BigInteger(negative=negative, digits=tuple(digits_from_string(body)))


def _reject(text: str, reason: str) -> FormatError:
    logger.debug(f"Rejected integer literal {text!r}: {reason}")
    return FormatError(text, reason)
