"""Input validation shared by every codec.

Checks only inspect their input. Each raises on the first failure it finds,
carrying the 0-based index of the offending character, and returns None
otherwise. Codecs call these before doing any transform work.

Verifies:
1. Non-empty input where the mode needs it
2. Length bound per mode
3. Character set per mode (decimal / hex / printable ASCII / dollcode)
"""

from __future__ import annotations

import logging
from typing import Callable

from ..core.alphabet import (
    DELIMITER,
    GLYPH_TO_WEIGHT,
    HEX_PREFIXES,
    MAX_DECIMAL_LENGTH,
    MAX_HEX_LENGTH,
    MAX_NUMERIC_DIGITS,
    MAX_TEXT_LENGTH,
    MAX_TEXT_OUTPUT_BYTES,
    PRINTABLE_MAX,
    PRINTABLE_MIN,
)
from ..core.errors import (
    EmptyInput,
    InvalidCharacter,
    InvalidHexPrefix,
    InvalidLength,
)

logger = logging.getLogger(__name__)

DECIMAL_DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
NUMERIC_DOLLCODE = frozenset(GLYPH_TO_WEIGHT)
TEXT_DOLLCODE = NUMERIC_DOLLCODE | {DELIMITER}


def scan(value: str, allowed: frozenset | Callable[[str], bool],
         reason: str = "not allowed", offset: int = 0) -> None:
    """Raise InvalidCharacter for the first character not in ``allowed``.

    ``offset`` is added to the reported position when ``value`` is a slice
    of the caller's input.
    """
    test = allowed if callable(allowed) else allowed.__contains__
    for i, char in enumerate(value):
        if not test(char):
            logger.debug("rejected %r at %d: %s", char, offset + i, reason)
            raise InvalidCharacter(offset + i, char, reason)


def require_non_empty(value: str) -> None:
    if not value:
        raise EmptyInput()


def check_length(value: str, limit: int) -> None:
    if len(value) > limit:
        raise InvalidLength(limit, len(value))


def check_decimal(value: str) -> None:
    """Decimal digits only, 1-20 characters."""
    require_non_empty(value)
    check_length(value, MAX_DECIMAL_LENGTH)
    scan(value, DECIMAL_DIGITS, "not a decimal digit")


def check_hex(value: str) -> None:
    """0x/0X prefix followed by 1-16 hex digits."""
    require_non_empty(value)
    if not value.startswith(HEX_PREFIXES):
        raise InvalidHexPrefix()
    check_length(value, MAX_HEX_LENGTH)
    digits = value[2:]
    if not digits:
        raise EmptyInput("No hex digits after 0x prefix")
    scan(digits, HEX_DIGITS, "not a hex digit", offset=2)


def _printable_reason(char: str) -> str:
    if ord(char) > 0x7F:
        return "outside ASCII"
    return "not printable"


def check_text(value: str) -> None:
    """Printable ASCII (32-126), at most 100 characters."""
    check_length(value, MAX_TEXT_LENGTH)
    for i, char in enumerate(value):
        if not PRINTABLE_MIN <= ord(char) <= PRINTABLE_MAX:
            reason = _printable_reason(char)
            logger.debug("rejected %r at %d: %s", char, i, reason)
            raise InvalidCharacter(i, char, reason)


def check_numeric_dollcode(value: str) -> None:
    """Digit glyphs only, at most 41 of them."""
    check_length(value, MAX_NUMERIC_DIGITS)
    scan(value, NUMERIC_DOLLCODE, "not a dollcode digit")


def check_text_dollcode(value: str) -> None:
    """Digit glyphs and delimiters only, at most 1800 UTF-8 bytes."""
    size = len(value.encode("utf-8", "surrogatepass"))
    if size > MAX_TEXT_OUTPUT_BYTES:
        raise InvalidLength(MAX_TEXT_OUTPUT_BYTES, size)
    scan(value, TEXT_DOLLCODE, "not a dollcode glyph")
