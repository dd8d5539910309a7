"""Hexadecimal adapter: ``0x``-prefixed strings <-> u64 integers.

Conversion to dollcode is parse_hex() followed by numeral.encode().
"""

from ..core.alphabet import U64_MAX
from ..core.errors import NumericOverflow
from .validate import check_hex

# Hex digit -> value, both cases
_HEX_VALUES = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


def parse_hex(text: str) -> int:
    """Parse ``0x``/``0X`` plus 1-16 hex digits into an integer."""
    check_hex(text)
    value = 0
    for char in text[2:]:
        value = value * 16 + _HEX_VALUES[char]
        if value > U64_MAX:
            raise NumericOverflow()
    return value


def format_hex(value: int) -> str:
    """Lowercase hex with a ``0x`` prefix and no padding."""
    if not 0 <= value <= U64_MAX:
        raise NumericOverflow(f"Value must be 0-{U64_MAX}, got {value}")
    return f"0x{value:x}"
