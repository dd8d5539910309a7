"""Bijective base-3 numeral codec for unsigned 64-bit integers.

Digit weights are 1, 2, 3 (never 0), so every non-negative integer has
exactly one representation and there are no leading zeros:

    1 = ▖      4 = ▖▖     13 = ▖▖▖
    2 = ▘      5 = ▖▘     42 = ▖▖▖▌
    3 = ▌     12 = ▌▌    255 = ▘▘▌▌▌

Zero is the empty digit sequence. 2**64 - 1 needs 41 digits.
"""

from .alphabet import (
    BASE,
    GLYPH_TO_WEIGHT,
    MAX_NUMERIC_DIGITS,
    U64_MAX,
    WEIGHT_TO_GLYPH,
)
from .buffer import GlyphBuffer
from .errors import InvalidCharacter, NumericOverflow


def _check_u64(n) -> None:
    # bool is an int subclass; True is not a number to encode
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected an int, got {type(n).__name__}")
    if not 0 <= n <= U64_MAX:
        raise NumericOverflow(f"Value must be 0-{U64_MAX}, got {n}")


def _fill(n: int, buf: GlyphBuffer) -> None:
    """Write the digits of n into buf, least-significant first."""
    while n > 0:
        rem = n % BASE
        if rem == 0:
            buf.push(WEIGHT_TO_GLYPH[BASE])
            n = n // BASE - 1
        else:
            buf.push(WEIGHT_TO_GLYPH[rem])
            n //= BASE


def encode(n: int) -> str:
    """Encode 0 <= n <= 2**64 - 1 as a numeric dollcode string."""
    _check_u64(n)
    buf = GlyphBuffer(MAX_NUMERIC_DIGITS)
    _fill(n, buf)
    buf.reverse()
    return buf.as_string()


def encode_digits(n: int) -> tuple[int, ...]:
    """Digit weights of n, most-significant first."""
    return tuple(GLYPH_TO_WEIGHT[g] for g in encode(n))


def digit_count(n: int) -> int:
    """Number of bijective base-3 digits needed for n."""
    _check_u64(n)
    count = 0
    while n > 0:
        n = (n - 1) // BASE
        count += 1
    return count


def decode(code: str) -> int:
    """Decode a numeric dollcode string to an integer.

    The accumulator is checked after every digit so a value past 2**64 - 1
    raises NumericOverflow instead of growing without bound.
    """
    value = 0
    for i, glyph in enumerate(code):
        weight = GLYPH_TO_WEIGHT.get(glyph)
        if weight is None:
            raise InvalidCharacter(i, glyph, "not a dollcode digit")
        value = value * BASE + weight
        if value > U64_MAX:
            raise NumericOverflow(
                f"Dollcode value exceeds {U64_MAX} at digit {i}")
    return value
