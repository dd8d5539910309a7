"""Dollcode digit alphabet and size limits.

Three box-drawing glyphs stand for the bijective base-3 digit weights 1-3.
There is no zero digit. Text-mode segments are terminated by a zero-width
joiner.
"""

# Digit glyphs in weight order: ▖ = 1, ▘ = 2, ▌ = 3
DIGITS = "▖▘▌"
BASE = len(DIGITS)  # 3

# Segment terminator for text mode (ZERO WIDTH JOINER)
DELIMITER = "\u200d"

# Reverse lookup: glyph -> weight (1-based)
GLYPH_TO_WEIGHT = {g: i + 1 for i, g in enumerate(DIGITS)}
WEIGHT_TO_GLYPH = {i + 1: g for i, g in enumerate(DIGITS)}

# Largest unsigned 64-bit value
U64_MAX = (1 << 64) - 1

# Numeric form: 41 bijective base-3 digits cover the whole u64 range
MAX_NUMERIC_DIGITS = 41

# Decimal and hex input bounds
MAX_DECIMAL_LENGTH = 20
HEX_PREFIXES = ("0x", "0X")
MAX_HEX_DIGITS = 16
MAX_HEX_LENGTH = MAX_HEX_DIGITS + 2  # 18

# Text mode: printable ASCII only
PRINTABLE_MIN = 32    # space
PRINTABLE_MAX = 126   # tilde
MAX_TEXT_LENGTH = 100

# 32 = ▌▖▘ (3 digits), 126 = ▖▖▖▘▌ (5 digits)
MIN_SEGMENT_DIGITS = 3
MAX_SEGMENT_DIGITS = 5

# Every glyph (and the delimiter) is 3 bytes in UTF-8
GLYPH_BYTES = 3
MAX_SEGMENT_BYTES = (MAX_SEGMENT_DIGITS + 1) * GLYPH_BYTES       # 18
MAX_TEXT_OUTPUT_BYTES = MAX_TEXT_LENGTH * MAX_SEGMENT_BYTES      # 1800


def glyph_for(weight: int) -> str:
    """Return the glyph for a digit weight 1-3."""
    glyph = WEIGHT_TO_GLYPH.get(weight)
    if glyph is None:
        raise ValueError(f"Digit weight must be 1-{BASE}, got {weight!r}")
    return glyph


def weight_of(glyph: str) -> int:
    """Return the digit weight 1-3 of a glyph."""
    weight = GLYPH_TO_WEIGHT.get(glyph)
    if weight is None:
        raise ValueError(f"Not a dollcode digit: {glyph!r}")
    return weight


def is_digit_glyph(char: str) -> bool:
    return char in GLYPH_TO_WEIGHT


def is_dollcode_char(char: str) -> bool:
    """True for a digit glyph or the text-mode delimiter."""
    return char in GLYPH_TO_WEIGHT or char == DELIMITER
