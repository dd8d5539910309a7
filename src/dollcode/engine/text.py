"""Text codec: printable ASCII <-> delimiter-segmented dollcode.

Each character becomes one segment: the bijective base-3 form of its ASCII
code (3-5 digits, since 32-126 spans ▌▖▘ to ▖▖▖▘▌) followed by a zero-width
joiner. Segments keep the input order.

    "hi" -> ▌▘▖▘<ZWJ>▌▘▖▌<ZWJ>
"""

from __future__ import annotations

import logging

from ..core import numeral
from ..core.alphabet import (
    DELIMITER,
    GLYPH_BYTES,
    MAX_SEGMENT_DIGITS,
    MAX_TEXT_LENGTH,
    MAX_TEXT_OUTPUT_BYTES,
    PRINTABLE_MAX,
    PRINTABLE_MIN,
)
from ..core.buffer import GlyphBuffer
from ..core.errors import BufferOverflow, InvalidCharacter, InvalidLength
from .validate import check_text, check_text_dollcode

logger = logging.getLogger(__name__)

_OUTPUT_SLOTS = MAX_TEXT_OUTPUT_BYTES // GLYPH_BYTES


def encode_char(char: str) -> str:
    """One segment (digits + delimiter) for a single printable character."""
    if len(char) != 1:
        raise ValueError(f"Expected one character, got {len(char)}")
    check_text(char)
    return numeral.encode(ord(char)) + DELIMITER


def segments(text: str) -> list[str]:
    """The delimiter-terminated segments of text, in order."""
    check_text(text)
    return [numeral.encode(ord(c)) + DELIMITER for c in text]


def encode(text: str) -> str:
    """Encode printable ASCII (at most 100 characters) as text-form dollcode."""
    check_text(text)
    out = GlyphBuffer(_OUTPUT_SLOTS)
    for char in text:
        segment = numeral.encode(ord(char)) + DELIMITER
        if out.utf8_size() + len(segment) * GLYPH_BYTES > MAX_TEXT_OUTPUT_BYTES:
            raise BufferOverflow(MAX_TEXT_OUTPUT_BYTES)
        out.extend(segment)
    logger.debug("encoded %d chars into %d bytes", len(text), out.utf8_size())
    return out.as_string()


def decode(code: str) -> str:
    """Decode text-form dollcode back to ASCII.

    Empty segments (a trailing delimiter, or two delimiters in a row) are
    skipped, so empty or all-delimiter input decodes to "".
    """
    try:
        check_text_dollcode(code)
    except InvalidCharacter as e:
        raise InvalidCharacter(e.position, e.character, e.reason,
                               segment=_segment_at(code, e.position)) from e
    parts = _split(code)
    if len(parts) > MAX_TEXT_LENGTH:
        raise InvalidLength(MAX_TEXT_LENGTH, len(parts))
    out = GlyphBuffer(MAX_TEXT_LENGTH)
    for index, (start, part) in enumerate(parts):
        out.push(_decode_segment(part, start, index))
    logger.debug("decoded %d segments", len(parts))
    return out.as_string()


def _split(code: str) -> list[tuple[int, str]]:
    """Non-empty segments with the input index of their first glyph."""
    parts = []
    start = 0
    for part in code.split(DELIMITER):
        if part:
            parts.append((start, part))
        start += len(part) + 1
    return parts


def _segment_at(code: str, position: int) -> int:
    """Index of the non-empty segment holding the glyph at position."""
    return sum(1 for start, _ in _split(code) if start <= position) - 1


def _decode_segment(part: str, start: int, index: int) -> str:
    if len(part) > MAX_SEGMENT_DIGITS:
        raise InvalidCharacter(start + MAX_SEGMENT_DIGITS,
                               part[MAX_SEGMENT_DIGITS],
                               "segment too long", segment=index)
    value = numeral.decode(part)
    if not PRINTABLE_MIN <= value <= PRINTABLE_MAX:
        raise InvalidCharacter(start, part[0],
                               "decoded value out of printable range",
                               segment=index)
    return chr(value)


def table() -> list[tuple[int, str, str]]:
    """(code, character, digits) for every printable ASCII character."""
    return [(code, chr(code), numeral.encode(code))
            for code in range(PRINTABLE_MIN, PRINTABLE_MAX + 1)]
