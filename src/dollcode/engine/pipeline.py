"""Conversion entry points.

Four direct conversions (decimal, hex, text, dollcode) plus convert(),
which sanitizes raw front-end input, classifies it once into an InputMode
and dispatches to the matching codec.

Usage:
    convert_decimal("42")          # "▖▖▖▌"
    convert_dollcode("▖▖▖▌")       # "42"
    str(convert("0xff"))           # "▘▘▌▌▌"
    pack_response("hey :]")        # msgpack envelope; codec errors become status "error"
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum

import msgpack

from ..core import numeral
from ..core.alphabet import DELIMITER, HEX_PREFIXES, is_dollcode_char
from ..core.errors import DollcodeError, EmptyInput
from . import text as text_codec
from .hexadecimal import format_hex, parse_hex
from .validate import check_decimal, check_numeric_dollcode, require_non_empty

logger = logging.getLogger(__name__)

# Line breaks, tabs and invisible spaces stripped from raw input.
# U+200D is the text-mode delimiter and is kept.
_STRIP_RE = re.compile(
    r"[\n\r\t\u00a0\u2000-\u200c\u200e-\u200f\u2028-\u202f\ufeff]"
)


class InputMode(Enum):
    DECIMAL = "decimal"
    HEX = "hex"
    TEXT = "text"
    DOLLCODE_NUMERIC = "dollcode_numeric"
    DOLLCODE_TEXT = "dollcode_text"


@dataclass(frozen=True)
class Conversion:
    """Result of convert()."""
    mode: InputMode
    input: str
    output: str
    value: int | None = None  # the integer, for numeric modes

    def __str__(self) -> str:
        if self.mode is InputMode.DOLLCODE_NUMERIC:
            return f"d:{self.value},h:{format_hex(self.value)}"
        return self.output


# ---- Direct conversions ----

def convert_decimal(value: str) -> str:
    """Decimal string -> numeric dollcode."""
    check_decimal(value)
    n = int(value)
    return numeral.encode(n)


def convert_hex(value: str) -> str:
    """``0x`` hex string -> numeric dollcode."""
    return numeral.encode(parse_hex(value))


def convert_text(value: str) -> str:
    """Printable ASCII -> text-form dollcode."""
    require_non_empty(value)
    return text_codec.encode(value)


def convert_dollcode(value: str) -> str:
    """Dollcode -> decimal string (numeric form) or ASCII (text form)."""
    require_non_empty(value)
    if DELIMITER in value:
        return text_codec.decode(value)
    return str(_decode_numeric(value))


def _decode_numeric(value: str) -> int:
    check_numeric_dollcode(value)
    return numeral.decode(value)


# ---- Front-end boundary ----

def sanitize(value: str) -> str:
    """Drop line breaks, tabs and invisible spaces from raw input."""
    return _STRIP_RE.sub("", value)


def classify(value: str) -> InputMode:
    """Decide the input mode once, before any codec runs."""
    if value and is_dollcode_char(value[0]):
        if DELIMITER in value:
            return InputMode.DOLLCODE_TEXT
        return InputMode.DOLLCODE_NUMERIC
    if value.startswith(HEX_PREFIXES):
        return InputMode.HEX
    if value and value.isascii() and value.isdigit():
        return InputMode.DECIMAL
    return InputMode.TEXT


def convert(value: str) -> Conversion:
    """Sanitize, classify and convert one raw input value."""
    cleaned = sanitize(value)
    if not cleaned.strip():
        raise EmptyInput()
    mode = classify(cleaned)
    logger.debug("classified %d chars as %s", len(cleaned), mode.value)

    if mode is InputMode.DECIMAL:
        check_decimal(cleaned)
        n = int(cleaned)
        return Conversion(mode, cleaned, numeral.encode(n), n)
    if mode is InputMode.HEX:
        n = parse_hex(cleaned)
        return Conversion(mode, cleaned, numeral.encode(n), n)
    if mode is InputMode.DOLLCODE_NUMERIC:
        n = _decode_numeric(cleaned)
        return Conversion(mode, cleaned, str(n), n)
    if mode is InputMode.DOLLCODE_TEXT:
        return Conversion(mode, cleaned, text_codec.decode(cleaned))
    return Conversion(mode, cleaned, text_codec.encode(cleaned))


# ---- Response envelope ----

def respond(value: str) -> dict:
    """convert() as a status dict; errors become ``status: error``."""
    try:
        result = convert(value)
    except DollcodeError as e:
        logger.debug("conversion failed: %s", e)
        return {"status": "error", **e.to_dict()}
    return {
        "status": "ok",
        "mode": result.mode.value,
        "output": str(result),
        "value": result.value,
    }


def pack_response(value: str) -> bytes:
    """respond() encoded with msgpack."""
    return msgpack.packb(respond(value), use_bin_type=True)


def unpack_response(data: bytes) -> dict:
    return msgpack.unpackb(data, raw=False)
