"""Tests for the hexadecimal adapter."""
import pytest

from dollcode.core import numeral
from dollcode.core.alphabet import U64_MAX
from dollcode.core.errors import (
    EmptyInput,
    InvalidCharacter,
    InvalidHexPrefix,
    InvalidLength,
    NumericOverflow,
)
from dollcode.engine.hexadecimal import format_hex, parse_hex


class TestParseHex:
    def test_basic(self):
        assert parse_hex("0xff") == 255
        assert parse_hex("0x0") == 0
        assert parse_hex("0x2a") == 42

    def test_case_insensitive(self):
        assert parse_hex("0XAbC") == 0xABC
        assert parse_hex("0xDEADBEEF") == parse_hex("0xdeadbeef")

    def test_max(self):
        assert parse_hex("0xFFFFFFFFFFFFFFFF") == U64_MAX

    def test_leading_zeros(self):
        assert parse_hex("0x000000000000000f") == 15

    def test_errors(self):
        with pytest.raises(InvalidHexPrefix):
            parse_hex("ff")
        with pytest.raises(EmptyInput):
            parse_hex("0x")
        with pytest.raises(InvalidLength):
            parse_hex("0x10000000000000000")
        with pytest.raises(InvalidCharacter) as exc:
            parse_hex("0x12z4")
        assert exc.value.position == 4

    def test_to_dollcode(self):
        assert numeral.encode(parse_hex("0xFF")) == "▘▘▌▌▌"


class TestFormatHex:
    def test_lowercase_no_padding(self):
        assert format_hex(255) == "0xff"
        assert format_hex(0xABC) == "0xabc"
        assert format_hex(0) == "0x0"
        assert format_hex(U64_MAX) == "0xffffffffffffffff"

    def test_out_of_range(self):
        with pytest.raises(NumericOverflow):
            format_hex(U64_MAX + 1)
        with pytest.raises(NumericOverflow):
            format_hex(-1)

    def test_roundtrip(self):
        for n in (0, 1, 42, 0xDEADBEEF, U64_MAX):
            assert parse_hex(format_hex(n)) == n
