"""Tests for the fixed-capacity glyph buffer."""
import pytest

from dollcode.core.buffer import GlyphBuffer
from dollcode.core.errors import BufferOverflow


class TestGlyphBuffer:
    def test_starts_empty(self):
        buf = GlyphBuffer(4)
        assert len(buf) == 0
        assert buf.remaining == 4
        assert buf.as_string() == ""

    def test_push(self):
        buf = GlyphBuffer(2)
        buf.push("▖")
        buf.push("▌")
        assert buf.as_string() == "▖▌"
        assert list(buf) == ["▖", "▌"]

    def test_push_past_capacity_raises(self):
        buf = GlyphBuffer(1)
        buf.push("▖")
        with pytest.raises(BufferOverflow) as exc:
            buf.push("▘")
        assert exc.value.limit == 1
        assert buf.as_string() == "▖"

    def test_extend_is_all_or_nothing(self):
        buf = GlyphBuffer(3)
        buf.push("▖")
        with pytest.raises(BufferOverflow):
            buf.extend("▘▘▘")
        assert buf.as_string() == "▖"
        buf.extend("▘▘")
        assert buf.as_string() == "▖▘▘"

    def test_zero_capacity(self):
        buf = GlyphBuffer(0)
        with pytest.raises(BufferOverflow):
            buf.push("▖")

    def test_negative_capacity_raises(self):
        with pytest.raises(ValueError):
            GlyphBuffer(-1)

    def test_reverse_in_place(self):
        buf = GlyphBuffer(5)
        buf.extend("▖▘▌")
        buf.reverse()
        assert buf.as_string() == "▌▘▖"

    def test_reverse_ignores_unused_slots(self):
        buf = GlyphBuffer(10)
        buf.extend("▖▘")
        buf.reverse()
        assert buf.as_string() == "▘▖"
        assert len(buf) == 2

    def test_clear(self):
        buf = GlyphBuffer(2)
        buf.extend("▖▖")
        buf.clear()
        assert len(buf) == 0
        buf.push("▌")
        assert buf.as_string() == "▌"

    def test_utf8_size(self):
        buf = GlyphBuffer(4)
        buf.extend("▖▘\u200d")
        assert buf.utf8_size() == 9
