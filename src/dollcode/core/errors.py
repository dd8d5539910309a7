"""Typed conversion errors.

Every error is a ValueError so plain ``except ValueError`` callers keep
working. ``kind`` is a stable identifier and ``category`` is the coarse
bucket a front end can match on ("Input limit exceeded" and so on).
"""

from __future__ import annotations

CATEGORY_LIMIT = "Input limit exceeded"
CATEGORY_CHARACTER = "Invalid character detected"
CATEGORY_SEQUENCE = "Invalid dollcode sequence"


class DollcodeError(ValueError):
    """Base class for all conversion failures."""

    kind = "dollcode_error"
    category = "Conversion error occurred"

    def fields(self) -> dict:
        """Structured detail for this error (position, limits, ...)."""
        return {}

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "category": self.category,
            "message": str(self),
            **self.fields(),
        }


class InvalidCharacter(DollcodeError):
    """A character outside the accepted set, at a 0-based position."""

    kind = "invalid_character"
    category = CATEGORY_CHARACTER

    def __init__(self, position: int, character: str = "",
                 reason: str = "not allowed", segment: int | None = None):
        self.position = position
        self.character = character
        self.reason = reason
        self.segment = segment
        msg = f"Invalid character {character!r} at position {position}: {reason}"
        if segment is not None:
            msg += f" (segment {segment})"
        super().__init__(msg)

    def fields(self) -> dict:
        return {
            "position": self.position,
            "character": self.character,
            "reason": self.reason,
            "segment": self.segment,
        }


class InvalidLength(DollcodeError):
    """Input longer than the limit for its mode."""

    kind = "invalid_length"
    category = CATEGORY_LIMIT

    def __init__(self, limit: int, actual: int):
        self.limit = limit
        self.actual = actual
        super().__init__(f"Input length {actual} exceeds limit of {limit}")

    def fields(self) -> dict:
        return {"limit": self.limit, "actual": self.actual}


class BufferOverflow(DollcodeError):
    """A write would exceed a fixed-capacity buffer."""

    kind = "buffer_overflow"
    category = CATEGORY_LIMIT

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Output buffer capacity of {limit} exceeded")

    def fields(self) -> dict:
        return {"limit": self.limit}


class NumericOverflow(DollcodeError):
    kind = "numeric_overflow"
    category = CATEGORY_LIMIT

    def __init__(self, message: str = "Value exceeds the unsigned 64-bit range"):
        super().__init__(message)


class InvalidHexPrefix(DollcodeError):
    kind = "invalid_hex_prefix"
    category = CATEGORY_SEQUENCE

    def __init__(self):
        super().__init__("Hex input must start with 0x")


class EmptyInput(DollcodeError):
    kind = "empty_input"
    category = CATEGORY_SEQUENCE

    def __init__(self, message: str = "Input is empty"):
        super().__init__(message)
