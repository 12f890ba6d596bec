"""Strict unsigned integer parsing for path and query values."""
from __future__ import annotations

UINT32_MASK = 0xFFFFFFFF
UINT64_MAX = 2**64 - 1


def parse_uint64(value: str) -> int:
    """Parse a base-10 unsigned 64-bit integer.

    Only ASCII digits are accepted: no sign, no whitespace, no digit
    separators. Raises ``ValueError`` with ``invalid syntax`` or
    ``value out of range`` as the message.
    """

    if not value or not (value.isascii() and value.isdigit()):
        raise ValueError("invalid syntax")
    number = int(value, 10)
    if number > UINT64_MAX:
        raise ValueError("value out of range")
    return number


def truncate_uint32(value: int) -> int:
    """Keep the low 32 bits, wrapping the way a uint32 cast does."""

    return value & UINT32_MASK
