"""Tests for expiry parsing and 32-bit wraparound."""
from __future__ import annotations

import pytest

from token_service.core.parsing import parse_uint64
from token_service.services.errors import ErrorStage, MalformedExpiryError
from token_service.services.expiry import resolve_expiry

NOW = 1_700_000_000


@pytest.mark.parametrize("seconds", [0, 1, 3600, 86_400 * 365])
def test_resolve_expiry_adds_seconds(seconds: int) -> None:
    assert resolve_expiry(str(seconds), NOW) == NOW + seconds


def test_resolve_expiry_wraps_at_32_bits() -> None:
    seconds = 2**32 - NOW + 10
    assert resolve_expiry(str(seconds), NOW) == 10


def test_resolve_expiry_accepts_full_uint64_range() -> None:
    seconds = 2**64 - 1
    assert resolve_expiry(str(seconds), NOW) == (NOW + seconds) % 2**32


def test_resolve_expiry_defaults_now_to_wall_clock(monkeypatch) -> None:
    from token_service.services import expiry

    monkeypatch.setattr(expiry, "current_timestamp", lambda: NOW)
    assert resolve_expiry("60") == NOW + 60


@pytest.mark.parametrize("raw", ["abc", "-5", "", " 60", "+60", "1.5", "1_000", str(2**64)])
def test_resolve_expiry_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(MalformedExpiryError) as excinfo:
        resolve_expiry(raw, NOW)

    error = excinfo.value
    assert error.stage is ErrorStage.PARSE
    assert error.raw_value == raw
    assert error.message.startswith(f"failed to parse expireTime: {raw}, causing error: ")


def test_parse_uint64_reports_range_errors() -> None:
    with pytest.raises(ValueError, match="value out of range"):
        parse_uint64(str(2**64))
    with pytest.raises(ValueError, match="invalid syntax"):
        parse_uint64("١٢")
