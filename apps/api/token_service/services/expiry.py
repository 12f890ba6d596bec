"""Relative-to-absolute expiry conversion."""
from __future__ import annotations

import time

from ..core.parsing import parse_uint64, truncate_uint32
from .errors import MalformedExpiryError


def current_timestamp() -> int:
    """Return the current UTC Unix time in whole seconds."""

    return int(time.time())


def resolve_expiry(raw_seconds: str, now: int | None = None) -> int:
    """Return ``now + raw_seconds`` as a 32-bit absolute timestamp.

    The sum wraps modulo 2**32 like the token format's timestamp field, and
    no upper bound is placed on the requested lifetime.
    """

    try:
        seconds = parse_uint64(raw_seconds)
    except ValueError as exc:
        raise MalformedExpiryError(raw_seconds, str(exc)) from exc

    if now is None:
        now = current_timestamp()
    return truncate_uint32(truncate_uint32(now) + truncate_uint32(seconds))
