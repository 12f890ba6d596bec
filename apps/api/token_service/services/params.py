"""Path and query normalization for token requests."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from ..core.config import settings
from .expiry import resolve_expiry

PUBLISHER_ROLE_SEGMENT = "publisher"
ACCOUNT_TOKEN_TYPE = "userAccount"


class Role(IntEnum):
    """RTC privilege level, valued as the token builder expects."""

    PUBLISHER = 1
    SUBSCRIBER = 2


class UidKind(str, Enum):
    NUMERIC = "uid"
    ACCOUNT = "userAccount"


@dataclass(frozen=True, slots=True)
class RtcParams:
    channel: str
    uid_kind: UidKind
    uid: str
    role: Role
    expire_at: int


@dataclass(frozen=True, slots=True)
class RtmParams:
    uid: str
    expire_at: int


def parse_role(value: str | None) -> Role:
    """Map the role path segment; anything but ``publisher`` is a subscriber."""

    if value == PUBLISHER_ROLE_SEGMENT:
        return Role.PUBLISHER
    return Role.SUBSCRIBER


def parse_uid_kind(value: str | None) -> UidKind:
    """Map the tokentype path segment; anything but ``userAccount`` is numeric."""

    if value == ACCOUNT_TOKEN_TYPE:
        return UidKind.ACCOUNT
    return UidKind.NUMERIC


def parse_rtc_params(
    channel: str,
    role: str,
    tokentype: str,
    uid: str,
    expiry: str | None = None,
    *,
    now: int | None = None,
) -> RtcParams:
    """Normalize an RTC request.

    The uid is kept as a string; numeric uids are parsed when the token is
    built. Raises ``MalformedExpiryError`` for a bad ``expiry`` value.
    """

    raw_expiry = settings.default_expiry_seconds if expiry is None else expiry
    return RtcParams(
        channel=channel,
        uid_kind=parse_uid_kind(tokentype),
        uid=uid,
        role=parse_role(role),
        expire_at=resolve_expiry(raw_expiry, now),
    )


def parse_rtm_params(uid: str, expiry: str | None = None, *, now: int | None = None) -> RtmParams:
    """Normalize an RTM request."""

    raw_expiry = settings.default_expiry_seconds if expiry is None else expiry
    return RtmParams(uid=uid, expire_at=resolve_expiry(raw_expiry, now))
