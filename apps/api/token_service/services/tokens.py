"""Token construction dispatch.

Chooses between the numeric-uid, user-account, and messaging builders and
wraps any builder failure as ``TokenBuildError``.
"""
from __future__ import annotations

from agora_token_builder import RtcTokenBuilder, RtmTokenBuilder

from ..core.parsing import parse_uint64, truncate_uint32
from .credentials import Credentials
from .errors import TokenBuildError
from .params import RtcParams, RtmParams, UidKind

# The messaging builder exposes a single role.
RTM_USER_ROLE = 1


def build_rtc_token(credentials: Credentials, params: RtcParams) -> str:
    """Return a signed audio/video token for ``params``."""

    if params.uid_kind is UidKind.ACCOUNT:
        try:
            return RtcTokenBuilder.buildTokenWithAccount(
                credentials.app_id,
                credentials.app_certificate,
                params.channel,
                params.uid,
                int(params.role),
                params.expire_at,
            )
        except Exception as exc:  # noqa: BLE001
            raise TokenBuildError(str(exc)) from exc

    try:
        uid = parse_uint64(params.uid)
    except ValueError as exc:
        raise TokenBuildError(f"failed to parse uidStr: {params.uid}: {exc}") from exc

    try:
        return RtcTokenBuilder.buildTokenWithUid(
            credentials.app_id,
            credentials.app_certificate,
            params.channel,
            truncate_uint32(uid),
            int(params.role),
            params.expire_at,
        )
    except Exception as exc:  # noqa: BLE001
        raise TokenBuildError(str(exc)) from exc


def build_rtm_token(credentials: Credentials, params: RtmParams) -> str:
    """Return a signed messaging token for ``params``."""

    try:
        return RtmTokenBuilder.buildToken(
            credentials.app_id,
            credentials.app_certificate,
            params.uid,
            RTM_USER_ROLE,
            params.expire_at,
        )
    except Exception as exc:  # noqa: BLE001
        raise TokenBuildError(str(exc)) from exc
