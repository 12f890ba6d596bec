"""RTC and RTM token issuance endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from ..schemas import tokens as token_schema
from ..services import params as params_service
from ..services import tokens as token_service
from ..services.credentials import Credentials
from ..services.errors import CredentialsNotConfiguredError, ErrorStage, TokenRequestError

RTC_ERROR_PREFIX = "Error Generating RTC token: "
RTM_ERROR_PREFIX = "Error Generating RTM token: "

ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"description": "Malformed parameters (`message`) or token build failure (`error`)"},
}

logger = logging.getLogger(__name__)

router = APIRouter()


def get_credentials(request: Request) -> Credentials:
    """FastAPI dependency returning the credentials loaded at startup."""

    credentials = getattr(request.app.state, "credentials", None)
    if credentials is None:
        raise CredentialsNotConfiguredError("Credentials were not loaded before serving requests")
    return credentials


def _error_response(prefix: str, exc: TokenRequestError) -> JSONResponse:
    """Render a request failure; parse errors use ``message``, build errors ``error``."""

    logger.warning("Token request rejected at %s stage: %s", exc.stage.value, exc.message)
    text = prefix + exc.message
    if exc.stage is ErrorStage.PARSE:
        body = token_schema.ParseErrorResponse(message=text)
    else:
        body = token_schema.BuildErrorResponse(error=text)
    return JSONResponse(status_code=400, content=body.model_dump())


@router.get(
    "/rtc/{channel_name}/{role}/{tokentype}/{uid}/",
    response_model=token_schema.RtcTokenResponse,
    responses=ERROR_RESPONSES,
)
async def get_rtc_token(
    channel_name: str,
    role: str,
    tokentype: str,
    uid: str,
    expiry: str | None = Query(default=None),
    credentials: Credentials = Depends(get_credentials),
):
    """Return an audio/video channel token."""

    try:
        params = params_service.parse_rtc_params(channel_name, role, tokentype, uid, expiry)
        rtc_token = token_service.build_rtc_token(credentials, params)
    except TokenRequestError as exc:
        return _error_response(RTC_ERROR_PREFIX, exc)
    return token_schema.RtcTokenResponse(rtc_token=rtc_token)


@router.get(
    "/rtm/{uid}/",
    response_model=token_schema.RtmTokenResponse,
    responses=ERROR_RESPONSES,
)
async def get_rtm_token(
    uid: str,
    expiry: str | None = Query(default=None),
    credentials: Credentials = Depends(get_credentials),
):
    """Return a messaging token."""

    try:
        params = params_service.parse_rtm_params(uid, expiry)
        rtm_token = token_service.build_rtm_token(credentials, params)
    except TokenRequestError as exc:
        return _error_response(RTM_ERROR_PREFIX, exc)
    return token_schema.RtmTokenResponse(rtm_token=rtm_token)


@router.get(
    "/rte/{channel_name}/{role}/{tokentype}/{uid}/",
    response_model=token_schema.CombinedTokenResponse,
    responses=ERROR_RESPONSES,
)
async def get_both_tokens(
    channel_name: str,
    role: str,
    tokentype: str,
    uid: str,
    expiry: str | None = Query(default=None),
    credentials: Credentials = Depends(get_credentials),
):
    """Return an audio/video token and a messaging token sharing one expiry."""

    try:
        rtc_params = params_service.parse_rtc_params(channel_name, role, tokentype, uid, expiry)
    except TokenRequestError as exc:
        return _error_response(RTC_ERROR_PREFIX, exc)
    rtm_params = params_service.RtmParams(uid=rtc_params.uid, expire_at=rtc_params.expire_at)

    rtc_token = rtm_token = None
    rtc_error: TokenRequestError | None = None
    rtm_error: TokenRequestError | None = None
    try:
        rtc_token = token_service.build_rtc_token(credentials, rtc_params)
    except TokenRequestError as exc:
        rtc_error = exc
    try:
        rtm_token = token_service.build_rtm_token(credentials, rtm_params)
    except TokenRequestError as exc:
        rtm_error = exc

    if rtc_error is not None:
        return _error_response(RTC_ERROR_PREFIX, rtc_error)
    if rtm_error is not None:
        return _error_response(RTM_ERROR_PREFIX, rtm_error)
    return token_schema.CombinedTokenResponse(rtc_token=rtc_token, rtm_token=rtm_token)
