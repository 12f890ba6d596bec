"""Data contracts for token endpoints."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PingResponse(BaseModel):
    message: str = "pong"


class RtcTokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rtc_token: str = Field(..., alias="rtcToken", description="Signed audio/video channel token")


class RtmTokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rtm_token: str = Field(..., alias="rtmToken", description="Signed messaging token")


class CombinedTokenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rtc_token: str = Field(..., alias="rtcToken")
    rtm_token: str = Field(..., alias="rtmToken")


class ParseErrorResponse(BaseModel):
    message: str = Field(..., description="Why the request parameters were rejected")


class BuildErrorResponse(BaseModel):
    error: str = Field(..., description="Why the token could not be built")
