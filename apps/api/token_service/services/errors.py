"""Error taxonomy shared by the token endpoints."""
from __future__ import annotations

from enum import Enum


class ErrorStage(str, Enum):
    PARSE = "parse"
    BUILD = "build"


class TokenRequestError(Exception):
    """A request-level failure that is reported to the client as HTTP 400."""

    stage: ErrorStage = ErrorStage.PARSE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedExpiryError(TokenRequestError):
    """Raised when the ``expiry`` query value is not an unsigned integer."""

    stage = ErrorStage.PARSE

    def __init__(self, raw_value: str, cause: str) -> None:
        super().__init__(f"failed to parse expireTime: {raw_value}, causing error: {cause}")
        self.raw_value = raw_value
        self.cause = cause


class TokenBuildError(TokenRequestError):
    """Raised when a token cannot be constructed for the request."""

    stage = ErrorStage.BUILD


class SecretUnavailableError(RuntimeError):
    """Raised when the credential bundle cannot be read from the secret store."""


class CredentialsNotConfiguredError(RuntimeError):
    """Raised when the credential bundle is missing the app id or certificate."""
