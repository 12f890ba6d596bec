"""Credential provisioning from AWS Secrets Manager.

The app id and certificate are fetched once before the server starts
accepting requests and are read-only for the lifetime of the process.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..core.config import settings
from .errors import CredentialsNotConfiguredError, SecretUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AgoraSecrets:
    app_id: str
    app_certificate: str
    base_url: str = ""


@dataclass(frozen=True, slots=True)
class Credentials:
    app_id: str
    app_certificate: str

    def __repr__(self) -> str:
        return f"Credentials(app_id={self.app_id!r}, app_certificate='***')"


def _secrets_client(region_name: str | None = None) -> Any:
    return boto3.client("secretsmanager", region_name=region_name or settings.aws_region)


def fetch_secrets(secret_name: str, *, client: Any | None = None) -> AgoraSecrets:
    """Read and decode the named secret bundle."""

    try:
        sm_client = client or _secrets_client()
        output = sm_client.get_secret_value(SecretId=secret_name)
    except (BotoCoreError, ClientError) as exc:
        raise SecretUnavailableError(f"unable to fetch secret: {exc}") from exc

    secret_string = output.get("SecretString")
    if not secret_string:
        raise SecretUnavailableError(f"unable to parse secret: {secret_name} has no SecretString")

    try:
        payload = json.loads(secret_string)
    except json.JSONDecodeError as exc:
        raise SecretUnavailableError(f"unable to parse secret: {exc}") from exc
    if not isinstance(payload, dict):
        raise SecretUnavailableError("unable to parse secret: expected a JSON object")

    return AgoraSecrets(
        app_id=str(payload.get("APP_ID") or ""),
        app_certificate=str(payload.get("APP_CERTIFICATE") or ""),
        base_url=str(payload.get("BASE_URL") or ""),
    )


def load_credentials(secret_name: str | None = None, *, client: Any | None = None) -> Credentials:
    """Return validated credentials, preferring a local override when configured."""

    if settings.agora_app_id and settings.agora_app_certificate:
        logger.info("Using Agora credentials from local environment")
        credentials = Credentials(settings.agora_app_id, settings.agora_app_certificate)
    else:
        name = secret_name or settings.secret_name
        logger.info("Loading Agora credentials from secret %s", name)
        secrets = fetch_secrets(name, client=client)
        credentials = Credentials(secrets.app_id, secrets.app_certificate)

    if not credentials.app_id or not credentials.app_certificate:
        raise CredentialsNotConfiguredError(
            "Secrets not properly configured, check AWS Secrets Manager"
        )
    return credentials
