"""Shared fixtures for the token service tests."""
from __future__ import annotations

import pytest

from token_service.main import app
from token_service.routers.tokens import get_credentials
from token_service.services import tokens
from token_service.services.credentials import Credentials

APP_ID = "970CA35de60c44645bbae8a215061b33"
APP_CERTIFICATE = "5CFd2fd1755d40ecb72977518be15d3b"


class RecordingBuilder:
    """Stand-in for the external token builders that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.fail_with: Exception | None = None

    def _record(self, name: str, *args) -> str:
        self.calls.append((name, *args))
        if self.fail_with is not None:
            raise self.fail_with
        return f"{name}-token"


class FakeRtcBuilder(RecordingBuilder):
    def buildTokenWithUid(self, *args) -> str:
        return self._record("uid", *args)

    def buildTokenWithAccount(self, *args) -> str:
        return self._record("account", *args)


class FakeRtmBuilder(RecordingBuilder):
    def buildToken(self, *args) -> str:
        return self._record("rtm", *args)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(app_id=APP_ID, app_certificate=APP_CERTIFICATE)


@pytest.fixture
def rtc_builder(monkeypatch) -> FakeRtcBuilder:
    builder = FakeRtcBuilder()
    monkeypatch.setattr(tokens, "RtcTokenBuilder", builder)
    return builder


@pytest.fixture
def rtm_builder(monkeypatch) -> FakeRtmBuilder:
    builder = FakeRtmBuilder()
    monkeypatch.setattr(tokens, "RtmTokenBuilder", builder)
    return builder


@pytest.fixture
def override_credentials(credentials):
    app.dependency_overrides[get_credentials] = lambda: credentials
    yield credentials
    app.dependency_overrides.pop(get_credentials, None)
