"""Test configuration and fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from plaid_client.core.domain.credentials import Credentials
from plaid_client.core.domain.environment import Environment
from plaid_client.core.domain.result import Result, Success
from plaid_client.core.services.client import Client
from plaid_client.core.services.request_builder import ApiRequest

# ---------------------------------------------------------------------------
# Constants (shared with tests)
# ---------------------------------------------------------------------------
CLIENT_ID = "test-client-id"
PUBLIC_KEY = "test-public-key"
SECRET = "test-secret"
ACCESS_TOKEN = "access-sandbox-abc123"
SANDBOX_URL = "https://sandbox.plaid.com/"


class RecordingTransport:
    """Transport fake: records every request and replays queued results."""

    def __init__(self, *results: Result[dict[str, Any]]) -> None:
        self.requests: list[ApiRequest] = []
        self._results = list(results)

    def execute(self, request: ApiRequest) -> Result[dict[str, Any]]:
        self.requests.append(request)
        if self._results:
            return self._results.pop(0)
        return Success({})

    @property
    def last(self) -> ApiRequest:
        assert self.requests, "no request was executed"
        return self.requests[-1]


@pytest.fixture
def credentials() -> Credentials:
    return Credentials.create(Environment.SANDBOX, CLIENT_ID, PUBLIC_KEY, SECRET)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(credentials: Credentials, transport: RecordingTransport) -> Client:
    return Client.create(credentials, transport)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep PLAID_* variables and a local .env out of every test."""

    for key in ("PLAID_ENVIRONMENT", "PLAID_CLIENT_ID", "PLAID_SECRET", "PLAID_PUBLIC_KEY"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
