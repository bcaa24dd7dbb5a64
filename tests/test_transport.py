"""HttpxTransport against mocked HTTP (respx)."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from conftest import ACCESS_TOKEN, CLIENT_ID, SECRET
from plaid_client.adapters.transport import HttpxTransport
from plaid_client.core.config import AppSettings
from plaid_client.core.domain.credentials import Credentials
from plaid_client.core.domain.environment import Environment
from plaid_client.core.domain.result import Failure, StatusKind, Success
from plaid_client.core.services.client import Client
from plaid_client.core.services.request_builder import ApiRequest

URL = "https://sandbox.plaid.com/item/get"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, user_agent="plaid-client-tests", http_timeout_seconds=5)


@pytest.fixture
def http_transport(settings: AppSettings) -> HttpxTransport:
    return HttpxTransport(settings)


@respx.mock
def test_success_returns_json_object(http_transport):
    route = respx.post(URL).mock(return_value=httpx.Response(200, json={"item": {"item_id": "i-1"}}))

    result = http_transport.execute(ApiRequest(url=URL, payload={"access_token": "t"}))

    assert isinstance(result, Success)
    assert result.value == {"item": {"item_id": "i-1"}}
    sent = route.calls.last.request
    assert json.loads(sent.content) == {"access_token": "t"}
    assert sent.headers["content-type"] == "application/json"
    assert sent.headers["user-agent"] == "plaid-client-tests"


@respx.mock
def test_api_error_carries_plaid_error(http_transport):
    body = {
        "error_type": "ITEM_ERROR",
        "error_code": "ITEM_LOGIN_REQUIRED",
        "error_message": "the login details of this item have changed",
        "display_message": "Please log in again.",
        "request_id": "req-42",
    }
    respx.post(URL).mock(return_value=httpx.Response(400, json=body))

    result = http_transport.execute(ApiRequest(url=URL, payload={}))

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.API_ERROR
    assert result.status.http_status == 400
    assert result.status.error is not None
    assert result.status.error.error_code == "ITEM_LOGIN_REQUIRED"
    assert result.status.error.request_id == "req-42"
    assert result.status.message == "ITEM_LOGIN_REQUIRED: the login details of this item have changed"


@respx.mock
def test_api_error_without_json_body(http_transport):
    respx.post(URL).mock(return_value=httpx.Response(502, text="<html>bad gateway</html>"))

    result = http_transport.execute(ApiRequest(url=URL, payload={}))

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.API_ERROR
    assert result.status.http_status == 502
    assert result.status.error is None
    assert "502" in result.status.message


@respx.mock
def test_network_error_is_transport_error(http_transport):
    respx.post(URL).mock(side_effect=httpx.ConnectError("connection refused"))

    result = http_transport.execute(ApiRequest(url=URL, payload={}))

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.TRANSPORT_ERROR
    assert "connection refused" in result.status.message


@respx.mock
def test_timeout_is_transport_error(http_transport):
    respx.post(URL).mock(side_effect=httpx.ReadTimeout("timed out"))

    result = http_transport.execute(ApiRequest(url=URL, payload={}))

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.TRANSPORT_ERROR


@respx.mock
def test_success_with_invalid_json_is_decode_error(http_transport):
    respx.post(URL).mock(return_value=httpx.Response(200, text="not json"))

    result = http_transport.execute(ApiRequest(url=URL, payload={}))

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.DECODE_ERROR


@respx.mock
def test_success_with_non_object_is_decode_error(http_transport):
    respx.post(URL).mock(return_value=httpx.Response(200, json=[1, 2, 3]))

    result = http_transport.execute(ApiRequest(url=URL, payload={}))

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.DECODE_ERROR


@respx.mock
def test_client_end_to_end(http_transport):
    route = respx.post("https://sandbox.plaid.com/item/public_token/exchange").mock(
        return_value=httpx.Response(200, json={"access_token": ACCESS_TOKEN, "item_id": "item-1", "request_id": "r"})
    )
    credentials = Credentials.create(Environment.SANDBOX, CLIENT_ID, "", SECRET)
    client = Client.create(credentials, http_transport)

    result = client.exchange_public_token("public-sandbox-123")

    assert isinstance(result, Success)
    assert result.value.access_token == ACCESS_TOKEN
    assert json.loads(route.calls.last.request.content) == {
        "client_id": CLIENT_ID,
        "secret": SECRET,
        "public_token": "public-sandbox-123",
    }


@respx.mock(assert_all_called=False)
def test_validation_failure_makes_no_http_call(http_transport):
    route = respx.post(URL)
    credentials = Credentials.create(Environment.SANDBOX, CLIENT_ID, "", SECRET)

    result = Client.create(credentials, http_transport).get_item("")

    assert isinstance(result, Failure)
    assert not route.called


def test_default_transport_ignores_bad_settings_until_called(monkeypatch, tmp_path):
    monkeypatch.setenv("PLAID_ENVIRONMENT", "staging")
    (tmp_path / ".env").write_text("PLAID_HTTP_TIMEOUT_SECONDS=-1\n", encoding="utf-8")
    credentials = Credentials.create(Environment.SANDBOX, CLIENT_ID, "", SECRET)

    client = Client.create(credentials)

    assert client.credentials.base_url == "https://sandbox.plaid.com/"


@respx.mock(assert_all_called=False)
def test_bad_settings_fail_the_call_as_transport_error(monkeypatch, tmp_path):
    route = respx.post(URL)
    (tmp_path / ".env").write_text("PLAID_HTTP_TIMEOUT_SECONDS=-1\n", encoding="utf-8")

    result = HttpxTransport().execute(ApiRequest(url=URL, payload={}))

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.TRANSPORT_ERROR
    assert "invalid transport settings" in result.status.message
    assert not route.called
