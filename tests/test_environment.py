from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import CLIENT_ID, PUBLIC_KEY, SECRET
from plaid_client.core.config import AppSettings
from plaid_client.core.domain.credentials import Credentials
from plaid_client.core.domain.environment import Environment, base_url_for
from plaid_client.core.domain.errors import InvalidConfigurationError


@pytest.mark.parametrize(
    "env,url",
    [
        (Environment.SANDBOX, "https://sandbox.plaid.com/"),
        (Environment.DEVELOPMENT, "https://development.plaid.com/"),
        (Environment.PRODUCTION, "https://production.plaid.com/"),
        ("Production", "https://production.plaid.com/"),
        (" sandbox ", "https://sandbox.plaid.com/"),
    ],
)
def test_base_url_for(env, url):
    assert base_url_for(env) == url


@pytest.mark.parametrize("env", ["staging", "", 3])
def test_unknown_environment_is_invalid_configuration(env):
    with pytest.raises(InvalidConfigurationError):
        base_url_for(env)


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        Credentials.create("qa", CLIENT_ID, PUBLIC_KEY, SECRET)


def test_credentials_are_immutable():
    creds = Credentials.create(Environment.DEVELOPMENT, CLIENT_ID, PUBLIC_KEY, SECRET)

    assert creds.base_url == "https://development.plaid.com/"
    with pytest.raises(ValidationError):
        creds.secret = "other"


def test_secret_not_in_repr():
    creds = Credentials.create(Environment.SANDBOX, CLIENT_ID, PUBLIC_KEY, SECRET)

    assert SECRET not in repr(creds)


def test_credentials_from_settings():
    settings = AppSettings(_env_file=None, environment="production", client_id=CLIENT_ID, secret=SECRET)

    creds = Credentials.from_settings(settings)

    assert creds.base_url == "https://production.plaid.com/"
    assert creds.client_id == CLIENT_ID
    assert creds.public_key == ""


def test_credentials_from_settings_requires_some_credential():
    with pytest.raises(InvalidConfigurationError):
        Credentials.from_settings(AppSettings(_env_file=None))


def test_settings_read_environment_variables(monkeypatch):
    monkeypatch.setenv("PLAID_ENVIRONMENT", "development")
    monkeypatch.setenv("PLAID_CLIENT_ID", "from-env")

    settings = AppSettings(_env_file=None)

    assert settings.environment is Environment.DEVELOPMENT
    assert settings.client_id == "from-env"


def test_settings_reject_unknown_environment():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, environment="staging")
