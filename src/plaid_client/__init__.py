"""plaid-client: typed, synchronous client for the Plaid API."""

from plaid_client.adapters.transport import HttpxTransport
from plaid_client.core.config import AppSettings
from plaid_client.core.domain.credentials import Credentials
from plaid_client.core.domain.environment import Environment, base_url_for
from plaid_client.core.domain.errors import InvalidConfigurationError, PlaidClientError, ResultError
from plaid_client.core.domain.result import Failure, Result, Status, StatusKind, Success
from plaid_client.core.interfaces.transport import Transport
from plaid_client.core.services.client import Client
from plaid_client.core.services.request_builder import ApiRequest

__version__ = "0.1.0"

__all__ = [
    "ApiRequest",
    "AppSettings",
    "Client",
    "Credentials",
    "Environment",
    "Failure",
    "HttpxTransport",
    "InvalidConfigurationError",
    "PlaidClientError",
    "Result",
    "ResultError",
    "Status",
    "StatusKind",
    "Success",
    "Transport",
    "base_url_for",
]
