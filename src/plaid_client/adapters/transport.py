"""Default transport: one JSON POST per request over httpx.

Maps the outcomes of a call onto result values:
- network or timeout error -> TRANSPORT_ERROR
- non-2xx response         -> API_ERROR (with the decoded Plaid error body)
- 2xx, body not an object  -> DECODE_ERROR
- 2xx JSON object          -> Success(dict)
"""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from plaid_client.adapters.http_client import build_client
from plaid_client.core.config import AppSettings
from plaid_client.core.domain.models import PlaidError
from plaid_client.core.domain.result import Failure, Result, Status, Success
from plaid_client.core.interfaces.transport import Transport
from plaid_client.core.services.request_builder import ApiRequest

logger = logging.getLogger(__name__)


def _parse_error(response: httpx.Response) -> Status:
    fallback = f"HTTP {response.status_code} {response.reason_phrase}".strip()
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return Status.api_error(fallback, http_status=response.status_code)

    if not isinstance(body, dict):
        return Status.api_error(fallback, http_status=response.status_code)

    try:
        error = PlaidError.model_validate(body)
    except ValidationError:
        return Status.api_error(fallback, http_status=response.status_code)

    message = error.error_message or fallback
    if error.error_code:
        message = f"{error.error_code}: {message}"
    return Status.api_error(message, error=error, http_status=response.status_code)


class HttpxTransport(Transport):
    """Executes requests with a short-lived `httpx.Client` per call."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        # None: AppSettings is read on each call, never at construction.
        self._settings = settings

    def execute(self, request: ApiRequest) -> Result[dict[str, Any]]:
        try:
            settings = self._settings or AppSettings()
        except ValidationError as exc:
            return Failure(Status.transport_error(f"invalid transport settings: {exc}"))

        try:
            with build_client(settings) as client:
                response = client.post(request.url, json=request.payload)
        except httpx.HTTPError as exc:
            logger.warning("request to %s failed: %s", request.url, exc)
            return Failure(Status.transport_error(f"{type(exc).__name__}: {exc}"))

        if not response.is_success:
            status = _parse_error(response)
            logger.info("%s returned %s", request.url, status)
            return Failure(status)

        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            return Failure(Status.decode_error(f"response is not valid JSON: {exc}"))
        if not isinstance(body, dict):
            return Failure(Status.decode_error(f"expected a JSON object, got {type(body).__name__}"))
        return Success(body)
