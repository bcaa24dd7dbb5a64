"""Request assembly.

The builder is a pure function of the credentials and the payload: it joins
the endpoint path onto the environment base URL and serializes the payload
model. Nothing here touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from plaid_client.core.domain.credentials import Credentials
from plaid_client.core.domain.requests import RequestPayload


@dataclass(frozen=True)
class ApiRequest:
    """One request, built per call and discarded after execution."""

    url: str
    payload: dict[str, Any] = field(default_factory=dict)


def join_url(credentials: Credentials, path: str) -> str:
    return credentials.base_url + path


def build_request(credentials: Credentials, path: str, payload: RequestPayload) -> ApiRequest:
    return ApiRequest(url=join_url(credentials, path), payload=payload.to_payload())
