"""Transport contract.

Why Protocol:
- The client depends on a structural contract, not on httpx, so tests can
  hand in a recording fake and callers can plug their own HTTP stack.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from plaid_client.core.domain.result import Result
from plaid_client.core.services.request_builder import ApiRequest


@runtime_checkable
class Transport(Protocol):
    """Executes one built request.

    Rules:
    - Blocking; returns once the response is read or the call failed.
    - Returns `Success` with the decoded JSON object, or `Failure` with a
      `TRANSPORT_ERROR`, `API_ERROR` or `DECODE_ERROR` status. Never raises
      for those conditions and never retries.
    """

    def execute(self, request: ApiRequest) -> Result[dict[str, Any]]:
        ...
