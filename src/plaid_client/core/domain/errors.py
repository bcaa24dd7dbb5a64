"""Exceptions raised by the library.

Per-call failures are returned as `Failure` values, never raised. The
exceptions below cover the two places where raising is the contract:
constructing a client with a bad configuration, and explicitly unwrapping
a failed result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from plaid_client.core.domain.result import Status


class PlaidClientError(Exception):
    """Base class for every exception raised by plaid-client."""


class InvalidConfigurationError(PlaidClientError, ValueError):
    """Bad environment or credentials detected at construction time."""


class ResultError(PlaidClientError):
    """Raised by `Failure.unwrap()`; carries the failing `Status`."""

    def __init__(self, status: "Status") -> None:
        super().__init__(f"{status.kind.value}: {status.message}")
        self.status = status
