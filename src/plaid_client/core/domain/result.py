"""Result values returned by every client operation.

Why a result type instead of exceptions:
- Every call ends in exactly one of `Success` or `Failure`, so callers
  must look at the outcome before touching the payload.
- Validation, transport, API and decode failures stay distinguishable
  through `StatusKind` without a hierarchy of exceptions to catch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, TypeVar, Union

from plaid_client.core.domain.errors import ResultError
from plaid_client.core.domain.models import PlaidError

T = TypeVar("T")


class StatusKind(str, Enum):
    MISSING_INFO = "missing_info"
    TRANSPORT_ERROR = "transport_error"
    API_ERROR = "api_error"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True)
class Status:
    """Why an operation failed.

    `error` and `http_status` are only set for `API_ERROR`.
    """

    kind: StatusKind
    message: str
    error: PlaidError | None = None
    http_status: int | None = None

    @classmethod
    def missing_info(cls, message: str) -> "Status":
        return cls(kind=StatusKind.MISSING_INFO, message=message)

    @classmethod
    def transport_error(cls, message: str) -> "Status":
        return cls(kind=StatusKind.TRANSPORT_ERROR, message=message)

    @classmethod
    def api_error(
        cls,
        message: str,
        *,
        error: PlaidError | None = None,
        http_status: int | None = None,
    ) -> "Status":
        return cls(kind=StatusKind.API_ERROR, message=message, error=error, http_status=http_status)

    @classmethod
    def decode_error(cls, message: str) -> "Status":
        return cls(kind=StatusKind.DECODE_ERROR, message=message)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    ok = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    status: Status

    ok = False

    def unwrap(self) -> NoReturn:
        """Raise `ResultError`; for scripts that prefer exceptions."""

        raise ResultError(self.status)


Result = Union[Success[T], Failure]


def missing(message: str) -> Failure:
    """Shorthand for a `MISSING_INFO` failure."""

    return Failure(Status.missing_info(message))
