"""Result unwrapping: raw JSON object -> typed response."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from plaid_client.core.domain.result import Failure, Result, Status, Success

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def unwrap(result: Result[dict[str, Any]], response_type: type[ResponseT]) -> Result[ResponseT]:
    """Decode a successful body into `response_type`.

    Failures pass through unchanged. A body that does not match the
    response model becomes a `DECODE_ERROR` failure.
    """

    if isinstance(result, Failure):
        return result

    try:
        return Success(response_type.model_validate(result.value))
    except ValidationError as exc:
        logger.warning("could not decode %s: %d error(s)", response_type.__name__, exc.error_count())
        return Failure(Status.decode_error(f"invalid {response_type.__name__}: {exc}"))
