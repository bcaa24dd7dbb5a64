"""Deployment environments for the Plaid API.

Each environment maps to one base URL. Keeping the table here lets the
credentials, the config layer and the CLI share a single source of truth.
"""

from __future__ import annotations

from enum import Enum

from plaid_client.core.domain.errors import InvalidConfigurationError


class Environment(str, Enum):
    """Supported Plaid deployment environments."""

    SANDBOX = "sandbox"
    DEVELOPMENT = "development"
    PRODUCTION = "production"

    @classmethod
    def default(cls) -> "Environment":
        return cls.SANDBOX

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.value.capitalize()


_BASE_URLS: dict[Environment, str] = {
    Environment.SANDBOX: "https://sandbox.plaid.com/",
    Environment.DEVELOPMENT: "https://development.plaid.com/",
    Environment.PRODUCTION: "https://production.plaid.com/",
}


def base_url_for(environment: Environment | str) -> str:
    """Return the base URL (with trailing slash) for `environment`.

    Accepts the enum or its string value, case-insensitive. Anything else
    raises `InvalidConfigurationError`.
    """

    try:
        env = Environment(environment.strip().lower() if isinstance(environment, str) else environment)
    except ValueError as exc:
        raise InvalidConfigurationError(f"invalid environment setting: {environment!r}") from exc

    return _BASE_URLS[env]
