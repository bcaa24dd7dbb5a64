"""Library configuration.

Why here:
- Centralizes environment variables (pydantic-settings) so the client, the
  transport and the CLI read credentials and timeouts the same way.
- The per-user `.env` lets the CLI store credentials without touching the
  working directory.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from plaid_client.core.domain.environment import Environment

APP_NAME = "plaid-client"


def get_user_env_file() -> Path:
    return Path(typer.get_app_dir(APP_NAME)) / ".env"


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Set variables in the user's global `.env`; None values are skipped."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        if value is not None:
            set_key(str(env_path), key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Central configuration.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without leaking parsing
      into the client.
    - One configuration contract for the library, the transport and the CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLAID_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    environment: Environment = Field(
        default=Environment.SANDBOX,
        description="Plaid environment: sandbox, development or production.",
    )
    client_id: str | None = Field(
        default=None,
        description="Plaid client_id.",
    )
    public_key: str | None = Field(
        default=None,
        description="Plaid public_key (institution lookups, sandbox tokens).",
    )
    secret: str | None = Field(
        default=None,
        description="Plaid secret for the selected environment.",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="plaid-client/0.1 (python)",
        min_length=1,
        description="User-Agent sent with every request.",
    )
