"""Client credentials.

One immutable value per client: the resolved base URL plus the three
secrets Plaid hands out per team.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from plaid_client.core.domain.environment import Environment, base_url_for
from plaid_client.core.domain.errors import InvalidConfigurationError

if TYPE_CHECKING:
    from plaid_client.core.config import AppSettings


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        ...,
        min_length=1,
        description="Environment base URL, always ending in '/'.",
    )
    client_id: str = Field(
        default="",
        description="Plaid client identifier.",
    )
    public_key: str = Field(
        default="",
        description="Public key used by institution lookups and sandbox token creation.",
    )
    secret: str = Field(
        default="",
        repr=False,
        description="Secret for the selected environment.",
    )

    @classmethod
    def create(
        cls,
        environment: Environment | str,
        client_id: str,
        public_key: str,
        secret: str,
    ) -> "Credentials":
        """Resolve `environment` and store the secrets. Performs no I/O."""

        return cls(
            base_url=base_url_for(environment),
            client_id=client_id,
            public_key=public_key,
            secret=secret,
        )

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "Credentials":
        if not settings.client_id and not settings.public_key:
            raise InvalidConfigurationError(
                "no credentials configured (set PLAID_CLIENT_ID/PLAID_SECRET or PLAID_PUBLIC_KEY)"
            )
        return cls.create(
            settings.environment,
            client_id=settings.client_id or "",
            public_key=settings.public_key or "",
            secret=settings.secret or "",
        )
