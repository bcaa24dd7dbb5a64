"""Request payloads and caller-facing options.

Payload models mirror the JSON bodies Plaid expects. They are built by the
client from credentials plus caller arguments and serialized with
`to_payload()`; unset optional fields (None) are left out of the body.

Options models are the public knobs of the `*_with_options` methods.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from plaid_client.core.domain.models import PaymentAmount, PaymentRecipientAddress


class Options(BaseModel):
    model_config = ConfigDict(extra="forbid")


class AccountIdsOptions(Options):
    account_ids: list[str] = Field(
        default_factory=list,
        description="Restrict the response to these accounts (all when empty).",
    )


class InstitutionByIdOptions(Options):
    include_optional_metadata: bool | None = None
    include_status: bool | None = None


class InstitutionsOptions(Options):
    products: list[str] | None = None
    country_codes: list[str] | None = None
    include_optional_metadata: bool | None = None


class SearchInstitutionsOptions(Options):
    country_codes: list[str] | None = None
    include_optional_metadata: bool | None = None


class InvestmentTransactionsOptions(Options):
    start_date: str | None = Field(default=None, description="YYYY-MM-DD")
    end_date: str | None = Field(default=None, description="YYYY-MM-DD")
    count: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)
    account_ids: list[str] = Field(default_factory=list)


class TransactionsOptions(Options):
    start_date: str = Field(default="", description="YYYY-MM-DD, required.")
    end_date: str = Field(default="", description="YYYY-MM-DD, required.")
    count: int | None = Field(default=None, ge=0)
    offset: int | None = Field(default=None, ge=0)
    account_ids: list[str] = Field(default_factory=list)


class ListPaymentsOptions(Options):
    count: int | None = Field(default=None, ge=0)
    cursor: str | None = None


# Payload models


class RequestPayload(BaseModel):
    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class EmptyRequest(RequestPayload):
    """Body for endpoints that take no parameters (e.g. categories)."""


class SecretAuthRequest(RequestPayload):
    client_id: str
    secret: str


class PublicKeyAuthRequest(RequestPayload):
    public_key: str


class AccessTokenRequest(SecretAuthRequest):
    access_token: str


class AccountFilteredRequest(AccessTokenRequest):
    """Shared by balances, accounts, auth, holdings and liabilities."""

    options: AccountIdsOptions | None = None


class AssetReportRequest(SecretAuthRequest):
    asset_report_token: str


class CreateAuditCopyRequest(AssetReportRequest):
    auditor_id: str


class InstitutionByIdRequest(PublicKeyAuthRequest):
    institution_id: str
    options: InstitutionByIdOptions | None = None


class InstitutionsRequest(SecretAuthRequest):
    count: int
    offset: int
    options: InstitutionsOptions | None = None


class SearchInstitutionsRequest(PublicKeyAuthRequest):
    query: str
    products: list[str] | None = None
    options: SearchInstitutionsOptions | None = None


class InvestmentTransactionsRequestOptions(RequestPayload):
    count: int | None = None
    offset: int | None = None
    account_ids: list[str] | None = None


class InvestmentTransactionsRequest(AccessTokenRequest):
    start_date: str | None = None
    end_date: str | None = None
    options: InvestmentTransactionsRequestOptions | None = None


class UpdateItemWebhookRequest(AccessTokenRequest):
    webhook: str


class UpdateAccessTokenVersionRequest(SecretAuthRequest):
    access_token_v1: str


class ExchangePublicTokenRequest(SecretAuthRequest):
    public_token: str


class CreatePaymentRecipientRequest(SecretAuthRequest):
    name: str
    iban: str | None = None
    address: PaymentRecipientAddress | None = None


class PaymentRecipientRequest(SecretAuthRequest):
    recipient_id: str


class CreatePaymentRequest(SecretAuthRequest):
    recipient_id: str
    reference: str
    amount: PaymentAmount


class PaymentRequest(SecretAuthRequest):
    payment_id: str


class ListPaymentsRequest(SecretAuthRequest):
    count: int | None = None
    cursor: str | None = None


class ProcessorTokenRequest(AccessTokenRequest):
    """Shared by the Apex, Dwolla, Ocrolus and Stripe token endpoints."""

    account_id: str


class SandboxPublicTokenRequest(PublicKeyAuthRequest):
    institution_id: str
    initial_products: list[str]


class TransactionsRequestOptions(RequestPayload):
    count: int | None = None
    offset: int | None = None
    account_ids: list[str] | None = None


class TransactionsRequest(AccessTokenRequest):
    start_date: str
    end_date: str
    options: TransactionsRequestOptions
