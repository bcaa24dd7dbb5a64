"""Typed responses, one per endpoint family.

Every response carries Plaid's `request_id`. Fields that identify the
shape of a response are required, so a success body that does not match
the expected endpoint fails decoding instead of yielding an empty model.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from plaid_client.core.domain.models import (
    Account,
    AccountWithOwners,
    AuthNumbers,
    Category,
    Holding,
    Income,
    Institution,
    InvestmentTransaction,
    Item,
    ItemStatus,
    Liabilities,
    Payment,
    PaymentRecipient,
    PlaidModel,
    Security,
    Transaction,
)


class PlaidResponse(PlaidModel):
    request_id: str = Field(default="", description="Plaid request identifier, useful for support.")


# Accounts


class GetBalancesResponse(PlaidResponse):
    accounts: list[Account]
    item: Item


class GetAccountsResponse(PlaidResponse):
    accounts: list[Account]
    item: Item


# Assets


class GetAssetReportResponse(PlaidResponse):
    report: dict[str, Any]
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class CreateAuditCopyTokenResponse(PlaidResponse):
    audit_copy_token: str


class RemoveAssetReportResponse(PlaidResponse):
    removed: bool


# Auth


class GetAuthResponse(PlaidResponse):
    accounts: list[Account]
    numbers: AuthNumbers
    item: Item


# Categories


class GetCategoriesResponse(PlaidResponse):
    categories: list[Category]


# Investments


class GetHoldingsResponse(PlaidResponse):
    accounts: list[Account]
    holdings: list[Holding]
    securities: list[Security] = Field(default_factory=list)
    item: Item | None = None


class GetInvestmentTransactionsResponse(PlaidResponse):
    accounts: list[Account] = Field(default_factory=list)
    investment_transactions: list[InvestmentTransaction]
    securities: list[Security] = Field(default_factory=list)
    total_investment_transactions: int = 0
    item: Item | None = None


# Identity and income


class GetIdentityResponse(PlaidResponse):
    accounts: list[AccountWithOwners]
    item: Item


class GetIncomeResponse(PlaidResponse):
    income: Income
    item: Item


# Institutions


class GetInstitutionByIdResponse(PlaidResponse):
    institution: Institution


class GetInstitutionsResponse(PlaidResponse):
    institutions: list[Institution]
    total: int = 0


class SearchInstitutionsResponse(PlaidResponse):
    institutions: list[Institution]


# Items


class GetItemResponse(PlaidResponse):
    item: Item
    status: ItemStatus | None = None


class RemoveItemResponse(PlaidResponse):
    removed: bool = True


class UpdateItemWebhookResponse(PlaidResponse):
    item: Item


class InvalidateAccessTokenResponse(PlaidResponse):
    new_access_token: str


class UpdateAccessTokenVersionResponse(PlaidResponse):
    access_token: str
    item_id: str


class CreatePublicTokenResponse(PlaidResponse):
    public_token: str
    expiration: str | None = None


class ExchangePublicTokenResponse(PlaidResponse):
    access_token: str
    item_id: str


# Liabilities


class GetLiabilitiesResponse(PlaidResponse):
    accounts: list[Account]
    liabilities: Liabilities
    item: Item


# Payment initiation


class CreatePaymentRecipientResponse(PlaidResponse):
    recipient_id: str


class GetPaymentRecipientResponse(PaymentRecipient, PlaidResponse):
    pass


class ListPaymentRecipientsResponse(PlaidResponse):
    recipients: list[PaymentRecipient]


class CreatePaymentResponse(PlaidResponse):
    payment_id: str
    status: str = ""


class CreatePaymentTokenResponse(PlaidResponse):
    payment_token: str
    payment_token_expiration_time: str | None = None


class GetPaymentResponse(Payment, PlaidResponse):
    pass


class ListPaymentsResponse(PlaidResponse):
    payments: list[Payment]
    next_cursor: str | None = None


# Processors


class CreateProcessorTokenResponse(PlaidResponse):
    processor_token: str


class CreateStripeTokenResponse(PlaidResponse):
    stripe_bank_account_token: str


# Sandbox


class CreateSandboxPublicTokenResponse(PlaidResponse):
    public_token: str


class ResetSandboxItemResponse(PlaidResponse):
    reset_login: bool


# Transactions


class GetTransactionsResponse(PlaidResponse):
    accounts: list[Account] = Field(default_factory=list)
    transactions: list[Transaction]
    total_transactions: int = 0
    item: Item | None = None
