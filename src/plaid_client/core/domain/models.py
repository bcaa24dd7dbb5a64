"""Domain models shared by several Plaid responses (Pydantic v2).

Why Pydantic here:
- Decoding is structural: each model names the fields we read and ignores
  the rest, so new fields on the API side never break existing callers.
- The same models validate, document and serialize (`model_dump`) the data.

Note:
- These models describe *what* Plaid returns, not *how* it is fetched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PlaidModel(BaseModel):
    """Base for every decoded model: unknown fields are dropped."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PlaidError(PlaidModel):
    """Error body returned by Plaid with non-2xx responses."""

    error_type: str = Field(default="", description="Broad category, e.g. 'ITEM_ERROR'.")
    error_code: str = Field(default="", description="Specific code, e.g. 'ITEM_LOGIN_REQUIRED'.")
    error_message: str = Field(default="", description="Developer-facing message.")
    display_message: str | None = Field(
        default=None,
        description="Message safe to show end users, when Plaid provides one.",
    )
    request_id: str = Field(default="")
    causes: list[dict[str, Any]] = Field(default_factory=list)


class Balances(PlaidModel):
    available: float | None = None
    current: float | None = None
    limit: float | None = None
    iso_currency_code: str | None = None
    unofficial_currency_code: str | None = None


class Account(PlaidModel):
    account_id: str = Field(..., min_length=1)
    balances: Balances = Field(default_factory=Balances)
    mask: str | None = None
    name: str = ""
    official_name: str | None = None
    type: str = ""
    subtype: str | None = None
    verification_status: str | None = None


class Item(PlaidModel):
    item_id: str = Field(..., min_length=1)
    institution_id: str | None = None
    webhook: str | None = None
    error: PlaidError | None = None
    available_products: list[str] = Field(default_factory=list)
    billed_products: list[str] = Field(default_factory=list)
    consent_expiration_time: str | None = None


class ItemStatus(PlaidModel):
    investments: dict[str, Any] | None = None
    transactions: dict[str, Any] | None = None
    last_webhook: dict[str, Any] | None = None


class Category(PlaidModel):
    category_id: str = Field(..., min_length=1)
    group: str = ""
    hierarchy: list[str] = Field(default_factory=list)


class Credential(PlaidModel):
    label: str = ""
    name: str = ""
    type: str = ""


class Institution(PlaidModel):
    institution_id: str = Field(..., min_length=1)
    name: str = ""
    products: list[str] = Field(default_factory=list)
    country_codes: list[str] = Field(default_factory=list)
    credentials: list[Credential] = Field(default_factory=list)
    has_mfa: bool | None = None
    mfa: list[str] = Field(default_factory=list)
    url: str | None = None
    primary_color: str | None = None
    logo: str | None = None
    routing_numbers: list[str] = Field(default_factory=list)
    status: dict[str, Any] | None = None


# Auth numbers


class ACHNumber(PlaidModel):
    account_id: str
    account: str = ""
    routing: str = ""
    wire_routing: str | None = None


class EFTNumber(PlaidModel):
    account_id: str
    account: str = ""
    institution: str = ""
    branch: str = ""


class InternationalNumber(PlaidModel):
    account_id: str
    iban: str = ""
    bic: str = ""


class BACSNumber(PlaidModel):
    account_id: str
    account: str = ""
    sort_code: str = ""


class AuthNumbers(PlaidModel):
    ach: list[ACHNumber] = Field(default_factory=list)
    eft: list[EFTNumber] = Field(default_factory=list)
    international: list[InternationalNumber] = Field(default_factory=list)
    bacs: list[BACSNumber] = Field(default_factory=list)


# Identity


class Address(PlaidModel):
    data: dict[str, Any] = Field(default_factory=dict)
    primary: bool | None = None


class Email(PlaidModel):
    data: str = ""
    primary: bool | None = None
    type: str = ""


class PhoneNumber(PlaidModel):
    data: str = ""
    primary: bool | None = None
    type: str = ""


class Owner(PlaidModel):
    names: list[str] = Field(default_factory=list)
    addresses: list[Address] = Field(default_factory=list)
    emails: list[Email] = Field(default_factory=list)
    phone_numbers: list[PhoneNumber] = Field(default_factory=list)


class AccountWithOwners(Account):
    owners: list[Owner] = Field(default_factory=list)


# Transactions


class Location(PlaidModel):
    address: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    lat: float | None = None
    lon: float | None = None
    store_number: str | None = None


class PaymentMeta(PlaidModel):
    by_order_of: str | None = None
    payee: str | None = None
    payer: str | None = None
    payment_method: str | None = None
    payment_processor: str | None = None
    ppd_id: str | None = None
    reason: str | None = None
    reference_number: str | None = None


class Transaction(PlaidModel):
    transaction_id: str = Field(..., min_length=1)
    account_id: str = ""
    amount: float = 0.0
    iso_currency_code: str | None = None
    unofficial_currency_code: str | None = None
    category: list[str] | None = None
    category_id: str | None = None
    date: str = ""
    authorized_date: str | None = None
    name: str = ""
    merchant_name: str | None = None
    location: Location | None = None
    payment_meta: PaymentMeta | None = None
    payment_channel: str | None = None
    pending: bool = False
    pending_transaction_id: str | None = None
    account_owner: str | None = None
    transaction_type: str | None = None
    transaction_code: str | None = None


# Investments


class Security(PlaidModel):
    security_id: str = Field(..., min_length=1)
    isin: str | None = None
    cusip: str | None = None
    sedol: str | None = None
    institution_security_id: str | None = None
    institution_id: str | None = None
    proxy_security_id: str | None = None
    name: str | None = None
    ticker_symbol: str | None = None
    is_cash_equivalent: bool | None = None
    type: str | None = None
    close_price: float | None = None
    close_price_as_of: str | None = None
    iso_currency_code: str | None = None
    unofficial_currency_code: str | None = None


class Holding(PlaidModel):
    account_id: str
    security_id: str
    institution_price: float | None = None
    institution_price_as_of: str | None = None
    institution_value: float | None = None
    cost_basis: float | None = None
    quantity: float = 0.0
    iso_currency_code: str | None = None
    unofficial_currency_code: str | None = None


class InvestmentTransaction(PlaidModel):
    investment_transaction_id: str = Field(..., min_length=1)
    account_id: str = ""
    security_id: str | None = None
    cancel_transaction_id: str | None = None
    date: str = ""
    name: str = ""
    quantity: float = 0.0
    amount: float = 0.0
    price: float | None = None
    fees: float | None = None
    type: str = ""
    subtype: str | None = None
    iso_currency_code: str | None = None
    unofficial_currency_code: str | None = None


# Income and liabilities


class IncomeStream(PlaidModel):
    confidence: float | None = None
    days: int | None = None
    monthly_income: float | None = None
    name: str = ""


class Income(PlaidModel):
    income_streams: list[IncomeStream] = Field(default_factory=list)
    last_year_income: float | None = None
    last_year_income_before_tax: float | None = None
    projected_yearly_income: float | None = None
    projected_yearly_income_before_tax: float | None = None
    max_number_of_overlapping_income_streams: int | None = None
    number_of_income_streams: int | None = None


class Liabilities(PlaidModel):
    credit: list[dict[str, Any]] | None = None
    mortgage: list[dict[str, Any]] | None = None
    student: list[dict[str, Any]] | None = None


# Payment initiation


class PaymentRecipientAddress(PlaidModel):
    street: list[str] = Field(default_factory=list)
    city: str = ""
    postal_code: str = ""
    country: str = Field(default="", description="ISO 3166-1 alpha-2 code.")


class PaymentAmount(PlaidModel):
    currency: str = Field(..., min_length=3, max_length=3)
    value: float = Field(..., ge=0)


class PaymentRecipient(PlaidModel):
    recipient_id: str = Field(..., min_length=1)
    name: str = ""
    iban: str | None = None
    address: PaymentRecipientAddress | None = None


class Payment(PlaidModel):
    payment_id: str = Field(..., min_length=1)
    payment_token: str | None = None
    reference: str = ""
    amount: PaymentAmount | None = None
    status: str = ""
    last_status_update: str | None = None
    payment_token_expiration_time: str | None = None
    recipient_id: str = ""
