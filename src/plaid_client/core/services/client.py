"""Plaid API client.

Every public method follows the same sequence:
1. validate required arguments (empty string -> `MISSING_INFO`, no request
   is built and the transport is never called);
2. build the payload from the credentials and the caller's arguments;
3. execute it through the transport and decode the body into the method's
   response model.

Plain methods fill default options and delegate to their `*_with_options`
counterpart.
"""

from __future__ import annotations

import logging
from typing import Sequence, TypeVar

from pydantic import BaseModel

from plaid_client.adapters.transport import HttpxTransport
from plaid_client.core.config import AppSettings
from plaid_client.core.domain.credentials import Credentials
from plaid_client.core.domain.models import PaymentAmount, PaymentRecipientAddress
from plaid_client.core.domain.requests import (
    AccessTokenRequest,
    AccountFilteredRequest,
    AccountIdsOptions,
    AssetReportRequest,
    CreateAuditCopyRequest,
    CreatePaymentRecipientRequest,
    CreatePaymentRequest,
    EmptyRequest,
    ExchangePublicTokenRequest,
    InstitutionByIdOptions,
    InstitutionByIdRequest,
    InstitutionsOptions,
    InstitutionsRequest,
    InvestmentTransactionsOptions,
    InvestmentTransactionsRequest,
    InvestmentTransactionsRequestOptions,
    ListPaymentsOptions,
    ListPaymentsRequest,
    PaymentRecipientRequest,
    PaymentRequest,
    ProcessorTokenRequest,
    RequestPayload,
    SandboxPublicTokenRequest,
    SearchInstitutionsOptions,
    SearchInstitutionsRequest,
    SecretAuthRequest,
    TransactionsOptions,
    TransactionsRequest,
    TransactionsRequestOptions,
    UpdateAccessTokenVersionRequest,
    UpdateItemWebhookRequest,
)
from plaid_client.core.domain.responses import (
    CreateAuditCopyTokenResponse,
    CreatePaymentRecipientResponse,
    CreatePaymentResponse,
    CreatePaymentTokenResponse,
    CreateProcessorTokenResponse,
    CreatePublicTokenResponse,
    CreateSandboxPublicTokenResponse,
    CreateStripeTokenResponse,
    ExchangePublicTokenResponse,
    GetAccountsResponse,
    GetAssetReportResponse,
    GetAuthResponse,
    GetBalancesResponse,
    GetCategoriesResponse,
    GetHoldingsResponse,
    GetIdentityResponse,
    GetIncomeResponse,
    GetInstitutionByIdResponse,
    GetInstitutionsResponse,
    GetInvestmentTransactionsResponse,
    GetItemResponse,
    GetLiabilitiesResponse,
    GetPaymentRecipientResponse,
    GetPaymentResponse,
    GetTransactionsResponse,
    InvalidateAccessTokenResponse,
    ListPaymentRecipientsResponse,
    ListPaymentsResponse,
    RemoveAssetReportResponse,
    RemoveItemResponse,
    ResetSandboxItemResponse,
    SearchInstitutionsResponse,
    UpdateAccessTokenVersionResponse,
    UpdateItemWebhookResponse,
)
from plaid_client.core.domain.result import Failure, Result, missing
from plaid_client.core.interfaces.transport import Transport
from plaid_client.core.services.request_builder import build_request, join_url
from plaid_client.core.services.unwrap import unwrap

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

MISSING_ACCESS_TOKEN = "missing access token"

DEFAULT_INSTITUTIONS_COUNT = 50
DEFAULT_TRANSACTIONS_COUNT = 100

APEX_TOKEN_PATH = "processor/apex/processor_token/create"
DWOLLA_TOKEN_PATH = "processor/dwolla/processor_token/create"
OCROLUS_TOKEN_PATH = "processor/ocrolus/processor_token/create"
STRIPE_TOKEN_PATH = "processor/stripe/bank_account_token/create"


def _account_filter(options: AccountIdsOptions | None) -> AccountIdsOptions | None:
    if options is None or not options.account_ids:
        return None
    return AccountIdsOptions(account_ids=list(options.account_ids))


class Client:
    """Synchronous Plaid client.

    Holds one immutable `Credentials` value and a transport; no other state,
    so a single instance can be shared across threads.
    """

    def __init__(self, credentials: Credentials, transport: Transport | None = None) -> None:
        self._credentials = credentials
        if transport is None:
            transport = HttpxTransport()
        self._transport = transport

    @classmethod
    def create(cls, credentials: Credentials, transport: Transport | None = None) -> "Client":
        return cls(credentials, transport)

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None, transport: Transport | None = None) -> "Client":
        """Build credentials and the default transport from `AppSettings`."""

        settings = settings or AppSettings()
        if transport is None:
            transport = HttpxTransport(settings)
        return cls(Credentials.from_settings(settings), transport)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def url_for(self, path: str) -> str:
        return join_url(self._credentials, path)

    # Pipeline helpers

    def _secret_auth(self) -> dict[str, str]:
        return {"client_id": self._credentials.client_id, "secret": self._credentials.secret}

    def _call(self, path: str, payload: RequestPayload, response_type: type[ResponseT]) -> Result[ResponseT]:
        request = build_request(self._credentials, path, payload)
        logger.debug("POST %s", path)
        result = unwrap(self._transport.execute(request), response_type)
        if isinstance(result, Failure):
            logger.debug("%s failed: %s", path, result.status)
        return result

    def _access_token_call(
        self,
        path: str,
        access_token: str,
        response_type: type[ResponseT],
    ) -> Result[ResponseT]:
        if access_token == "":
            return missing(MISSING_ACCESS_TOKEN)
        payload = AccessTokenRequest(**self._secret_auth(), access_token=access_token)
        return self._call(path, payload, response_type)

    def _account_filtered_call(
        self,
        path: str,
        access_token: str,
        options: AccountIdsOptions | None,
        response_type: type[ResponseT],
    ) -> Result[ResponseT]:
        if access_token == "":
            return missing(MISSING_ACCESS_TOKEN)
        payload = AccountFilteredRequest(
            **self._secret_auth(),
            access_token=access_token,
            options=_account_filter(options),
        )
        return self._call(path, payload, response_type)

    # Accounts

    def get_balances_with_options(
        self, access_token: str, options: AccountIdsOptions | None
    ) -> Result[GetBalancesResponse]:
        """Real-time balances for the item's accounts."""

        return self._account_filtered_call("accounts/balance/get", access_token, options, GetBalancesResponse)

    def get_balances(self, access_token: str) -> Result[GetBalancesResponse]:
        return self.get_balances_with_options(access_token, AccountIdsOptions())

    def get_accounts_with_options(
        self, access_token: str, options: AccountIdsOptions | None
    ) -> Result[GetAccountsResponse]:
        return self._account_filtered_call("accounts/get", access_token, options, GetAccountsResponse)

    def get_accounts(self, access_token: str) -> Result[GetAccountsResponse]:
        return self.get_accounts_with_options(access_token, AccountIdsOptions())

    # Assets

    def get_asset_report(self, asset_report_token: str) -> Result[GetAssetReportResponse]:
        if asset_report_token == "":
            return missing("missing asset report token")
        payload = AssetReportRequest(**self._secret_auth(), asset_report_token=asset_report_token)
        return self._call("asset_report/get", payload, GetAssetReportResponse)

    def create_audit_copy(self, asset_report_token: str, auditor_id: str) -> Result[CreateAuditCopyTokenResponse]:
        if asset_report_token == "":
            return missing("missing asset report token")
        if auditor_id == "":
            return missing("missing auditor id")
        payload = CreateAuditCopyRequest(
            **self._secret_auth(),
            asset_report_token=asset_report_token,
            auditor_id=auditor_id,
        )
        return self._call("asset_report/audit_copy/create", payload, CreateAuditCopyTokenResponse)

    def remove_asset_report(self, asset_report_token: str) -> Result[RemoveAssetReportResponse]:
        if asset_report_token == "":
            return missing("missing asset report token")
        payload = AssetReportRequest(**self._secret_auth(), asset_report_token=asset_report_token)
        return self._call("asset_report/remove", payload, RemoveAssetReportResponse)

    # Auth

    def get_auth_with_options(self, access_token: str, options: AccountIdsOptions | None) -> Result[GetAuthResponse]:
        """Account and routing numbers for the item's checking/savings accounts."""

        return self._account_filtered_call("auth/get", access_token, options, GetAuthResponse)

    def get_auth(self, access_token: str) -> Result[GetAuthResponse]:
        return self.get_auth_with_options(access_token, AccountIdsOptions())

    # Categories

    def get_categories(self) -> Result[GetCategoriesResponse]:
        return self._call("categories/get", EmptyRequest(), GetCategoriesResponse)

    # Holdings

    def get_holdings_with_options(
        self, access_token: str, options: AccountIdsOptions | None
    ) -> Result[GetHoldingsResponse]:
        return self._account_filtered_call("investments/holdings/get", access_token, options, GetHoldingsResponse)

    def get_holdings(self, access_token: str) -> Result[GetHoldingsResponse]:
        return self.get_holdings_with_options(access_token, AccountIdsOptions())

    # Identity and income

    def get_identity(self, access_token: str) -> Result[GetIdentityResponse]:
        return self._access_token_call("identity/get", access_token, GetIdentityResponse)

    def get_income(self, access_token: str) -> Result[GetIncomeResponse]:
        return self._access_token_call("income/get", access_token, GetIncomeResponse)

    # Institutions

    def get_institution_by_id_with_options(
        self, institution_id: str, options: InstitutionByIdOptions | None
    ) -> Result[GetInstitutionByIdResponse]:
        if institution_id == "":
            return missing("missing id")
        payload = InstitutionByIdRequest(
            public_key=self._credentials.public_key,
            institution_id=institution_id,
            options=options,
        )
        return self._call("institutions/get_by_id", payload, GetInstitutionByIdResponse)

    def get_institution_by_id(self, institution_id: str) -> Result[GetInstitutionByIdResponse]:
        return self.get_institution_by_id_with_options(institution_id, InstitutionByIdOptions())

    def get_institutions_with_options(
        self, count: int, offset: int, options: InstitutionsOptions | None
    ) -> Result[GetInstitutionsResponse]:
        """List supported institutions; a `count` of 0 means the default page size (50)."""

        if count == 0:
            count = DEFAULT_INSTITUTIONS_COUNT
        payload = InstitutionsRequest(**self._secret_auth(), count=count, offset=offset, options=options)
        return self._call("institutions/get", payload, GetInstitutionsResponse)

    def get_institutions(self, count: int = 0, offset: int = 0) -> Result[GetInstitutionsResponse]:
        return self.get_institutions_with_options(count, offset, InstitutionsOptions())

    def search_institutions_with_options(
        self,
        query: str,
        products: Sequence[str],
        options: SearchInstitutionsOptions | None,
    ) -> Result[SearchInstitutionsResponse]:
        if query == "":
            return missing("missing query")
        payload = SearchInstitutionsRequest(
            public_key=self._credentials.public_key,
            query=query,
            products=list(products) or None,
            options=options,
        )
        return self._call("institutions/search", payload, SearchInstitutionsResponse)

    def search_institutions(self, query: str, products: Sequence[str] = ()) -> Result[SearchInstitutionsResponse]:
        return self.search_institutions_with_options(query, products, SearchInstitutionsOptions())

    # Investment transactions

    def get_investment_transactions_with_options(
        self, access_token: str, options: InvestmentTransactionsOptions | None
    ) -> Result[GetInvestmentTransactionsResponse]:
        if access_token == "":
            return missing(MISSING_ACCESS_TOKEN)
        options = options or InvestmentTransactionsOptions()
        payload = InvestmentTransactionsRequest(
            **self._secret_auth(),
            access_token=access_token,
            start_date=options.start_date,
            end_date=options.end_date,
            options=InvestmentTransactionsRequestOptions(
                count=options.count,
                offset=options.offset,
                account_ids=list(options.account_ids) or None,
            ),
        )
        return self._call("investments/transactions/get", payload, GetInvestmentTransactionsResponse)

    def get_investment_transactions(self, access_token: str) -> Result[GetInvestmentTransactionsResponse]:
        return self.get_investment_transactions_with_options(access_token, InvestmentTransactionsOptions())

    # Items

    def get_item(self, access_token: str) -> Result[GetItemResponse]:
        return self._access_token_call("item/get", access_token, GetItemResponse)

    def remove_item(self, access_token: str) -> Result[RemoveItemResponse]:
        return self._access_token_call("item/remove", access_token, RemoveItemResponse)

    def update_item_webhook(self, access_token: str, webhook: str) -> Result[UpdateItemWebhookResponse]:
        if access_token == "":
            return missing(MISSING_ACCESS_TOKEN)
        if webhook == "":
            return missing("missing webhook")
        payload = UpdateItemWebhookRequest(**self._secret_auth(), access_token=access_token, webhook=webhook)
        return self._call("item/webhook/update", payload, UpdateItemWebhookResponse)

    def invalidate_access_token(self, access_token: str) -> Result[InvalidateAccessTokenResponse]:
        """Rotate the access token; the old one stops working immediately."""

        return self._access_token_call("item/access_token/invalidate", access_token, InvalidateAccessTokenResponse)

    def update_access_token_version(self, access_token: str) -> Result[UpdateAccessTokenVersionResponse]:
        """Exchange a legacy (v1) access token for a current one."""

        if access_token == "":
            return missing(MISSING_ACCESS_TOKEN)
        payload = UpdateAccessTokenVersionRequest(**self._secret_auth(), access_token_v1=access_token)
        return self._call("item/access_token/update_version", payload, UpdateAccessTokenVersionResponse)

    def create_public_token(self, access_token: str) -> Result[CreatePublicTokenResponse]:
        return self._access_token_call("item/public_token/create", access_token, CreatePublicTokenResponse)

    def exchange_public_token(self, public_token: str) -> Result[ExchangePublicTokenResponse]:
        if public_token == "":
            return missing("missing public token")
        payload = ExchangePublicTokenRequest(**self._secret_auth(), public_token=public_token)
        return self._call("item/public_token/exchange", payload, ExchangePublicTokenResponse)

    # Liabilities

    def get_liabilities_with_options(
        self, access_token: str, options: AccountIdsOptions | None
    ) -> Result[GetLiabilitiesResponse]:
        return self._account_filtered_call("liabilities/get", access_token, options, GetLiabilitiesResponse)

    def get_liabilities(self, access_token: str) -> Result[GetLiabilitiesResponse]:
        return self.get_liabilities_with_options(access_token, AccountIdsOptions())

    # Payment initiation

    def create_payment_recipient(
        self,
        name: str,
        iban: str,
        address: PaymentRecipientAddress | None,
    ) -> Result[CreatePaymentRecipientResponse]:
        if name == "":
            return missing("missing name")
        payload = CreatePaymentRecipientRequest(
            **self._secret_auth(),
            name=name,
            iban=iban or None,
            address=address,
        )
        return self._call("payment_initiation/recipient/create", payload, CreatePaymentRecipientResponse)

    def get_payment_recipient(self, recipient_id: str) -> Result[GetPaymentRecipientResponse]:
        if recipient_id == "":
            return missing("missing recipient id")
        payload = PaymentRecipientRequest(**self._secret_auth(), recipient_id=recipient_id)
        return self._call("payment_initiation/recipient/get", payload, GetPaymentRecipientResponse)

    def list_payment_recipients(self) -> Result[ListPaymentRecipientsResponse]:
        payload = SecretAuthRequest(**self._secret_auth())
        return self._call("payment_initiation/recipient/list", payload, ListPaymentRecipientsResponse)

    def create_payment(
        self,
        recipient_id: str,
        reference: str,
        amount: PaymentAmount,
    ) -> Result[CreatePaymentResponse]:
        if recipient_id == "":
            return missing("missing recipient id")
        if reference == "":
            return missing("missing reference")
        payload = CreatePaymentRequest(
            **self._secret_auth(),
            recipient_id=recipient_id,
            reference=reference,
            amount=amount,
        )
        return self._call("payment_initiation/payment/create", payload, CreatePaymentResponse)

    def create_payment_token(self, payment_id: str) -> Result[CreatePaymentTokenResponse]:
        if payment_id == "":
            return missing("missing payment id")
        payload = PaymentRequest(**self._secret_auth(), payment_id=payment_id)
        return self._call("payment_initiation/payment/token/create", payload, CreatePaymentTokenResponse)

    def get_payment(self, payment_id: str) -> Result[GetPaymentResponse]:
        if payment_id == "":
            return missing("missing payment id")
        payload = PaymentRequest(**self._secret_auth(), payment_id=payment_id)
        return self._call("payment_initiation/payment/get", payload, GetPaymentResponse)

    def list_payments(self, options: ListPaymentsOptions | None = None) -> Result[ListPaymentsResponse]:
        options = options or ListPaymentsOptions()
        payload = ListPaymentsRequest(**self._secret_auth(), count=options.count, cursor=options.cursor)
        return self._call("payment_initiation/payment/list", payload, ListPaymentsResponse)

    # Processors

    def _create_processor_token(
        self,
        path: str,
        access_token: str,
        account_id: str,
    ) -> Result[CreateProcessorTokenResponse]:
        if access_token == "":
            return missing(MISSING_ACCESS_TOKEN)
        if account_id == "":
            return missing("missing account id")
        payload = ProcessorTokenRequest(**self._secret_auth(), access_token=access_token, account_id=account_id)
        return self._call(path, payload, CreateProcessorTokenResponse)

    def create_apex_token(self, access_token: str, account_id: str) -> Result[CreateProcessorTokenResponse]:
        return self._create_processor_token(APEX_TOKEN_PATH, access_token, account_id)

    def create_dwolla_token(self, access_token: str, account_id: str) -> Result[CreateProcessorTokenResponse]:
        return self._create_processor_token(DWOLLA_TOKEN_PATH, access_token, account_id)

    def create_ocrolus_token(self, access_token: str, account_id: str) -> Result[CreateProcessorTokenResponse]:
        return self._create_processor_token(OCROLUS_TOKEN_PATH, access_token, account_id)

    def create_stripe_token(self, access_token: str, account_id: str) -> Result[CreateStripeTokenResponse]:
        if access_token == "":
            return missing(MISSING_ACCESS_TOKEN)
        if account_id == "":
            return missing("missing account id")
        payload = ProcessorTokenRequest(**self._secret_auth(), access_token=access_token, account_id=account_id)
        return self._call(STRIPE_TOKEN_PATH, payload, CreateStripeTokenResponse)

    # Sandbox

    def create_sandbox_public_token(
        self,
        institution_id: str,
        initial_products: Sequence[str],
    ) -> Result[CreateSandboxPublicTokenResponse]:
        """Create a public token for a fake sandbox item, bypassing Link."""

        if institution_id == "":
            return missing("missing institution id")
        if not initial_products:
            return missing("missing initial products")
        payload = SandboxPublicTokenRequest(
            public_key=self._credentials.public_key,
            institution_id=institution_id,
            initial_products=list(initial_products),
        )
        return self._call("sandbox/public_token/create", payload, CreateSandboxPublicTokenResponse)

    def reset_sandbox_item(self, access_token: str) -> Result[ResetSandboxItemResponse]:
        """Force a sandbox item into the ITEM_LOGIN_REQUIRED state."""

        return self._access_token_call("sandbox/item/reset_login", access_token, ResetSandboxItemResponse)

    # Transactions

    def get_transactions_with_options(
        self, access_token: str, options: TransactionsOptions | None
    ) -> Result[GetTransactionsResponse]:
        if access_token == "":
            return missing(MISSING_ACCESS_TOKEN)
        options = options or TransactionsOptions()
        if options.start_date == "":
            return missing("missing start date")
        if options.end_date == "":
            return missing("missing end date")
        payload = TransactionsRequest(
            **self._secret_auth(),
            access_token=access_token,
            start_date=options.start_date,
            end_date=options.end_date,
            options=TransactionsRequestOptions(
                count=options.count,
                offset=options.offset,
                account_ids=list(options.account_ids) or None,
            ),
        )
        return self._call("transactions/get", payload, GetTransactionsResponse)

    def get_transactions(self, access_token: str, start_date: str, end_date: str) -> Result[GetTransactionsResponse]:
        options = TransactionsOptions(
            start_date=start_date,
            end_date=end_date,
            count=DEFAULT_TRANSACTIONS_COUNT,
            offset=0,
        )
        return self.get_transactions_with_options(access_token, options)
