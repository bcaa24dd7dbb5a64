"""Local precondition checks: empty required arguments never reach the transport."""

from __future__ import annotations

import pytest

from conftest import ACCESS_TOKEN
from plaid_client.core.domain.models import PaymentAmount
from plaid_client.core.domain.requests import AccountIdsOptions, TransactionsOptions
from plaid_client.core.domain.result import Failure, StatusKind

ACCESS_TOKEN_OPERATIONS = [
    ("get_balances", lambda c, t: c.get_balances(t)),
    ("get_balances_with_options", lambda c, t: c.get_balances_with_options(t, AccountIdsOptions(account_ids=["a"]))),
    ("get_accounts", lambda c, t: c.get_accounts(t)),
    ("get_accounts_with_options", lambda c, t: c.get_accounts_with_options(t, None)),
    ("get_auth", lambda c, t: c.get_auth(t)),
    ("get_holdings", lambda c, t: c.get_holdings(t)),
    ("get_identity", lambda c, t: c.get_identity(t)),
    ("get_income", lambda c, t: c.get_income(t)),
    ("get_investment_transactions", lambda c, t: c.get_investment_transactions(t)),
    ("get_item", lambda c, t: c.get_item(t)),
    ("remove_item", lambda c, t: c.remove_item(t)),
    ("update_item_webhook", lambda c, t: c.update_item_webhook(t, "https://example.com/hook")),
    ("invalidate_access_token", lambda c, t: c.invalidate_access_token(t)),
    ("update_access_token_version", lambda c, t: c.update_access_token_version(t)),
    ("create_public_token", lambda c, t: c.create_public_token(t)),
    ("get_liabilities", lambda c, t: c.get_liabilities(t)),
    ("create_apex_token", lambda c, t: c.create_apex_token(t, "acc-1")),
    ("create_dwolla_token", lambda c, t: c.create_dwolla_token(t, "acc-1")),
    ("create_ocrolus_token", lambda c, t: c.create_ocrolus_token(t, "acc-1")),
    ("create_stripe_token", lambda c, t: c.create_stripe_token(t, "acc-1")),
    ("reset_sandbox_item", lambda c, t: c.reset_sandbox_item(t)),
    ("get_transactions", lambda c, t: c.get_transactions(t, "2020-01-01", "2020-01-31")),
]


@pytest.mark.parametrize("name,call", ACCESS_TOKEN_OPERATIONS, ids=[op[0] for op in ACCESS_TOKEN_OPERATIONS])
def test_empty_access_token_is_missing_info(client, transport, name, call):
    result = call(client, "")

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.MISSING_INFO
    assert result.status.message == "missing access token"
    assert transport.requests == []


@pytest.mark.parametrize("name,call", ACCESS_TOKEN_OPERATIONS, ids=[op[0] for op in ACCESS_TOKEN_OPERATIONS])
def test_non_empty_access_token_issues_one_request(client, transport, name, call):
    call(client, ACCESS_TOKEN)

    assert len(transport.requests) == 1


@pytest.mark.parametrize(
    "call,message",
    [
        (lambda c: c.get_asset_report(""), "missing asset report token"),
        (lambda c: c.create_audit_copy("", "auditor"), "missing asset report token"),
        (lambda c: c.create_audit_copy("assets-token", ""), "missing auditor id"),
        (lambda c: c.remove_asset_report(""), "missing asset report token"),
        (lambda c: c.get_institution_by_id(""), "missing id"),
        (lambda c: c.search_institutions("", ["auth"]), "missing query"),
        (lambda c: c.update_item_webhook(ACCESS_TOKEN, ""), "missing webhook"),
        (lambda c: c.exchange_public_token(""), "missing public token"),
        (lambda c: c.create_apex_token(ACCESS_TOKEN, ""), "missing account id"),
        (lambda c: c.create_stripe_token(ACCESS_TOKEN, ""), "missing account id"),
        (lambda c: c.create_sandbox_public_token("", ["transactions"]), "missing institution id"),
        (lambda c: c.create_sandbox_public_token("ins_1", []), "missing initial products"),
        (lambda c: c.create_payment_recipient("", "GB33BUKB20201555555555", None), "missing name"),
        (lambda c: c.get_payment_recipient(""), "missing recipient id"),
        (lambda c: c.create_payment("", "ref", PaymentAmount(currency="GBP", value=1.0)), "missing recipient id"),
        (lambda c: c.create_payment("rcp-1", "", PaymentAmount(currency="GBP", value=1.0)), "missing reference"),
        (lambda c: c.create_payment_token(""), "missing payment id"),
        (lambda c: c.get_payment(""), "missing payment id"),
    ],
)
def test_missing_required_argument(client, transport, call, message):
    result = call(client)

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.MISSING_INFO
    assert result.status.message == message
    assert transport.requests == []


def test_transactions_missing_start_date(client, transport):
    result = client.get_transactions_with_options(ACCESS_TOKEN, TransactionsOptions(end_date="2020-01-31"))

    assert isinstance(result, Failure)
    assert result.status.message == "missing start date"
    assert transport.requests == []


def test_transactions_without_options_is_missing_start_date(client, transport):
    result = client.get_transactions_with_options(ACCESS_TOKEN, None)

    assert isinstance(result, Failure)
    assert result.status.kind is StatusKind.MISSING_INFO
    assert result.status.message == "missing start date"
    assert transport.requests == []


def test_transactions_missing_end_date(client, transport):
    result = client.get_transactions(ACCESS_TOKEN, "2020-01-01", "")

    assert isinstance(result, Failure)
    assert result.status.message == "missing end date"
    assert transport.requests == []


def test_access_token_is_checked_before_dates(client, transport):
    result = client.get_transactions_with_options("", TransactionsOptions())

    assert isinstance(result, Failure)
    assert result.status.message == "missing access token"
