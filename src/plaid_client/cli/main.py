"""plaid-client CLI.

Thin layer over `Client`: every command builds a client from `AppSettings`,
runs one operation and renders the result (rich table or `--json`).
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.logging import RichHandler

from plaid_client.cli import doctor
from plaid_client.cli.ui_components import (
    build_accounts_table,
    build_categories_table,
    build_institutions_table,
    build_item_panel,
    print_status,
)
from plaid_client.core.config import AppSettings
from plaid_client.core.domain.errors import InvalidConfigurationError
from plaid_client.core.domain.result import Failure, Result
from plaid_client.core.services.client import Client

ResponseT = TypeVar("ResponseT", bound=BaseModel)

app = typer.Typer(no_args_is_help=True, help="Command line access to the Plaid API.")
institutions_app = typer.Typer(no_args_is_help=True, help="Institution lookups.")
item_app = typer.Typer(no_args_is_help=True, help="Item (linked login) operations.")
sandbox_app = typer.Typer(no_args_is_help=True, help="Sandbox-only helpers.")

app.add_typer(institutions_app, name="institutions")
app.add_typer(item_app, name="item")
app.add_typer(sandbox_app, name="sandbox")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request (never secrets)."),
) -> None:
    _configure_logging(verbose)


def _client() -> Client:
    try:
        return Client.from_settings(AppSettings())
    except (InvalidConfigurationError, ValidationError) as exc:
        _console.print(f"[red]Configuration error:[/red] {exc}")
        _console.print("Run `plaid-client doctor setup` or set PLAID_* environment variables.")
        raise typer.Exit(code=2) from exc


def _emit(result: Result[ResponseT], render: Callable[[ResponseT], None], as_json: bool) -> None:
    if isinstance(result, Failure):
        print_status(_console, result.status)
        raise typer.Exit(code=1)
    if as_json:
        _console.print_json(data=result.value.model_dump(mode="json"))
        return
    render(result.value)


@app.command()
def categories(as_json: bool = typer.Option(False, "--json", help="Print raw JSON.")) -> None:
    """List transaction categories."""

    result = _client().get_categories()
    _emit(result, lambda resp: _console.print(build_categories_table(resp.categories)), as_json)


@institutions_app.command("list")
def institutions_list(
    count: int = typer.Option(0, "--count", min=0, help="Page size (0 = default of 50)."),
    offset: int = typer.Option(0, "--offset", min=0),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """List supported institutions, one page at a time."""

    result = _client().get_institutions(count=count, offset=offset)

    def render(resp) -> None:
        _console.print(build_institutions_table(resp.institutions))
        _console.print(f"[dim]{len(resp.institutions)} of {resp.total} (offset {offset})[/dim]")

    _emit(result, render, as_json)


@institutions_app.command("get")
def institutions_get(
    institution_id: str = typer.Argument(..., help="Institution id, e.g. ins_109508."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """Show one institution."""

    result = _client().get_institution_by_id(institution_id)
    _emit(result, lambda resp: _console.print(build_institutions_table([resp.institution], title="Institution")), as_json)


@institutions_app.command("search")
def institutions_search(
    query: str = typer.Argument(..., help="Free-text query."),
    product: list[str] = typer.Option([], "--product", "-p", help="Filter by product (repeatable)."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """Search institutions by name."""

    result = _client().search_institutions(query, product)
    _emit(result, lambda resp: _console.print(build_institutions_table(resp.institutions)), as_json)


@item_app.command("get")
def item_get(
    access_token: str = typer.Argument(..., help="Item access token."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """Show an item's status."""

    result = _client().get_item(access_token)
    _emit(result, lambda resp: _console.print(build_item_panel(resp.item)), as_json)


@item_app.command("accounts")
def item_accounts(
    access_token: str = typer.Argument(..., help="Item access token."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """List an item's accounts with cached balances."""

    result = _client().get_accounts(access_token)
    _emit(result, lambda resp: _console.print(build_accounts_table(resp.accounts)), as_json)


@sandbox_app.command("public-token")
def sandbox_public_token(
    institution_id: str = typer.Argument(..., help="Sandbox institution id, e.g. ins_109508."),
    product: list[str] = typer.Option(["transactions"], "--product", "-p", help="Initial product (repeatable)."),
    exchange: bool = typer.Option(False, "--exchange", help="Also exchange it for an access token."),
) -> None:
    """Create a sandbox public token without going through Link."""

    client = _client()
    created = client.create_sandbox_public_token(institution_id, product)
    if isinstance(created, Failure):
        print_status(_console, created.status)
        raise typer.Exit(code=1)
    _console.print(f"[green]public_token:[/green] {created.value.public_token}")
    if not exchange:
        return

    exchanged = client.exchange_public_token(created.value.public_token)
    if isinstance(exchanged, Failure):
        print_status(_console, exchanged.status)
        raise typer.Exit(code=1)
    _console.print(f"[green]access_token:[/green] {exchanged.value.access_token}")
    _console.print(f"[green]item_id:[/green] {exchanged.value.item_id}")


def run() -> None:
    app()
