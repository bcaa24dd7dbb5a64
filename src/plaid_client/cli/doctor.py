"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from plaid_client.adapters.transport import HttpxTransport
from plaid_client.core.config import AppSettings, get_user_env_file, write_user_env_vars
from plaid_client.core.domain.credentials import Credentials
from plaid_client.core.domain.environment import Environment, base_url_for
from plaid_client.core.domain.result import Failure
from plaid_client.core.services.client import Client

app = typer.Typer(no_args_is_help=True, help="Configuration checks and credential setup.")

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Call `categories/get`, which needs no credentials, against the configured environment."""

    credentials = Credentials.create(
        settings.environment,
        client_id=settings.client_id or "",
        public_key=settings.public_key or "",
        secret=settings.secret or "",
    )
    result = Client.create(credentials, HttpxTransport(settings)).get_categories()
    if isinstance(result, Failure):
        return False, str(result.status)
    return True, f"{len(result.value.categories)} categories"


def _mask(value: str | None) -> str:
    if not value:
        return "-"
    if len(value) <= 6:
        return "*" * len(value)
    return value[:4] + "*" * (len(value) - 4)


@app.command()
def run() -> None:
    """Show the effective configuration and check that the API is reachable."""

    settings = AppSettings()

    table = Table(title="plaid-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Environment", "OK", f"{settings.environment.label()} ({base_url_for(settings.environment)})")
    table.add_row("client_id", "OK" if settings.client_id else "MISSING", _mask(settings.client_id))
    table.add_row("secret", "OK" if settings.secret else "MISSING", _mask(settings.secret))
    table.add_row(
        "public_key",
        "OK" if settings.public_key else "OPTIONAL",
        _mask(settings.public_key) if settings.public_key else "Needed for institution lookup/search and sandbox tokens",
    )
    table.add_row("User config", "OK" if get_user_env_file().exists() else "NONE", str(get_user_env_file()))

    ok_api, detail_api = _check_api(settings)
    table.add_row("API connectivity", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)


@app.command()
def setup() -> None:
    """Interactive credential setup (stored in the user config .env)."""

    environment = typer.prompt(
        "Environment",
        default=Environment.default().value,
        show_default=True,
    ).strip().lower()
    try:
        base_url_for(environment)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    client_id = typer.prompt("client_id").strip()
    secret = typer.prompt("secret", hide_input=True).strip()
    public_key = typer.prompt("public_key (optional)", default="", show_default=False).strip()

    if not client_id or not secret:
        raise typer.BadParameter("client_id and secret are required")

    env_path = write_user_env_vars(
        {
            "PLAID_ENVIRONMENT": environment,
            "PLAID_CLIENT_ID": client_id,
            "PLAID_SECRET": secret,
            "PLAID_PUBLIC_KEY": public_key or None,
        }
    )

    _console.print(f"[green]Saved credentials to:[/green] {env_path}")
