"""Rich components for the CLI.

Why separate components:
- Keeps command functions free of layout details.
- The same tables are reused by several commands.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from plaid_client.core.domain.models import Account, Category, Institution, Item
from plaid_client.core.domain.result import Status


def build_institutions_table(institutions: Iterable[Institution], *, title: str = "Institutions") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Products", style="green")
    table.add_column("Countries", style="magenta")
    for inst in institutions:
        table.add_row(
            inst.institution_id,
            inst.name,
            ", ".join(inst.products),
            ", ".join(inst.country_codes),
        )
    return table


def build_categories_table(categories: Iterable[Category]) -> Table:
    table = Table(title="Categories")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Group", style="white")
    table.add_column("Hierarchy", style="green")
    for cat in categories:
        table.add_row(cat.category_id, cat.group, " > ".join(cat.hierarchy))
    return table


def build_accounts_table(accounts: Iterable[Account]) -> Table:
    table = Table(title="Accounts")
    table.add_column("Account", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Type", style="green")
    table.add_column("Mask", style="dim")
    table.add_column("Current", style="yellow", justify="right")
    for acc in accounts:
        current = acc.balances.current
        table.add_row(
            acc.account_id,
            acc.name,
            f"{acc.type}/{acc.subtype}" if acc.subtype else acc.type,
            acc.mask or "",
            "" if current is None else f"{current:,.2f}",
        )
    return table


def build_item_panel(item: Item) -> Panel:
    body = Text()
    body.append("Item: ", style="bold")
    body.append(f"{item.item_id}\n")
    body.append("Institution: ", style="bold")
    body.append(f"{item.institution_id or '-'}\n")
    body.append("Webhook: ", style="bold")
    body.append(f"{item.webhook or '-'}\n")
    body.append("Billed products: ", style="bold")
    body.append(", ".join(item.billed_products) or "-")
    if item.error is not None:
        body.append(f"\n\nError: {item.error.error_code}", style="red")
    return Panel(body, title=Text("Item", style="bold cyan"), border_style="cyan")


def print_status(console: Console, status: Status) -> None:
    """Render a failed call in red, with the Plaid error details when present."""

    body = Text()
    body.append(f"{status.kind.value}\n", style="bold")
    body.append(status.message)
    if status.error is not None:
        if status.error.display_message:
            body.append(f"\n\n{status.error.display_message}", style="dim")
        if status.error.request_id:
            body.append(f"\nrequest_id: {status.error.request_id}", style="dim")
    console.print(Panel(body, title=Text("Request failed", style="bold red"), border_style="red"))
