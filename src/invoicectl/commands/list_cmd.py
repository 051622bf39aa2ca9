"""Command: list invoices."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from invoicectl.commands._base import InvoiceCommand
from invoicectl.output.formatters import format_invoices

if TYPE_CHECKING:
    from invoicectl.commands._context import AppContext


@click.command(
    "list",
    cls=InvoiceCommand,
    examples="""\
  invoicectl list
  invoicectl list --status pending
  invoicectl --json list""",
)
@click.option(
    "--status",
    type=click.Choice(["pending", "paid"]),
    default=None,
    help="Only invoices in this state.",
)
@click.pass_obj
def list_cmd(app: AppContext, status: str | None) -> None:
    """List stored invoices, newest first."""
    items = app.gateway.list_invoices(status=status)
    click.echo(format_invoices(items, json_output=app.settings.json_output))
