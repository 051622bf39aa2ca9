"""Command: show one invoice."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from invoicectl.commands._base import InvoiceCommand
from invoicectl.output.formatters import format_invoices

if TYPE_CHECKING:
    from invoicectl.commands._context import AppContext


@click.command(
    cls=InvoiceCommand,
    examples="""\
  invoicectl show 1f0c...
  invoicectl --json show 1f0c...""",
)
@click.argument("invoice_id")
@click.pass_obj
def show(app: AppContext, invoice_id: str) -> None:
    """Show a stored invoice by ID."""
    invoice = app.gateway.get_invoice(invoice_id)
    if invoice is None:
        msg = f"No invoice with id {invoice_id!r}"
        raise click.ClickException(msg)
    click.echo(format_invoices([invoice], json_output=app.settings.json_output))
