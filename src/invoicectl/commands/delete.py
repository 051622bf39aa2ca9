"""Command: delete an invoice."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from invoicectl.commands._base import InvoiceCommand

if TYPE_CHECKING:
    from invoicectl.commands._context import AppContext


@click.command(
    cls=InvoiceCommand,
    examples="""\
  invoicectl delete 1f0c...
  invoicectl --json delete 1f0c...""",
)
@click.argument("invoice_id")
@click.pass_obj
def delete(app: AppContext, invoice_id: str) -> None:
    """Delete an invoice by ID. Deleting a missing invoice succeeds."""
    app.emit(app.invoice_service().delete_invoice(invoice_id))
