"""Command: update an invoice."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from invoicectl.commands._base import InvoiceCommand
from invoicectl.commands._form import form_from_options

if TYPE_CHECKING:
    from invoicectl.commands._context import AppContext


@click.command(
    cls=InvoiceCommand,
    examples="""\
  invoicectl update 1f0c... --customer-id 3958dc9e --amount 20 --status paid""",
)
@click.argument("invoice_id")
@click.option("--customer-id", default=None, help="Customer to bill.")
@click.option("--amount", default=None, help="Amount in dollars, e.g. 15.50.")
@click.option("--status", default=None, help="pending or paid.")
@click.pass_obj
def update(
    app: AppContext,
    invoice_id: str,
    customer_id: str | None,
    amount: str | None,
    status: str | None,
) -> None:
    """Replace an invoice's customer, amount and status (all required)."""
    form = form_from_options(customer_id=customer_id, amount=amount, status=status)
    app.emit(app.invoice_service().update_invoice(invoice_id, form))
