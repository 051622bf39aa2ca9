"""Command: create an invoice."""

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
  invoicectl create --customer-id 3958dc9e --amount 15.50 --status pending
  invoicectl --json create --customer-id 3958dc9e --amount 99 --status paid""",
)
@click.option("--customer-id", default=None, help="Customer to bill.")
@click.option("--amount", default=None, help="Amount in dollars, e.g. 15.50.")
@click.option("--status", default=None, help="pending or paid.")
@click.pass_obj
def create(
    app: AppContext,
    customer_id: str | None,
    amount: str | None,
    status: str | None,
) -> None:
    """Create an invoice dated today."""
    form = form_from_options(customer_id=customer_id, amount=amount, status=status)
    app.emit(app.invoice_service().create_invoice(form))
