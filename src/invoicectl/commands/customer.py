"""Command group: customers an invoice can reference."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click
from sqlalchemy.exc import IntegrityError

from invoicectl.commands._base import InvoiceGroup

if TYPE_CHECKING:
    from invoicectl.commands._context import AppContext


@click.group(
    cls=InvoiceGroup,
    examples="""\
  invoicectl customer add "Delba de Oliveira" delba@oliveira.com
  invoicectl customer list""",
)
def customer() -> None:
    """Manage customers."""


@customer.command("add")
@click.argument("name")
@click.argument("email")
@click.pass_obj
def add(app: AppContext, name: str, email: str) -> None:
    """Add a customer and print its ID."""
    try:
        customer_id = app.gateway.add_customer(name=name, email=email)
    except IntegrityError as exc:
        msg = f"A customer with email {email!r} already exists"
        raise click.ClickException(msg) from exc
    if app.settings.json_output:
        click.echo(json.dumps({"ok": True, "op": "add_customer", "id": customer_id}, indent=2))
    else:
        click.echo(f"OK: add_customer\n  id: {customer_id}")


@customer.command("list")
@click.pass_obj
def list_customers(app: AppContext) -> None:
    """List customers by name."""
    rows = app.gateway.list_customers()
    if app.settings.json_output:
        payload = {"count": len(rows), "items": [row.model_dump() for row in rows]}
        click.echo(json.dumps(payload, indent=2))
        return
    for row in rows:
        click.echo(f"{row.id}  {row.name} <{row.email}>")
