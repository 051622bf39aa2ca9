"""Command: initialize the invoice database."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from invoicectl.commands._base import InvoiceCommand

if TYPE_CHECKING:
    from invoicectl.commands._context import AppContext


@click.command("init", cls=InvoiceCommand, examples="  invoicectl init")
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the database and tables (idempotent)."""
    _ = app.engine
    db_path = str(app.settings.db_path)
    if app.settings.json_output:
        click.echo(json.dumps({"ok": True, "op": "init", "database": db_path}, indent=2))
    else:
        click.echo(f"OK: init\n  database: {db_path}")
