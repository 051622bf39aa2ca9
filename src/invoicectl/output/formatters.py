"""Rich/JSON output helpers.

The CLI renders pipeline outcomes for humans (Rich markup) or machines
(--json). A ``Redirect`` renders as the navigation target; a
``MutationState`` renders its message and any field errors.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from invoicectl.domain.money import to_major_units
from invoicectl.output.console import create_console, get_output, style_for_status
from invoicectl.services.result import MutationOutcome, Redirect

if TYPE_CHECKING:
    from invoicectl.domain.invoice import Invoice


def format_outcome(outcome: MutationOutcome, *, json_output: bool = False) -> str:
    """Format a pipeline outcome for display."""
    if json_output:
        return outcome.model_dump_json(indent=2)

    console = create_console()
    if isinstance(outcome, Redirect):
        console.print(
            f"[inv.ok]OK[/]: [inv.op]{outcome.op}[/] → [inv.path]{escape(outcome.path)}[/]"
        )
        return get_output(console).rstrip("\n")

    body = outcome.payload()
    label = "[inv.ok]OK[/]" if outcome.ok else "[inv.error]ERROR[/]"
    console.print(f"{label}: [inv.op]{outcome.op}[/] — {escape(body.get('message', ''))}")
    for field_name, messages in body.get("errors", {}).items():
        for message in messages:
            console.print(f"  [inv.field]{field_name}[/]: {escape(message)}")
    return get_output(console).rstrip("\n")


def format_invoices(items: list[Invoice], *, json_output: bool = False) -> str:
    """Format an invoice listing. Amounts display in major units."""
    if json_output:
        return _json.dumps(
            {"count": len(items), "items": [item.model_dump(mode="json") for item in items]},
            indent=2,
        )

    console = create_console()
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="inv.id", no_wrap=True)
    table.add_column("Customer")
    table.add_column("Amount", justify="right")
    table.add_column("Status")
    table.add_column("Date")
    for item in items:
        table.add_row(
            item.id,
            item.customer_id,
            f"${to_major_units(item.amount)}",
            f"[{style_for_status(item.status)}]{item.status}[/]",
            item.date,
        )
    console.print(table)
    console.print(f"{len(items)} invoice(s)")
    return get_output(console).rstrip("\n")
