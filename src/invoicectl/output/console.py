"""Rich Console factory and theme for invoicectl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_*() -> str`` contract.  In non-TTY environments (tests,
pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

INVOICE_THEME = Theme(
    {
        "inv.ok": "bold green",
        "inv.error": "bold red",
        "inv.op": "bold cyan",
        "inv.field": "bold",
        "inv.path": "dim",
        "inv.id": "bold blue",
        "inv.status.pending": "yellow",
        "inv.status.paid": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=INVOICE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for an invoice status."""
    return f"inv.status.{status}" if status in ("pending", "paid") else ""
