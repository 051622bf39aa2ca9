"""Subcommand modules for invoicectl.

Provides register_commands() which uses deferred imports to keep
``invoicectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from invoicectl.commands.customer import customer

    cli.add_command(customer)

    # --- Standalone commands ---
    from invoicectl.commands.create import create
    from invoicectl.commands.delete import delete
    from invoicectl.commands.init_cmd import init_cmd
    from invoicectl.commands.list_cmd import list_cmd
    from invoicectl.commands.show import show
    from invoicectl.commands.update import update

    cli.add_command(init_cmd)
    cli.add_command(create)
    cli.add_command(update)
    cli.add_command(delete)
    cli.add_command(list_cmd)
    cli.add_command(show)
