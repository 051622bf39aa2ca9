"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Collaborators (engine, gateway, plugins) are built
lazily so ``--help`` and ``--version`` never touch the database.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from invoicectl.output.formatters import format_outcome

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from invoicectl.config.settings import InvoiceSettings
    from invoicectl.infrastructure.gateway import SqlInvoiceGateway
    from invoicectl.plugins.manager import PluginManager
    from invoicectl.services.invoices import InvoiceService
    from invoicectl.services.result import MutationOutcome


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: InvoiceSettings) -> None:
        self.settings = settings
        self._engine: Engine | None = None
        self._plugins: PluginManager | None = None

        from invoicectl.config.logging import configure_logging
        from invoicectl.services.telemetry import set_telemetry

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        set_telemetry(settings.verbose)

    @property
    def engine(self) -> Engine:
        """The database engine (tables created on first access)."""
        if self._engine is None:
            from invoicectl.infrastructure.database.engine import init_database

            self._engine = init_database(
                self.settings.db_path,
                echo=self.settings.database.echo,
            )
        return self._engine

    @property
    def gateway(self) -> SqlInvoiceGateway:
        from invoicectl.infrastructure.gateway import SqlInvoiceGateway

        return SqlInvoiceGateway(self.engine)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (entry points loaded on first access)."""
        if self._plugins is None:
            from invoicectl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load()
        return self._plugins

    def invoice_service(self) -> InvoiceService:
        from invoicectl.services.invoices import InvoiceService

        return InvoiceService(
            self.gateway,
            self.plugins,
            events=self.plugins,
            config=self.settings.pipeline,
        )

    def emit(self, outcome: MutationOutcome) -> None:
        """Format and output an outcome with correct exit semantics.

        * Redirect, or a state with ``ok`` set: stdout, returns normally.
        * Any other state: stderr, exits with code 1.
        """
        output = format_outcome(outcome, json_output=self.settings.json_output)
        if outcome.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
