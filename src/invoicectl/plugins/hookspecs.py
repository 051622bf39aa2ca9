"""Pluggy hook specifications for invoice cache invalidation and lifecycle events.

Hooks run synchronously, after the write they describe has been committed.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("invoicectl")
hookimpl = pluggy.HookimplMarker("invoicectl")


class InvoicectlHookSpec:
    """Hook specifications for the invoicectl plugin system."""

    @hookspec
    def invalidate_path(self, path: str) -> None:
        """Called when the view cached at *path* is stale."""

    @hookspec
    def post_create(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: str,
        date: str,
    ) -> None:
        """Called after an invoice is created. *amount* is in minor units."""

    @hookspec
    def post_update(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: str,
    ) -> None:
        """Called after an invoice is updated."""

    @hookspec
    def post_delete(self, invoice_id: str) -> None:
        """Called after an invoice is deleted (or was already gone)."""
