"""BaseService — shared wiring for the mutation pipeline services.

Every service receives its collaborators at construction time: the
persistence gateway, the cache invalidator, and optionally an event
dispatcher. Nothing is looked up from module globals.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from invoicectl.config.models import PipelineConfig

if TYPE_CHECKING:
    from invoicectl.services.contracts import CacheInvalidator, EventDispatcher, InvoiceGateway

logger = logging.getLogger(__name__)


class BaseService:
    """Base for services that write through the persistence gateway.

    Usage::

        class InvoiceService(BaseService):
            def delete_invoice(self, invoice_id: str) -> MutationState:
                self._gateway.delete_invoice(invoice_id)
                self._invalidate(self._config.invoices_path)
                ...
    """

    def __init__(
        self,
        gateway: InvoiceGateway,
        invalidator: CacheInvalidator,
        *,
        events: EventDispatcher | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self._gateway = gateway
        self._invalidator = invalidator
        self._events = events
        self._config = config or PipelineConfig()

    def _invalidate(self, path: str) -> None:
        """Signal that the view at *path* is stale.

        INVARIANT: Invalidation failures are logged, never surfaced.
        """
        try:
            self._invalidator.invalidate(path)
        except Exception:
            logger.warning("Cache invalidation failed for %s", path, exc_info=True)

    def _dispatch_event(self, hook_name: str, payload: dict[str, Any]) -> None:
        """Dispatch a lifecycle event. No-op if no dispatcher is wired.

        INVARIANT: Listener failures are logged, never surfaced.
        """
        if self._events is None:
            return
        try:
            self._events.dispatch(hook_name, payload)
        except Exception:
            logger.warning("Event dispatch failed for %s", hook_name, exc_info=True)
