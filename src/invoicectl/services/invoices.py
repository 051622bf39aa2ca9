"""InvoiceService — the validated mutation pipeline for invoices.

Create / update: VALIDATE → COERCE → PERSIST → INVALIDATE → EVENT → REDIRECT
Delete:          PERSIST → INVALIDATE → EVENT → RESPOND

Validation and persistence failures are absorbed into the returned
``MutationState``; nothing is retried and no partial write is reported
as success.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from invoicectl.domain.invoice import (
    MISSING_FIELDS_MESSAGE,
    CoercedInvoice,
    InvalidInvoice,
    amount_error,
    coerce_invoice,
    validate_invoice_form,
)
from invoicectl.services._helpers import today_iso
from invoicectl.services.base import BaseService
from invoicectl.services.result import MutationState, Redirect
from invoicectl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

CREATE_FAILED_MESSAGE = "Database Error: Failed to Create Invoice."
UPDATE_FAILED_MESSAGE = "Database Error: Failed to Update Invoice."
DELETE_FAILED_MESSAGE = "Database Error: Failed to Delete Invoice."
DELETED_MESSAGE = "Deleted Invoice."


class InvoiceService(BaseService):
    """Create, update and delete invoices from untrusted form input."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def create_invoice(self, form: Mapping[str, str]) -> Redirect | MutationState:
        """Validate *form*, insert a new invoice dated today, then redirect."""
        op = "create_invoice"
        prepared = self._prepare(op, form, date=today_iso())
        if isinstance(prepared, MutationState):
            return prepared

        with trace_span("persist") as span:
            try:
                invoice_id = self._gateway.insert_invoice(
                    customer_id=prepared.customer_id,
                    amount=prepared.amount,
                    status=prepared.status.value,
                    date=str(prepared.date),
                )
            except Exception:
                logger.exception("Database error while creating invoice")
                return MutationState(op=op, message=CREATE_FAILED_MESSAGE)
            if span is not None:
                span.annotate("invoice_id", invoice_id)

        return self._finish(
            op,
            "post_create",
            {
                "invoice_id": invoice_id,
                "customer_id": prepared.customer_id,
                "amount": prepared.amount,
                "status": prepared.status.value,
                "date": prepared.date,
            },
        )

    @traced
    def update_invoice(self, invoice_id: str, form: Mapping[str, str]) -> Redirect | MutationState:
        """Validate *form* and overwrite the invoice keyed by *invoice_id*.

        All three fields are required, as on create. The invoice date is
        never touched.
        """
        op = "update_invoice"
        prepared = self._prepare(op, form)
        if isinstance(prepared, MutationState):
            return prepared

        with trace_span("persist") as span:
            if span is not None:
                span.annotate("invoice_id", invoice_id)
            try:
                self._gateway.update_invoice(
                    invoice_id,
                    customer_id=prepared.customer_id,
                    amount=prepared.amount,
                    status=prepared.status.value,
                )
            except Exception:
                logger.exception("Database error while updating invoice %s", invoice_id)
                return MutationState(op=op, message=UPDATE_FAILED_MESSAGE)

        return self._finish(
            op,
            "post_update",
            {
                "invoice_id": invoice_id,
                "customer_id": prepared.customer_id,
                "amount": prepared.amount,
                "status": prepared.status.value,
            },
        )

    @traced
    def delete_invoice(self, invoice_id: str) -> MutationState:
        """Delete the invoice keyed by *invoice_id*.

        Never redirects: invalidating the list view is what refreshes the
        caller. Deleting an id that no longer exists is a success.
        """
        op = "delete_invoice"
        with trace_span("persist") as span:
            if span is not None:
                span.annotate("invoice_id", invoice_id)
            try:
                self._gateway.delete_invoice(invoice_id)
            except Exception:
                logger.exception("Database error while deleting invoice %s", invoice_id)
                return MutationState(op=op, message=DELETE_FAILED_MESSAGE)

        with trace_span("invalidate"):
            self._invalidate(self._config.invoices_path)
        self._dispatch_event("post_delete", {"invoice_id": invoice_id})
        logger.info("Deleted invoice %s", invoice_id)
        return MutationState(op=op, ok=True, message=DELETED_MESSAGE)

    # ------------------------------------------------------------------
    # Pipeline stages (private)
    # ------------------------------------------------------------------

    def _prepare(
        self,
        op: str,
        form: Mapping[str, str],
        *,
        date: str | None = None,
    ) -> CoercedInvoice | MutationState:
        """VALIDATE → COERCE. Returns the rejection state on failure."""
        with trace_span("validate"):
            validation = validate_invoice_form(form)
        if isinstance(validation, InvalidInvoice):
            logger.info("%s rejected: %s", op, sorted(validation.field_errors))
            return self._rejected(op, validation.field_errors)

        with trace_span("coerce"):
            try:
                return coerce_invoice(
                    validation,
                    rounding=self._config.amount_rounding,
                    date=date,
                )
            except ValueError:
                logger.info("%s rejected: amount %s not storable", op, validation.amount)
                return self._rejected(op, amount_error())

    @staticmethod
    def _rejected(op: str, field_errors: dict[str, list[str]]) -> MutationState:
        # Update reuses the create summary message verbatim.
        return MutationState(op=op, errors=field_errors, message=MISSING_FIELDS_MESSAGE)

    def _finish(self, op: str, hook_name: str, payload: dict[str, object]) -> Redirect:
        """INVALIDATE → EVENT → REDIRECT."""
        path = self._config.invoices_path
        with trace_span("invalidate"):
            self._invalidate(path)
        self._dispatch_event(hook_name, payload)
        logger.info("%s succeeded for invoice %s", op, payload["invoice_id"])
        return Redirect(op=op, path=path)
