"""Build a raw form payload from CLI options."""

from __future__ import annotations

from invoicectl.domain.invoice import FormPayload


def form_from_options(
    *,
    customer_id: str | None,
    amount: str | None,
    status: str | None,
) -> FormPayload:
    """Map CLI options onto form field names. Omitted options stay absent."""
    fields = (("customerId", customer_id), ("amount", amount), ("status", status))
    return FormPayload.from_pairs((name, value) for name, value in fields if value is not None)
