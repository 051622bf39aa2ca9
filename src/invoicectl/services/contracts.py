"""Collaborator contracts consumed by the pipeline.

The orchestrator never reaches for a global database handle or auth
client. Each collaborator is injected and only these narrow interfaces
are relied on, so tests can substitute in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from invoicectl.services.result import Redirect


@runtime_checkable
class InvoiceGateway(Protocol):
    """Parameterized writes against the ``invoices`` table.

    Implementations must bind every value as a query parameter. Any
    exception raised is treated as a persistence fault.
    """

    def insert_invoice(self, *, customer_id: str, amount: int, status: str, date: str) -> str:
        """Insert a new invoice and return the id assigned to it."""
        ...

    def update_invoice(self, invoice_id: str, *, customer_id: str, amount: int, status: str) -> None:
        """Update the invoice keyed by *invoice_id*. No match is not an error."""
        ...

    def delete_invoice(self, invoice_id: str) -> None:
        """Delete the invoice keyed by *invoice_id*. No match is not an error."""
        ...


@runtime_checkable
class CacheInvalidator(Protocol):
    """Marks a previously computed view as stale."""

    def invalidate(self, path: str) -> None: ...


@runtime_checkable
class EventDispatcher(Protocol):
    """Delivers post-mutation lifecycle events to interested listeners."""

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> None: ...


@runtime_checkable
class Authenticator(Protocol):
    """External authentication service.

    ``sign_in`` returns the service's own redirect on success. On failure
    it raises an exception carrying a string ``auth_kind`` attribute
    (see :class:`AuthenticationFailed`).
    """

    def sign_in(self, strategy: str, credentials: Mapping[str, str]) -> Redirect: ...


class AuthenticationFailed(Exception):
    """Failure raised by an authentication service.

    ``auth_kind`` names the failure classification, e.g.
    ``"CredentialsSignin"``. Unknown kinds are allowed.
    """

    def __init__(self, auth_kind: str, message: str | None = None) -> None:
        super().__init__(message or auth_kind)
        self.auth_kind = auth_kind
