"""MutationState and Redirect — the outcome contract of every pipeline call.

INVARIANT: Create and update return a ``Redirect`` on success and a
``MutationState`` otherwise. Delete always returns a ``MutationState``.
Callers branch on ``kind`` instead of on the absence of a return value.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class MutationState(BaseModel):
    """Non-terminal outcome rendered back to the caller.

    Attributes:
        op: Name of the operation (e.g. ``"create_invoice"``).
        ok: True only for a delete that completed.
        errors: Field error mapping keyed by form field name.
        message: Summary message for the user.
    """

    model_config = {"frozen": True}

    kind: Literal["state"] = "state"
    op: str
    ok: bool = False
    errors: dict[str, list[str]] | None = None
    message: str | None = None

    def payload(self) -> dict[str, Any]:
        """The ``{errors?, message?}`` shape, with absent keys omitted."""
        return self.model_dump(include={"errors", "message"}, exclude_none=True)


class Redirect(BaseModel):
    """Terminal control transfer: the caller must navigate to ``path``."""

    model_config = {"frozen": True}

    kind: Literal["redirect"] = "redirect"
    op: str
    path: str

    @property
    def ok(self) -> bool:
        return True


MutationOutcome = Annotated[Redirect | MutationState, Field(discriminator="kind")]
