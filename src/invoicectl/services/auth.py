"""CredentialGate — maps authentication failures to one user-facing message.

Failures are classified structurally: an exception carrying a string
``auth_kind`` attribute belongs to the authentication service's
taxonomy. Anything else is an infrastructure fault and propagates
unchanged so it is never mistaken for a failed login.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from invoicectl.domain.types import AuthErrorKind
from invoicectl.services.telemetry import traced

if TYPE_CHECKING:
    from invoicectl.services.contracts import Authenticator
    from invoicectl.services.result import Redirect

logger = logging.getLogger(__name__)

AUTH_MESSAGES: dict[AuthErrorKind, str] = {
    AuthErrorKind.CREDENTIALS_SIGNIN: "Invalid credentials.",
    AuthErrorKind.OTHER: "Something went wrong.",
}


def classify_auth_failure(exc: BaseException) -> AuthErrorKind | None:
    """Return the failure kind, or None if *exc* is not an auth failure."""
    kind = getattr(exc, "auth_kind", None)
    if not isinstance(kind, str):
        return None
    if kind == AuthErrorKind.CREDENTIALS_SIGNIN:
        return AuthErrorKind.CREDENTIALS_SIGNIN
    return AuthErrorKind.OTHER


class CredentialGate:
    """Delegates a credential check to the external authentication service."""

    def __init__(self, authenticator: Authenticator, *, strategy: str = "credentials") -> None:
        self._authenticator = authenticator
        self._strategy = strategy

    @traced
    def authenticate(self, form: Mapping[str, str]) -> Redirect | str:
        """Sign in with the submitted credentials.

        Returns the authentication service's redirect on success, or the
        message to show the user on a recognized failure.
        """
        try:
            return self._authenticator.sign_in(self._strategy, form)
        except Exception as exc:
            kind = classify_auth_failure(exc)
            if kind is None:
                raise
            logger.info("Sign-in failed (%s)", getattr(exc, "auth_kind", kind))
            return AUTH_MESSAGES[kind]
