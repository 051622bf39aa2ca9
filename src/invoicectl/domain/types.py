"""Invoice status and authentication failure classifications."""

from __future__ import annotations

from enum import StrEnum


class InvoiceStatus(StrEnum):
    """Allowed invoice states. Matching is case-sensitive."""

    PENDING = "pending"
    PAID = "paid"


class AuthErrorKind(StrEnum):
    """Closed set of authentication failure kinds.

    Anything the authentication service reports that is not enumerated
    here folds into ``OTHER``.
    """

    CREDENTIALS_SIGNIN = "CredentialsSignin"
    OTHER = "Other"


class Rounding(StrEnum):
    """Rounding policies for major → minor currency unit conversion."""

    HALF_UP = "half_up"
    HALF_EVEN = "half_even"
