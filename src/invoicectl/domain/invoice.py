"""Invoice form schema, validation outcome, and the persisted record model.

The form schema mirrors what a browser submits: every value is a string
keyed by the form field name (``customerId``, ``amount``, ``status``).
Validation collects every field's error before returning, and each
failing field reports a single fixed user-facing message.

``id`` and ``date`` are never part of the form schema. The persistence
gateway assigns ``id``; the pipeline clock stamps ``date`` at creation.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
    field_validator,
)

from invoicectl.domain.money import to_minor_units
from invoicectl.domain.types import InvoiceStatus, Rounding

# ---------------------------------------------------------------------------
# User-facing messages
# ---------------------------------------------------------------------------

FIELD_MESSAGES: dict[str, str] = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.00",
    "status": "Please select an invoice status.",
}

MISSING_FIELDS_MESSAGE = "Missing Fields. Failed to Create Invoice."

_FIELD_ALIASES: dict[str, str] = {"customer_id": "customerId"}

# Largest amount an SQLite INTEGER column holds.
MAX_MINOR_UNITS = 2**63 - 1


# ---------------------------------------------------------------------------
# Raw form payload
# ---------------------------------------------------------------------------


class FormPayload(Mapping[str, str]):
    """Immutable string-valued form submission.

    ``get(name)`` returns ``None`` for an absent field and ``""`` for a
    field that was submitted empty.
    """

    def __init__(self, fields: Mapping[str, str] | None = None) -> None:
        data = dict(fields or {})
        for name, value in data.items():
            if not isinstance(value, str):
                msg = f"Form field {name!r} must be a string, got {type(value).__name__}"
                raise TypeError(msg)
        self._fields = data

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> FormPayload:
        """Build from ``(name, value)`` pairs. The first value for a name wins."""
        data: dict[str, str] = {}
        for name, value in pairs:
            data.setdefault(name, value)
        return cls(data)

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FormPayload({self._fields!r})"


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class InvoiceForm(BaseModel):
    """Validated invoice form fields, before coercion to domain units."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    customer_id: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(
        alias="customerId"
    )
    amount: Decimal = Field(gt=0, allow_inf_nan=False)
    status: InvoiceStatus

    @field_validator("amount", mode="before")
    @classmethod
    def strip_amount(cls, value: Any) -> Any:
        if isinstance(value, str):
            if "_" in value:
                msg = "digit separators are not allowed"
                raise ValueError(msg)
            return value.strip()
        return value


@dataclass(frozen=True)
class ValidInvoice:
    """Validation passed: typed fields ready for coercion."""

    customer_id: str
    amount: Decimal
    status: InvoiceStatus

    @property
    def valid(self) -> bool:
        return True


@dataclass(frozen=True)
class InvalidInvoice:
    """Validation failed: per-field error messages keyed by form field name."""

    field_errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return False


ValidationOutcome = ValidInvoice | InvalidInvoice


def validate_invoice_form(form: Mapping[str, str]) -> ValidationOutcome:
    """Validate the ``customerId``, ``amount`` and ``status`` form fields.

    Absent fields are treated as missing, not as empty strings. All
    fields are checked; the returned mapping lists every failing field
    in form order.
    """
    raw = {name: form[name] for name in FIELD_MESSAGES if form.get(name) is not None}
    try:
        parsed = InvoiceForm.model_validate(raw)
    except ValidationError as exc:
        return InvalidInvoice(field_errors=field_errors_from(exc))
    return ValidInvoice(
        customer_id=parsed.customer_id,
        amount=parsed.amount,
        status=parsed.status,
    )


def field_errors_from(exc: ValidationError) -> dict[str, list[str]]:
    """Collapse pydantic errors into one fixed message per failing form field."""
    failing: set[str] = set()
    for error in exc.errors():
        loc = error.get("loc") or ()
        if loc:
            failing.add(_FIELD_ALIASES.get(str(loc[0]), str(loc[0])))
    return {name: [message] for name, message in FIELD_MESSAGES.items() if name in failing}


def amount_error() -> dict[str, list[str]]:
    """Field error mapping for an amount that cannot be stored."""
    return {"amount": [FIELD_MESSAGES["amount"]]}


# ---------------------------------------------------------------------------
# Persisted record
# ---------------------------------------------------------------------------


class Invoice(BaseModel):
    """A stored invoice. ``amount`` is in minor units (cents)."""

    model_config = {"frozen": True}

    id: str
    customer_id: str
    amount: int = Field(gt=0)
    status: InvoiceStatus
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")


class Customer(BaseModel):
    """A customer an invoice can be billed to."""

    model_config = {"frozen": True}

    id: str
    name: str
    email: str


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CoercedInvoice:
    """Domain-typed invoice fields ready for persistence."""

    customer_id: str
    amount: int
    status: InvoiceStatus
    date: str | None = None


def coerce_invoice(
    valid: ValidInvoice,
    *,
    rounding: Rounding = Rounding.HALF_UP,
    date: str | None = None,
) -> CoercedInvoice:
    """Convert the validated major-unit amount to minor units.

    *date* is stamped only on creation; updates leave it ``None``.

    Raises:
        ValueError: If the amount is not a storable positive number of
            minor units (``0.004`` rounds to zero cents, ``1e20`` overflows).
    """
    amount = to_minor_units(valid.amount, rounding)
    if amount <= 0:
        msg = f"Amount {valid.amount} rounds to {amount} minor units"
        raise ValueError(msg)
    if amount > MAX_MINOR_UNITS:
        msg = f"Amount {valid.amount} exceeds {MAX_MINOR_UNITS} minor units"
        raise ValueError(msg)
    return CoercedInvoice(
        customer_id=valid.customer_id,
        amount=amount,
        status=valid.status,
        date=date,
    )
