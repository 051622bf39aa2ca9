"""Tests for the invoice form schema, FormPayload, and coercion."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from invoicectl.domain.invoice import (
    FIELD_MESSAGES,
    MAX_MINOR_UNITS,
    CoercedInvoice,
    FormPayload,
    InvalidInvoice,
    Invoice,
    ValidInvoice,
    coerce_invoice,
    validate_invoice_form,
)
from invoicectl.domain.types import InvoiceStatus, Rounding

VALID = {"customerId": "c1", "amount": "15.50", "status": "pending"}


def _form(**overrides: str | None) -> FormPayload:
    fields = {**VALID, **overrides}
    return FormPayload({k: v for k, v in fields.items() if v is not None})


# ---------------------------------------------------------------------------
# FormPayload
# ---------------------------------------------------------------------------


class TestFormPayload:
    def test_absent_vs_empty(self) -> None:
        form = FormPayload({"amount": ""})
        assert form.get("amount") == ""
        assert form.get("status") is None
        assert "amount" in form
        assert "status" not in form

    def test_from_pairs_first_value_wins(self) -> None:
        form = FormPayload.from_pairs([("status", "paid"), ("status", "pending")])
        assert form["status"] == "paid"
        assert len(form) == 1

    def test_rejects_non_string_values(self) -> None:
        with pytest.raises(TypeError, match="amount"):
            FormPayload({"amount": 10})  # type: ignore[dict-item]

    def test_iterates_field_names(self) -> None:
        assert sorted(_form()) == ["amount", "customerId", "status"]


# ---------------------------------------------------------------------------
# validate_invoice_form
# ---------------------------------------------------------------------------


class TestValidateValid:
    def test_valid_payload(self) -> None:
        outcome = validate_invoice_form(_form())
        assert isinstance(outcome, ValidInvoice)
        assert outcome.valid is True
        assert outcome.customer_id == "c1"
        assert outcome.amount == Decimal("15.50")
        assert outcome.status is InvoiceStatus.PENDING

    def test_plain_dict_accepted(self) -> None:
        outcome = validate_invoice_form(dict(VALID))
        assert isinstance(outcome, ValidInvoice)

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(" 12.5 ", Decimal("12.5")), ("1e2", Decimal("100")), ("0.005", Decimal("0.005"))],
    )
    def test_decimal_text_forms(self, raw: str, expected: Decimal) -> None:
        outcome = validate_invoice_form(_form(amount=raw))
        assert isinstance(outcome, ValidInvoice)
        assert outcome.amount == expected

    def test_extra_fields_ignored(self) -> None:
        form = FormPayload({**VALID, "id": "forged", "date": "1999-01-01"})
        outcome = validate_invoice_form(form)
        assert isinstance(outcome, ValidInvoice)
        assert not hasattr(outcome, "date")

    def test_customer_id_whitespace_trimmed(self) -> None:
        outcome = validate_invoice_form(_form(customerId="  c1 "))
        assert isinstance(outcome, ValidInvoice)
        assert outcome.customer_id == "c1"


class TestValidateInvalid:
    @pytest.mark.parametrize(
        "amount", ["0", "-5", "abc", "", "NaN", "Infinity", "-0.01", "1_000", "1_0.5"]
    )
    def test_bad_amount(self, amount: str) -> None:
        outcome = validate_invoice_form(_form(amount=amount))
        assert isinstance(outcome, InvalidInvoice)
        assert outcome.field_errors == {"amount": [FIELD_MESSAGES["amount"]]}

    @pytest.mark.parametrize("status", ["", "bad-value", "Paid", "PENDING", "overdue"])
    def test_bad_status(self, status: str) -> None:
        outcome = validate_invoice_form(_form(status=status))
        assert isinstance(outcome, InvalidInvoice)
        assert outcome.field_errors == {"status": ["Please select an invoice status."]}

    @pytest.mark.parametrize("customer", ["", "   "])
    def test_blank_customer(self, customer: str) -> None:
        outcome = validate_invoice_form(_form(customerId=customer))
        assert isinstance(outcome, InvalidInvoice)
        assert outcome.field_errors == {"customerId": ["Please select a customer."]}

    def test_absent_fields_are_missing(self) -> None:
        outcome = validate_invoice_form(FormPayload())
        assert isinstance(outcome, InvalidInvoice)
        assert outcome.valid is False
        assert list(outcome.field_errors) == ["customerId", "amount", "status"]

    def test_errors_not_short_circuited(self) -> None:
        outcome = validate_invoice_form(_form(customerId="", status="nope"))
        assert isinstance(outcome, InvalidInvoice)
        assert set(outcome.field_errors) == {"customerId", "status"}
        assert outcome.field_errors["customerId"] == ["Please select a customer."]

    def test_one_message_per_field(self) -> None:
        outcome = validate_invoice_form(_form(amount="abc"))
        assert isinstance(outcome, InvalidInvoice)
        assert len(outcome.field_errors["amount"]) == 1


# ---------------------------------------------------------------------------
# coerce_invoice
# ---------------------------------------------------------------------------


def _valid(amount: str) -> ValidInvoice:
    return ValidInvoice(customer_id="c1", amount=Decimal(amount), status=InvoiceStatus.PAID)


class TestCoerceInvoice:
    def test_amount_to_cents(self) -> None:
        coerced = coerce_invoice(_valid("15.50"))
        assert coerced == CoercedInvoice(
            customer_id="c1", amount=1550, status=InvoiceStatus.PAID, date=None
        )
        assert isinstance(coerced.amount, int)

    def test_date_stamped_when_given(self) -> None:
        coerced = coerce_invoice(_valid("1"), date="2026-10-17")
        assert coerced.date == "2026-10-17"

    def test_half_up_default(self) -> None:
        assert coerce_invoice(_valid("0.005")).amount == 1

    def test_half_even_selectable(self) -> None:
        assert coerce_invoice(_valid("0.025"), rounding=Rounding.HALF_EVEN).amount == 2

    def test_rounds_to_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="minor units"):
            coerce_invoice(_valid("0.004"))

    def test_largest_storable_amount(self) -> None:
        top = Decimal(MAX_MINOR_UNITS) / 100
        assert coerce_invoice(_valid(str(top))).amount == MAX_MINOR_UNITS

    @pytest.mark.parametrize("amount", ["1e20", "92233720368547758.08"])
    def test_overflowing_amount_rejected(self, amount: str) -> None:
        with pytest.raises(ValueError, match="exceeds"):
            coerce_invoice(_valid(amount))


# ---------------------------------------------------------------------------
# Invoice record
# ---------------------------------------------------------------------------


class TestInvoiceRecord:
    def test_valid_record(self) -> None:
        inv = Invoice(id="i1", customer_id="c1", amount=1550, status="paid", date="2026-10-17")
        assert inv.status is InvoiceStatus.PAID

    def test_amount_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Invoice(id="i1", customer_id="c1", amount=0, status="paid", date="2026-10-17")

    def test_date_format_enforced(self) -> None:
        with pytest.raises(ValidationError):
            Invoice(id="i1", customer_id="c1", amount=1, status="paid", date="17/10/2026")

    def test_frozen(self) -> None:
        inv = Invoice(id="i1", customer_id="c1", amount=1, status="paid", date="2026-10-17")
        with pytest.raises(ValidationError):
            inv.amount = 2  # type: ignore[misc]
