"""SqlInvoiceGateway — parameterized invoice writes over SQLAlchemy Core.

Every statement is built from Core expressions, so user-derived values
always travel as bound parameters. Each call runs in its own
``engine.begin()`` transaction; errors propagate to the caller untouched.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import delete, insert, select, update

from invoicectl.domain.invoice import Customer, Invoice
from invoicectl.infrastructure.database.schema import customers, invoices

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class SqlInvoiceGateway:
    """Invoice persistence against a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # ------------------------------------------------------------------
    # Writes used by the pipeline
    # ------------------------------------------------------------------

    def insert_invoice(self, *, customer_id: str, amount: int, status: str, date: str) -> str:
        """Insert a new invoice and return its generated id."""
        invoice_id = str(uuid.uuid4())
        with self._engine.begin() as conn:
            conn.execute(
                insert(invoices).values(
                    id=invoice_id,
                    customer_id=customer_id,
                    amount=amount,
                    status=status,
                    date=date,
                )
            )
        logger.debug("Inserted invoice %s", invoice_id)
        return invoice_id

    def update_invoice(self, invoice_id: str, *, customer_id: str, amount: int, status: str) -> None:
        with self._engine.begin() as conn:
            result = conn.execute(
                update(invoices)
                .where(invoices.c.id == invoice_id)
                .values(customer_id=customer_id, amount=amount, status=status)
            )
        if result.rowcount == 0:
            logger.debug("Update matched no invoice with id %s", invoice_id)

    def delete_invoice(self, invoice_id: str) -> None:
        with self._engine.begin() as conn:
            result = conn.execute(delete(invoices).where(invoices.c.id == invoice_id))
        if result.rowcount == 0:
            logger.debug("Delete matched no invoice with id %s", invoice_id)

    # ------------------------------------------------------------------
    # Reads and seeding (CLI and tests)
    # ------------------------------------------------------------------

    def add_customer(self, *, name: str, email: str) -> str:
        """Insert a customer and return its generated id."""
        customer_id = str(uuid.uuid4())
        with self._engine.begin() as conn:
            conn.execute(insert(customers).values(id=customer_id, name=name, email=email))
        return customer_id

    def get_invoice(self, invoice_id: str) -> Invoice | None:
        with self._engine.connect() as conn:
            row = conn.execute(select(invoices).where(invoices.c.id == invoice_id)).first()
        if row is None:
            return None
        return Invoice.model_validate(row._asdict())

    def list_invoices(self, *, status: str | None = None) -> list[Invoice]:
        """All invoices, newest first, optionally filtered by *status*."""
        stmt = select(invoices).order_by(invoices.c.date.desc(), invoices.c.id)
        if status is not None:
            stmt = stmt.where(invoices.c.status == status)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [Invoice.model_validate(row._asdict()) for row in rows]

    def list_customers(self) -> list[Customer]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(customers).order_by(customers.c.name)).fetchall()
        return [Customer.model_validate(row._asdict()) for row in rows]
