"""SQLAlchemy Core table definitions for the invoice store.

``invoices.amount`` holds integer minor units (cents). ``status`` is
constrained to the two invoice states at the database level as well.
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False, unique=True),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", Text, primary_key=True),
    Column("customer_id", Text, ForeignKey("customers.id"), nullable=False),
    Column("amount", Integer, nullable=False),
    Column("status", Text, nullable=False),
    Column("date", Text, nullable=False),  # YYYY-MM-DD
    CheckConstraint("amount > 0", name="ck_invoices_amount_positive"),
    CheckConstraint("status IN ('pending', 'paid')", name="ck_invoices_status"),
)

Index("ix_invoices_customer_id", invoices.c.customer_id)
Index("ix_invoices_status", invoices.c.status)
