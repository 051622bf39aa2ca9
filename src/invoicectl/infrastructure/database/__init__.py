"""SQLite database engine and schema via SQLAlchemy Core."""

from invoicectl.infrastructure.database.engine import create_db_engine, init_database
from invoicectl.infrastructure.database.schema import customers, invoices, metadata

__all__ = [
    "create_db_engine",
    "customers",
    "init_database",
    "invoices",
    "metadata",
]
