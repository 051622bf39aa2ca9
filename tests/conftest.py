"""Shared pytest fixtures and in-memory collaborators for invoicectl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from invoicectl.infrastructure.database.engine import init_database
from invoicectl.infrastructure.gateway import SqlInvoiceGateway
from invoicectl.services.invoices import InvoiceService
from invoicectl.services.telemetry import _active, set_telemetry

TODAY = "2026-10-17"


# ---------------------------------------------------------------------------
# In-memory collaborators
# ---------------------------------------------------------------------------


class FakeGateway:
    """Records every call; raises ``fail_with`` when set."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.rows: dict[str, dict[str, Any]] = {}
        self.fail_with: Exception | None = None
        self._counter = 0

    def _record(self, name: str, **kwargs: Any) -> None:
        self.calls.append((name, kwargs))
        if self.fail_with is not None:
            raise self.fail_with

    def insert_invoice(self, *, customer_id: str, amount: int, status: str, date: str) -> str:
        self._record(
            "insert_invoice", customer_id=customer_id, amount=amount, status=status, date=date
        )
        self._counter += 1
        invoice_id = f"inv-{self._counter}"
        self.rows[invoice_id] = {
            "customer_id": customer_id,
            "amount": amount,
            "status": status,
            "date": date,
        }
        return invoice_id

    def update_invoice(self, invoice_id: str, *, customer_id: str, amount: int, status: str) -> None:
        self._record(
            "update_invoice",
            invoice_id=invoice_id,
            customer_id=customer_id,
            amount=amount,
            status=status,
        )
        if invoice_id in self.rows:
            self.rows[invoice_id].update(customer_id=customer_id, amount=amount, status=status)

    def delete_invoice(self, invoice_id: str) -> None:
        self._record("delete_invoice", invoice_id=invoice_id)
        self.rows.pop(invoice_id, None)


class RecordingInvalidator:
    def __init__(self) -> None:
        self.paths: list[str] = []
        self.fail_with: Exception | None = None

    def invalidate(self, path: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.paths.append(path)


class RecordingEvents:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> None:
        self.events.append((hook_name, payload))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() and telemetry state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("invoicectl")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.reset_defaults()
    set_telemetry(False)
    _active.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "invoices.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def gateway(db_engine: Engine) -> SqlInvoiceGateway:
    return SqlInvoiceGateway(db_engine)


@pytest.fixture
def customer_id(gateway: SqlInvoiceGateway) -> str:
    """A stored customer invoices can reference."""
    return gateway.add_customer(name="Delba de Oliveira", email="delba@oliveira.com")


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def invalidator() -> RecordingInvalidator:
    return RecordingInvalidator()


@pytest.fixture
def events() -> RecordingEvents:
    return RecordingEvents()


@pytest.fixture
def frozen_today(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin the pipeline clock used for create date stamps."""
    monkeypatch.setattr("invoicectl.services.invoices.today_iso", lambda: TODAY)
    return TODAY


@pytest.fixture
def service(
    fake_gateway: FakeGateway,
    invalidator: RecordingInvalidator,
    events: RecordingEvents,
) -> InvoiceService:
    """InvoiceService wired to in-memory collaborators."""
    return InvoiceService(fake_gateway, invalidator, events=events)


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty project directory with no inherited config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.delenv("INVOICECTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
