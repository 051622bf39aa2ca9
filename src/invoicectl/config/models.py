"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, invoicectl.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from invoicectl.domain.types import Rounding

INVOICES_PATH = "/dashboard/invoices"


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the project root.
    path: str = ".invoicectl/invoices.db"
    echo: bool = False


class PipelineConfig(BaseModel):
    """[pipeline] section."""

    model_config = {"frozen": True}

    invoices_path: str = INVOICES_PATH
    amount_rounding: Rounding = Rounding.HALF_UP
