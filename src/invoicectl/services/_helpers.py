"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def today_iso() -> str:
    """Today's UTC date as YYYY-MM-DD."""
    return datetime.now(UTC).strftime("%Y-%m-%d")
