"""Stage timing for the mutation pipeline.

``@traced`` opens a root span around a service entry point and
``trace_span`` opens one child span per pipeline stage. While telemetry
is off both cost a single ContextVar lookup. With ``--verbose`` the
finished tree is logged as one ``span.complete`` structlog event.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

log = structlog.get_logger("invoicectl.telemetry")

_enabled: ContextVar[bool] = ContextVar("invoicectl_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("invoicectl_span", default=None)


@dataclass
class Span:
    """One timed pipeline stage and the stages nested under it."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    stages: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def elapsed_ms(self) -> float:
        end = self.started if self.finished is None else self.finished
        return round((end - self.started) * 1000, 2)

    def close(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        node: dict[str, Any] = {"name": self.name, "duration_ms": self.elapsed_ms}
        if self.annotations:
            node["annotations"] = dict(self.annotations)
        if self.stages:
            node["stages"] = [stage.to_dict() for stage in self.stages]
        return node


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a stage under the active root span.

    Yields None when telemetry is off or no ``@traced`` call is running.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    stage = Span(name)
    parent.stages.append(stage)
    token = _active.set(stage)
    try:
        yield stage
    finally:
        stage.close()
        _active.reset(token)


def _succeeded(result: object) -> bool:
    # A bare string is a user-facing failure message.
    if isinstance(result, str):
        return False
    return bool(getattr(result, "ok", True))


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Record *func* as a root span and log the span tree when it returns."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(func.__qualname__)
        token = _active.set(root)
        ok = False
        try:
            result = func(*args, **kwargs)
            ok = _succeeded(result)
            return result
        finally:
            root.close()
            _active.reset(token)
            log.debug(
                "span.complete",
                span_name=root.name,
                duration_ms=root.elapsed_ms,
                ok=ok,
                tree=root.to_dict(),
            )

    return wrapper


def set_telemetry(enabled: bool) -> None:
    """Switch stage timing on or off for the current context."""
    _enabled.set(enabled)
