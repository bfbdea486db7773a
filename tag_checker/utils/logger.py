"""
Stderr logger for tag checks.

Lines look like ``[HH:MM:SS.mmm] ✓ [Tag-Detector] Tag check complete
url="https://..." gtm=True``.  ``LOG_LEVEL`` (debug, info, warn, error)
sets the minimum level and is read on every call, so tests and the CLI
can change it at runtime.

Fetch timers are kept per ``contextvars`` context: concurrent checks on
one event loop never see each other's start times.
"""

from __future__ import annotations

import contextvars
import os
import sys
import time
from datetime import UTC, datetime
from typing import NamedTuple

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_GREY = "\033[90m"


class _Level(NamedTuple):
    rank: int
    colour: str
    symbol: str


_LEVELS: dict[str, _Level] = {
    "debug": _Level(10, _GREY, "•"),
    "info": _Level(20, "\033[36m", "ℹ"),
    "success": _Level(20, "\033[32m", "✓"),
    "timing": _Level(20, "\033[35m", "⏱"),
    "warn": _Level(30, "\033[33m", "⚠"),
    "error": _Level(40, "\033[31m", "✗"),
}

_timers_var: contextvars.ContextVar[dict[str, float]] = contextvars.ContextVar("_timers_var")


def _get_timers() -> dict[str, float]:
    """Timer start times (monotonic ms) for the current context."""
    timers = _timers_var.get(None)
    if timers is None:
        timers = {}
        _timers_var.set(timers)
    return timers


def _min_rank() -> int:
    level = _LEVELS.get(os.environ.get("LOG_LEVEL", "").lower(), _LEVELS["info"])
    return level.rank


def _format_duration(ms: float) -> str:
    """``12ms`` below a second, ``1.50s`` from there on."""
    return f"{int(ms)}ms" if ms < 1000 else f"{ms / 1000:.2f}s"


def _render(key: str, value: object) -> str:
    if isinstance(value, str):
        text = f'"{value if len(value) <= 200 else value[:197] + "..."}"'
    else:
        text = repr(value)
    return f"{_DIM}{key}={_RESET}{text}"


class Logger:
    """Logger bound to one component name, shown in brackets on each line."""

    def __init__(self, context: str) -> None:
        self.context = context

    def _emit(self, level_name: str, message: str, data: dict[str, object] | None = None) -> None:
        level = _LEVELS[level_name]
        if level.rank < _min_rank():
            return
        now = datetime.now(UTC)
        parts = [
            f"{_GREY}[{now:%H:%M:%S}.{now.microsecond // 1000:03d}]{_RESET}",
            f"{level.colour}{level.symbol}{_RESET}",
            f"{_BOLD}[{self.context}]{_RESET}",
            message,
        ]
        parts.extend(_render(k, v) for k, v in (data or {}).items())
        print(" ".join(parts), file=sys.stderr)

    def debug(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("debug", message, data)

    def info(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("info", message, data)

    def success(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("success", message, data)

    def warn(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("warn", message, data)

    def error(self, message: str, data: dict[str, object] | None = None) -> None:
        self._emit("error", message, data)

    def start_timer(self, label: str) -> None:
        _get_timers()[f"{self.context}:{label}"] = time.monotonic() * 1000

    def end_timer(self, label: str, message: str | None = None) -> float:
        """Stop timer *label*, log how long it ran and return that in ms.

        Returns 0.0 (and warns) for a label that was never started.
        """
        started = _get_timers().pop(f"{self.context}:{label}", None)
        if started is None:
            self.warn(f'Timer "{label}" was not started')
            return 0.0
        elapsed = time.monotonic() * 1000 - started
        self._emit("timing", message or label, {"timer": label, "took": _format_duration(elapsed)})
        return elapsed


def create_logger(context: str) -> Logger:
    return Logger(context)
