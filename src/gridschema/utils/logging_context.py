"""Context-aware logging utilities for GridSchema."""

import contextvars
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

# Context variables for tracking what is currently being built
current_file = contextvars.ContextVar[str | None]("current_file", default=None)
current_sheet = contextvars.ContextVar[str | None]("current_sheet", default=None)
current_table = contextvars.ContextVar[str | None]("current_table", default=None)
current_operation = contextvars.ContextVar[str | None]("current_operation", default=None)

_CONTEXT_FIELDS: tuple[tuple[str, contextvars.ContextVar[str | None]], ...] = (
    ("file", current_file),
    ("sheet", current_sheet),
    ("table", current_table),
    ("op", current_operation),
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with the active build context."""

    def process(self, msg: str, kwargs: Mapping[str, Any]) -> tuple[str, Mapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        context_parts = []

        for name, var in _CONTEXT_FIELDS:
            value = var.get()
            if value:
                extra[name] = value
                context_parts.append(f"{name}={value}")

        kwargs["extra"] = extra

        if context_parts:
            msg = f"[{', '.join(context_parts)}] {msg}"

        return msg, kwargs


def get_contextual_logger(name: str) -> ContextualLogger:
    """Get a logger that automatically includes context information.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logging.getLogger(name), {})


class _ContextScope:
    """Sets a context variable for the duration of a ``with`` block."""

    var: contextvars.ContextVar[str | None]

    def __init__(self, value: str):
        self.value = value
        self.token: contextvars.Token | None = None

    def __enter__(self):
        self.token = self.var.set(self.value)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token:
            self.var.reset(self.token)
            self.token = None


class FileContext(_ContextScope):
    """Tracks the workbook file being loaded."""

    var = current_file


class SheetContext(_ContextScope):
    """Tracks the sheet a header is being built from."""

    var = current_sheet


class TableContext(_ContextScope):
    """Tracks the address range being built, e.g. ``A1:C2``."""

    var = current_table


class OperationContext(_ContextScope):
    """Tracks the current operation (build, style, generate)."""

    var = current_operation


def configure_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    """Configure root logging once at application startup."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        filename=str(log_file) if log_file else None,
    )
