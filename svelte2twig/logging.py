"""Logging for svelte2twig runs.

Translation diagnostics travel through the standard ``logging`` hierarchy with
their code and node kind attached as record attributes, so handlers can render
or filter on them.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .diagnostics import Diagnostic

_LOGGER_NAME = "svelte2twig"

CONSOLE_FORMAT = "[svelte2twig] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class DiagnosticFormatter(logging.Formatter):
    """Appends ``[code @ NodeKind]`` to records emitted for translation diagnostics."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        code = getattr(record, "diagnostic_code", None)
        if not code:
            return message
        node_kind = getattr(record, "node_kind", None)
        tag = f"{code} @ {node_kind}" if node_kind else code
        return f"{message} [{tag}]"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the svelte2twig hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def log_diagnostic(logger: logging.Logger, component: str, diagnostic: Diagnostic) -> None:
    """Emit one translation diagnostic for ``component`` at its own level."""
    logger.log(
        diagnostic.level,
        "%s: %s",
        component,
        diagnostic.message,
        extra={
            "component": component,
            "diagnostic_code": diagnostic.code,
            "node_kind": diagnostic.node_kind,
        },
    )


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the package logger with console output and an optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated CLI invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(DiagnosticFormatter(CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        # The file keeps every diagnostic, even on a quiet console.
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(DiagnosticFormatter(FILE_FORMAT))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["DiagnosticFormatter", "configure_logging", "get_logger", "log_diagnostic"]
