"""Logging setup shared by the docs-check CLI and service."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "docscheck"

# Chatty dependencies that are only worth hearing from when troubleshooting.
_QUIET_DEPENDENCIES = ("claude_agent_sdk", "httpx")


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``docscheck`` or one of its components (``docscheck.scanner`` ...)."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


class _ComponentFormatter(logging.Formatter):
    """Exposes the emitting component as ``%(component)s``."""

    def format(self, record: logging.LogRecord) -> str:
        prefix = f"{_LOGGER_NAME}."
        record.component = (
            record.name[len(prefix):] if record.name.startswith(prefix) else record.name
        )
        return super().format(record)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send docs-check records to stderr, and to ``log_file`` when given.

    Progress goes to stderr so stdout stays reserved for the report (JSON
    mode must remain parseable). Verbose runs log at DEBUG, name the
    component on every line and let SDK and HTTP client records through.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated main() calls in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_format = (
        "[docs-check] %(levelname)s %(component)s: %(message)s"
        if verbose
        else "[docs-check] %(levelname)s %(message)s"
    )
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(_ComponentFormatter(console_format))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            _ComponentFormatter("%(asctime)s %(levelname)-7s %(component)s: %(message)s")
        )
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    for name in _QUIET_DEPENDENCIES:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger


__all__ = ["configure_logging", "get_logger"]
