"""Logging setup shared by the matgen pipeline stages.

Each stage logs under ``matgen.<stage>`` (``reconcile``, ``types``,
``builder``...). The console shows the stage next to the tool name so an
unresolved tag or a failed extraction can be traced to the step that
reported it.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "matgen"
_CONSOLE_FORMAT = "[%(stage)s] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(stage)s: %(message)s"


class StageFormatter(logging.Formatter):
    """Formatter exposing ``%(stage)s``, e.g. ``matgen:reconcile``."""

    def format(self, record: logging.LogRecord) -> str:
        record.stage = stage_of(record.name)
        return super().format(record)


def stage_of(logger_name: str) -> str:
    if logger_name == _LOGGER_NAME:
        return _LOGGER_NAME
    prefix = f"{_LOGGER_NAME}."
    if logger_name.startswith(prefix):
        return f"{_LOGGER_NAME}:{logger_name[len(prefix):]}"
    return logger_name


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a stage logger under the matgen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console and optional file handlers to the matgen logger.

    ``quiet`` limits the console to warnings (unresolved tags, duplicate
    materials). The file sink always records at least INFO.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    file_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(min(console_level, file_level) if log_file is not None else console_level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(console_level)
    stream_handler.setFormatter(StageFormatter(_CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(StageFormatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["StageFormatter", "configure_logging", "get_logger", "stage_of"]
