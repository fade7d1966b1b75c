"""Exception hierarchy for matgen runs."""

from __future__ import annotations

from pathlib import Path


class MatgenError(RuntimeError):
    """Base class for errors that abort a generation run."""


class ConfigError(MatgenError):
    """Raised when the configuration file cannot be parsed."""


class FrontMatterError(MatgenError):
    """Raised when a documentation file lacks a delimited front-matter block."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class ExtractionError(MatgenError):
    """Raised when the external type extraction fails or leaves no index."""

    def __init__(self, locale: str, reason: str) -> None:
        super().__init__(f"type extraction for {locale} failed: {reason}")
        self.locale = locale
        self.reason = reason


__all__ = ["ConfigError", "ExtractionError", "FrontMatterError", "MatgenError"]
