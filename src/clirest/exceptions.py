"""Custom exceptions for documentation generation."""

from pathlib import Path


class ClirestError(Exception):
    """Base exception for documentation generation errors."""

    pass


class DocWriteError(ClirestError):
    """Output page could not be created or written."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigError(ClirestError):
    """Configuration file is unreadable or invalid."""

    pass
