"""Custom exceptions for autocopyright."""

from pathlib import Path


class AutoCopyrightError(Exception):
    """Base exception for autocopyright."""


class ConfigError(AutoCopyrightError):
    """Raised when configuration is missing or invalid."""


class DiscoveryError(AutoCopyrightError):
    """Raised when the output directory cannot be scanned for files."""


class FileProcessingError(AutoCopyrightError):
    """Raised when a single file cannot be read, parsed or written."""

    def __init__(self, path: Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path


class MarkupError(AutoCopyrightError):
    """Raised when HTML text cannot be parsed into a document."""
