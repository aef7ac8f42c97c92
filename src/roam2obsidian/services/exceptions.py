"""Custom exceptions for roam2obsidian services."""

from pathlib import Path
from typing import Optional


class ConversionError(Exception):
    """Base exception for anything that aborts a conversion run."""


class ExportLoadError(ConversionError):
    """Raised when the Roam export cannot be read or decoded.

    Attributes:
        path: Path to the export file
    """

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{message}: {path}")


class DateParseError(ConversionError, ValueError):
    """Raised when a daily-note title or date link is not a real calendar date.

    Attributes:
        text: The date text that failed to parse (e.g. "February 30th, 2024")
    """

    def __init__(self, text: str, reason: Optional[str] = None):
        self.text = text
        message = f"invalid date {text!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FileAccessError(ConversionError):
    """Raised when an output directory or file cannot be written.

    Attributes:
        path: Path that could not be created or written
    """

    def __init__(self, path: Path, message: str = "Could not write output file"):
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class ConfigError(ConversionError):
    """Raised when a configuration file cannot be loaded or validated."""
