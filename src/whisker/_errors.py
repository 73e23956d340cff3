"""Whisker error hierarchy.

All whisker-specific errors inherit from WhiskerError for easy catching.
"""

from pathlib import Path


class WhiskerError(Exception):
    """Base error for all whisker operations."""


class ConfigError(WhiskerError):
    """Invalid or missing configuration."""


class ContentError(WhiskerError):
    """Error in content processing (page map, locale analysis)."""


class ContentReadError(ContentError):
    """A content file or directory could not be read.

    Fatal for the whole compilation: no partial page map is returned.

    Attributes:
        path: The file or directory that failed.

    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


class ExportError(WhiskerError):
    """Error while writing build artifacts (search index)."""
