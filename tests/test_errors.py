"""Tests for the whisker error hierarchy."""

from pathlib import Path

import pytest

from whisker._errors import (
    ConfigError,
    ContentError,
    ContentReadError,
    ExportError,
    WhiskerError,
)


@pytest.mark.parametrize("error", [ConfigError, ContentError, ContentReadError, ExportError])
def test_all_errors_are_whisker_errors(error: type[Exception]) -> None:
    assert issubclass(error, WhiskerError)


def test_read_error_is_content_error() -> None:
    assert issubclass(ContentReadError, ContentError)


def test_read_error_carries_path() -> None:
    error = ContentReadError(Path("/site/pages/a.md"), "Permission denied")
    assert error.path == Path("/site/pages/a.md")
    assert str(error) == "Cannot read /site/pages/a.md: Permission denied"
