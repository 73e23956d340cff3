"""Tests for whisker.content.frontmatter — YAML header extraction."""

from __future__ import annotations

import pytest

from whisker.content.frontmatter import FrontMatter, extract
from whisker.observability.collector import BuildCollector
from whisker.observability.events import MetadataSkipped


class TestExtract:
    """extract — split a document into metadata and body."""

    def test_header_and_body(self) -> None:
        result = extract("---\ntitle: Hello\ntags: [a, b]\n---\n# Hello\n")
        assert result.metadata == {"title": "Hello", "tags": ["a", "b"]}
        assert result.body == "# Hello\n"

    def test_no_header(self) -> None:
        text = "# Just a page\n"
        result = extract(text)
        assert result.metadata == {}
        assert result.body == text

    def test_unclosed_header_is_body(self) -> None:
        text = "---\ntitle: Hello\n# no closing delimiter\n"
        result = extract(text)
        assert result.metadata == {}
        assert result.body == text

    def test_empty_header(self) -> None:
        result = extract("---\n---\nbody\n")
        assert result.metadata == {}
        assert result.body == "body\n"

    def test_non_mapping_header_ignored(self) -> None:
        result = extract("---\n- a\n- b\n---\nbody\n")
        assert result.metadata == {}
        assert result.body == "body\n"

    def test_invalid_yaml_is_logged(self, capsys: pytest.CaptureFixture[str]) -> None:
        collector = BuildCollector()
        result = extract("---\ntitle: [unclosed\n---\nbody\n", source="bad.md", collector=collector)
        assert result.metadata == {}
        assert result.body == "body\n"
        assert "bad.md" in capsys.readouterr().err
        events = collector.log.query(event_type=MetadataSkipped)
        assert len(events) == 1
        assert events[0].path == "bad.md"

    def test_result_is_frozen(self) -> None:
        result = FrontMatter(metadata={}, body="")
        with pytest.raises(AttributeError):
            result.body = "x"  # type: ignore[misc]
