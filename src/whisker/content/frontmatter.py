"""Front matter extraction — YAML header block and remaining body.

A document carries front matter when its first line is ``---`` and a later
line is ``---``.  The block between them is parsed with PyYAML.  The header
is treated as an opaque key-value mapping; anything that does not parse to
a mapping yields empty metadata.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from whisker.observability.collector import BuildCollector

_DELIMITER = "---"


@dataclass(frozen=True, slots=True)
class FrontMatter:
    """Result of splitting a document.

    Attributes:
        metadata: Parsed header mapping (empty when absent or invalid).
        body: Document text after the header.

    """

    metadata: dict[str, Any] = field(default_factory=dict)
    body: str = ""


def _split(text: str) -> tuple[str, str] | None:
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != _DELIMITER:
        return None
    for index in range(1, len(lines)):
        if lines[index].strip() == _DELIMITER:
            return "".join(lines[1:index]), "".join(lines[index + 1:])
    return None


def extract(
    text: str,
    *,
    source: str | None = None,
    collector: BuildCollector | None = None,
) -> FrontMatter:
    """Split ``text`` into front matter metadata and body.

    Args:
        text: Raw document text.
        source: File path used in diagnostics.
        collector: Optional collector receiving a ``MetadataSkipped`` event
            when the header cannot be parsed.

    """
    parts = _split(text)
    if parts is None:
        return FrontMatter(metadata={}, body=text)

    header, body = parts
    try:
        loaded = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        where = source or "<source>"
        print(f"  Front matter error: {where}: {exc}", file=sys.stderr)
        if collector is not None:
            collector.record_metadata_skipped(where, reason=str(exc))
        loaded = None

    metadata = loaded if isinstance(loaded, dict) else {}
    return FrontMatter(metadata=metadata, body=body)
