"""Search index — per-locale plain-text index files.

Every markdown page compiled in a production build is appended to the index
of its locale.  Each locale gets one TOML document under the asset
directory, ``index-<locale>.toml``::

    [input]
    minimum_indexed_substring_length = 2
    title_boost = "Ridiculous"
    stemming = "English"

    [[input.files]]
    title = "Getting Started"
    url = "/docs/getting-started"
    contents = "Getting Started\\nHello world.\\n"
    filetype = "PlainText"

The index is rewritten in full after every addition, so a partially built
site always has a usable index on disk.

Thread Safety:
    ``SearchIndex`` is owned by the caller and shared by the compilations of
    one build.  Additions to the same locale are serialized with a per-locale
    ``asyncio.Lock``; routes already indexed are skipped.

"""

from __future__ import annotations

import asyncio
import html
import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from patitas import Markdown

from whisker._errors import ExportError

if TYPE_CHECKING:
    from whisker.config import WhiskerConfig
    from whisker.observability.collector import BuildCollector

_TAG_RE = re.compile(r"<[^>]+>")
# MDX module statements are code, not prose.
_MODULE_STATEMENT_RE = re.compile(r"^(?:import|export) ")
_BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")


def _toml_string(value: str) -> str:
    # JSON string escapes are a subset of TOML basic string escapes.
    return json.dumps(value, ensure_ascii=False)


def stemming_language(locale: str) -> str:
    """Stemmer for a locale: English for ``en`` and ``en-*``, otherwise none."""
    return "English" if locale.lower().startswith("en") else "None"


def plain_text(source: str, renderer: Markdown | None = None) -> str:
    """Reduce a markdown body to searchable plain text, one line per block."""
    blocks = [
        block for block in _BLOCK_SPLIT_RE.split(source)
        if block.strip() and not _MODULE_STATEMENT_RE.match(block.lstrip())
    ]
    if not blocks:
        return ""
    md = renderer if renderer is not None else Markdown(plugins=["table"])
    rendered = html.unescape(_TAG_RE.sub("", md("\n\n".join(blocks))))
    lines = [line.strip() for line in rendered.splitlines() if line.strip()]
    return "".join(f"{line}\n" for line in lines)


@dataclass(slots=True)
class _LocaleIndex:
    header: str
    blocks: list[str] = field(default_factory=list)
    routes: set[str] = field(default_factory=set)

    def render(self) -> str:
        return self.header + "".join(self.blocks)


class SearchIndex:
    """Accumulates per-locale search indexes for one build.

    Args:
        output_dir: Directory receiving ``index-<locale>.toml`` files.
        production: Indexing only happens in production builds.
        collector: Optional collector receiving ``IndexWritten`` events.

    """

    def __init__(
        self,
        output_dir: Path,
        *,
        production: bool = True,
        collector: BuildCollector | None = None,
    ) -> None:
        self._output_dir = output_dir
        self._production = production
        self._collector = collector
        self._indexes: dict[str, _LocaleIndex] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._renderer = Markdown(plugins=["table"])

    @classmethod
    def from_config(
        cls,
        config: WhiskerConfig,
        collector: BuildCollector | None = None,
    ) -> SearchIndex:
        return cls(config.asset_path, production=config.production, collector=collector)

    @property
    def locales(self) -> tuple[str, ...]:
        """Locales with an index, in the order they were first seen."""
        return tuple(self._indexes)

    def index_path(self, locale: str) -> Path:
        return self._output_dir / f"index-{locale}.toml"

    def render(self, locale: str) -> str:
        """Current TOML document for ``locale`` (empty if never indexed)."""
        index = self._indexes.get(locale)
        return index.render() if index is not None else ""

    async def add(
        self,
        locale: str,
        *,
        route: str,
        title: str,
        front_matter: dict[str, Any],
        content: str,
    ) -> bool:
        """Index one page and flush the locale's file.

        Returns True if the page was added, False if indexing is disabled or
        the route is already in the index.

        Raises:
            ExportError: If the index file cannot be written.

        """
        if not self._production:
            return False

        lock = self._locks.setdefault(locale, asyncio.Lock())
        async with lock:
            index = self._indexes.get(locale) or _LocaleIndex(header=_header(locale))
            if route in index.routes:
                return False

            block = _document_block(
                title=str(front_matter.get("title") or title),
                url=route,
                contents=plain_text(content, self._renderer),
            )
            target = self.index_path(locale)
            # The buffer only takes the page once it is on disk.
            await asyncio.to_thread(self._write, target, index.render() + block)

            index.routes.add(route)
            index.blocks.append(block)
            self._indexes.setdefault(locale, index)

        if self._collector is not None:
            self._collector.record_index_written(
                locale, route, str(target), entries=len(index.routes)
            )
        return True

    def _write(self, target: Path, text: str) -> None:
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot write search index {target}: {exc}"
            raise ExportError(msg) from exc

    def close(self) -> None:
        """Drop the in-memory buffers at the end of a build."""
        self._indexes.clear()
        self._locks.clear()


def _header(locale: str) -> str:
    return (
        "[input]\n"
        "minimum_indexed_substring_length = 2\n"
        'title_boost = "Ridiculous"\n'
        f"stemming = {_toml_string(stemming_language(locale))}\n\n"
    )


def _document_block(*, title: str, url: str, contents: str) -> str:
    return (
        "[[input.files]]\n"
        f"title = {_toml_string(title)}\n"
        f"url = {_toml_string(url)}\n"
        f"contents = {_toml_string(contents)}\n"
        'filetype = "PlainText"\n'
    )
