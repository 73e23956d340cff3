"""Tree builder — compile a content directory into the page map.

Walks the pages directory recursively.  Within one directory every entry
is processed concurrently (``asyncio.gather``), and file reads run in
worker threads.  ``gather`` returns results in submission order, so the
children of every ``Directory`` keep the directory-enumeration order no
matter which read finishes first.

While walking, the builder also resolves the *active route*: the route of
the file being compiled, and its title.  The title comes from the
directory's ``meta.json`` (or the ``meta.<locale>.json`` matching the active
file's locale) and falls back to the file's base name.  Titles resolve
bottom-up as the recursion unwinds, so an ``index`` page's title can be
overridden by its parent directory's meta entry for the directory.

Failure semantics:
    - Unreadable directory or file: ``ContentReadError``, the whole build fails.
    - Malformed ``meta.json``: logged, replaced by an empty mapping.

"""

from __future__ import annotations

import asyncio
import json
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from whisker._errors import ContentReadError
from whisker.content.frontmatter import extract
from whisker.content.naming import (
    base_name,
    is_content_file,
    is_markdown_file,
    is_meta_file,
    join_route,
    locale_of,
    meta_locale,
    route_segment,
)
from whisker.content.pagemap import Directory, MetaFile, Page, PageMapNode, walk_pages

if TYPE_CHECKING:
    from whisker.observability.collector import BuildCollector

ROOT_ROUTE = "/"


@dataclass(frozen=True, slots=True)
class PageMapResult:
    """Outcome of one tree build.

    Attributes:
        tree: Root directory of the page map (route ``/``).
        active_route: Route of the active file, empty if it was not found.
        active_route_title: Resolved title of the active route.

    """

    tree: Directory
    active_route: str
    active_route_title: str


def _list_dir(path: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as exc:
        raise ContentReadError(path, exc.strerror or str(exc)) from exc


def read_text(path: Path) -> str:
    """Read a content file as UTF-8, raising ContentReadError on failure."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentReadError(path, str(exc)) from exc


def parse_meta(
    content: str,
    path: Path,
    collector: BuildCollector | None = None,
) -> dict[str, Any]:
    """Parse a meta file body; malformed JSON degrades to an empty mapping."""
    try:
        parsed = json.loads(content)
    except json.JSONDecodeError as exc:
        print(
            f"  Error parsing {path}, make sure it's a valid JSON: {exc}",
            file=sys.stderr,
        )
        if collector is not None:
            collector.record_metadata_skipped(str(path), reason=str(exc))
        return {}
    if not isinstance(parsed, dict):
        print(f"  Ignoring {path}: expected a JSON object", file=sys.stderr)
        if collector is not None:
            collector.record_metadata_skipped(str(path), reason="not a JSON object")
        return {}
    return parsed


def _title_from_meta(meta: dict[str, Any], name: str) -> str:
    value = meta.get(name)
    if isinstance(value, dict):
        value = value.get("title")
    return str(value) if value else name


class _TreeBuilder:
    """Mutable traversal state for one build (the active route context)."""

    __slots__ = (
        "_active_file",
        "_active_locale",
        "_collector",
        "active_route",
        "active_route_title",
    )

    def __init__(self, active_file: Path | None, collector: BuildCollector | None) -> None:
        self._active_file = active_file
        self._active_locale = locale_of(active_file.name) if active_file else None
        self._collector = collector
        self.active_route = ""
        self.active_route_title = ""

    async def build_directory(self, path: Path, route: str) -> tuple[PageMapNode, ...]:
        entries = await asyncio.to_thread(_list_dir, path)
        results = await asyncio.gather(
            *(self._build_entry(entry, route) for entry in entries)
        )

        # Last qualifying meta file in enumeration order wins.
        dir_meta: dict[str, Any] = {}
        for node in results:
            if isinstance(node, MetaFile) and (
                self._active_locale is None or node.locale == self._active_locale
            ):
                dir_meta = node.meta

        children = tuple(node for node in results if node is not None)
        for child in children:
            if self.active_route and child.route == self.active_route:
                self.active_route_title = _title_from_meta(dir_meta, child.name)
        return children

    async def _build_entry(self, entry: os.DirEntry[str], route: str) -> PageMapNode | None:
        path = Path(entry.path)
        entry_route = join_route(route, route_segment(entry.name))

        if entry.is_dir():
            children = await self.build_directory(path, entry_route)
            if not children:
                return None
            return Directory(name=entry.name, route=entry_route, children=children)

        if is_content_file(entry.name):
            if self._active_file is not None and path == self._active_file:
                self.active_route = entry_route

            front_matter = None
            if is_markdown_file(entry.name):
                text = await asyncio.to_thread(read_text, path)
                metadata = extract(text, source=str(path), collector=self._collector).metadata
                front_matter = metadata or None

            return Page(
                name=base_name(entry.name),
                route=entry_route,
                locale=locale_of(entry.name),
                front_matter=front_matter,
            )

        if is_meta_file(entry.name):
            text = await asyncio.to_thread(read_text, path)
            return MetaFile(
                meta=parse_meta(text, path, self._collector),
                locale=meta_locale(entry.name),
            )

        return None


async def build_page_map(
    root: str | Path,
    active_file: str | Path | None = None,
    *,
    collector: BuildCollector | None = None,
) -> PageMapResult:
    """Build the page map for ``root`` and resolve the active route.

    Args:
        root: Content root directory (served at ``/``).
        active_file: The file whose compilation triggered this build.
        collector: Optional collector receiving a ``TreeBuilt`` event.

    Raises:
        ContentReadError: If any directory or file cannot be read.

    """
    root_path = Path(os.path.abspath(root))
    active_path = Path(os.path.abspath(active_file)) if active_file is not None else None

    t0 = time.perf_counter()
    builder = _TreeBuilder(active_path, collector)
    children = await builder.build_directory(root_path, ROOT_ROUTE)
    tree = Directory(name=root_path.name, route=ROOT_ROUTE, children=children)

    if collector is not None:
        collector.record_tree_built(
            str(root_path),
            pages=len(walk_pages(tree)),
            active_route=builder.active_route,
            duration_ms=(time.perf_counter() - t0) * 1000,
        )

    return PageMapResult(
        tree=tree,
        active_route=builder.active_route,
        active_route_title=builder.active_route_title,
    )


def build_page_map_sync(
    root: str | Path,
    active_file: str | Path | None = None,
    *,
    collector: BuildCollector | None = None,
) -> PageMapResult:
    """Blocking wrapper around :func:`build_page_map`."""
    return asyncio.run(build_page_map(root, active_file, collector=collector))
