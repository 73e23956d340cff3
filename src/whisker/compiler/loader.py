"""Per-file compilation — the entry point the host build pipeline calls.

The host invokes :func:`compile_source` once per content file with the
file's text and a :class:`LoaderContext`.  One invocation:

1. declares the pages directory as a dependency, so the host reruns the
   compiler whenever the content tree changes;
2. builds the page map and resolves the file's route and title;
3. strips the front matter;
4. adds markdown pages to the search index (production builds);
5. returns one of:

   - the bare body when no theme is configured,
   - a locale dispatch module when locales are configured and the file is
     not being imported as a raw variant,
   - a page wrapper module embedding the (locale-filtered) page map.

Read failures propagate as ``ContentReadError``; nothing is retried.
"""

from __future__ import annotations

import asyncio
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from whisker.compiler.page import generate_page_module, resolve_layout, resolve_layout_config
from whisker.content.frontmatter import extract
from whisker.content.locale_filter import filter_locale
from whisker.content.naming import is_markdown_file, locale_of
from whisker.content.tree import build_page_map
from whisker.i18n.analyzer import analyze_locale_variants
from whisker.i18n.dispatch import generate_dispatch_module

if TYPE_CHECKING:
    from whisker._types import ModuleKind
    from whisker.config import WhiskerConfig
    from whisker.export.search_index import SearchIndex
    from whisker.observability.collector import BuildCollector

# Locale used for the search index of files without a locale tag.
DEFAULT_INDEX_LOCALE = "default"


@dataclass(slots=True)
class LoaderContext:
    """What the host pipeline knows about the file being compiled.

    Attributes:
        resource_path: Absolute path of the source file.
        resource_query: Query string of the import (``?whisker-raw``).
        on_dependency: Host callback receiving each declared dependency.
        dependencies: Directories declared during this invocation.

    """

    resource_path: Path
    resource_query: str = ""
    on_dependency: Callable[[Path], None] | None = None
    dependencies: list[Path] = field(default_factory=list)

    def add_dependency(self, directory: Path) -> None:
        self.dependencies.append(directory)
        if self.on_dependency is not None:
            self.on_dependency(directory)


async def compile_source(
    source: str,
    context: LoaderContext,
    config: WhiskerConfig,
    *,
    search_index: SearchIndex | None = None,
    collector: BuildCollector | None = None,
) -> str:
    """Compile one content file into the module source the host serves.

    Args:
        source: Raw text of the file.
        context: Host-provided file context.
        config: Site configuration.
        search_index: Accumulator for per-locale search indexes.
        collector: Optional event collector.

    Raises:
        ContentReadError: If the page map or a locale variant cannot be read.

    """
    t0 = time.perf_counter()
    resource_path = Path(context.resource_path).resolve()
    filename = resource_path.name
    file_locale = locale_of(filename)

    def done(module: str, kind: ModuleKind, route: str) -> str:
        if collector is not None:
            collector.record_module(
                str(resource_path),
                kind,
                route=route,
                duration_ms=(time.perf_counter() - t0) * 1000,
            )
        return module

    context.add_dependency(config.pages_path)
    result = await build_page_map(config.pages_path, resource_path, collector=collector)

    front = extract(source, source=str(resource_path), collector=collector)

    if config.search_index and search_index is not None and is_markdown_file(filename):
        await search_index.add(
            file_locale or DEFAULT_INDEX_LOCALE,
            route=result.active_route,
            title=result.active_route_title,
            front_matter=front.metadata,
            content=front.body,
        )

    if not config.theme:
        print(f"  No theme configured: {filename} is emitted without a layout", file=sys.stderr)
        if collector is not None:
            collector.record_theme_missing(str(resource_path))
        return done(front.body, "raw", result.active_route)

    if config.i18n and config.raw_query not in context.resource_query:
        descriptor = await analyze_locale_variants(resource_path, config.default_locale)
        if descriptor.files:
            module = generate_dispatch_module(
                descriptor,
                raw_query=config.raw_query,
                router_module=config.router_module,
            )
            return done(module, "dispatch", result.active_route)

    page_map = result.tree
    if config.i18n and file_locale:
        page_map = filter_locale(page_map, file_locale, config.default_locale)

    module = generate_page_module(
        front.body,
        filename=filename,
        route=result.active_route,
        meta=front.metadata,
        page_map=page_map,
        layout=resolve_layout(config.theme, config.root),
        layout_config=(
            resolve_layout_config(config.theme_config, config.root)
            if config.theme_config
            else None
        ),
        ssg_module=config.ssg_module,
    )
    return done(module, "page", result.active_route)


def compile_source_sync(
    source: str,
    context: LoaderContext,
    config: WhiskerConfig,
    *,
    search_index: SearchIndex | None = None,
    collector: BuildCollector | None = None,
) -> str:
    """Blocking wrapper around :func:`compile_source`."""
    return asyncio.run(
        compile_source(
            source, context, config, search_index=search_index, collector=collector
        )
    )
