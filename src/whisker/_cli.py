"""Whisker CLI — whisker compile / whisker map / whisker watch.

Entry point for the ``whisker`` command-line interface.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from whisker._errors import WhiskerError

if TYPE_CHECKING:
    from whisker.config import WhiskerConfig


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the whisker CLI."""
    parser = argparse.ArgumentParser(
        prog="whisker",
        description="Locale-aware page map compiler.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # whisker compile
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile one content file and print the generated module",
    )
    compile_parser.add_argument("file", help="Content file to compile")
    compile_parser.add_argument("--root", default=".", help="Project root directory")
    compile_parser.add_argument("--query", default="", help="Resource query of the import")
    compile_parser.add_argument("--theme", default=None, help="Layout module or path")
    compile_parser.add_argument(
        "--production", action="store_true", default=None,
        help="Production build (writes search indexes)",
    )

    # whisker map
    map_parser = subparsers.add_parser(
        "map",
        help="Print the page map as JSON",
    )
    map_parser.add_argument("--root", default=".", help="Project root directory")
    map_parser.add_argument("--locale", default=None, help="Filter for one locale")

    # whisker watch
    watch_parser = subparsers.add_parser(
        "watch",
        help="Rebuild the page map whenever the pages tree changes",
    )
    watch_parser.add_argument("--root", default=".", help="Project root directory")

    return parser


def _get_version() -> str:
    from whisker import __version__

    return __version__


def _load(root: str, **overrides: object) -> WhiskerConfig:
    from whisker.config_loader import load_config

    return load_config(Path(root), **overrides)


async def _compile(args: argparse.Namespace) -> str:
    from whisker.compiler.loader import LoaderContext, compile_source
    from whisker.content.tree import read_text
    from whisker.export.search_index import SearchIndex

    config = _load(args.root, theme=args.theme, production=args.production)
    path = Path(args.file).resolve()
    index = SearchIndex.from_config(config)
    try:
        return await compile_source(
            read_text(path),
            LoaderContext(resource_path=path, resource_query=args.query),
            config,
            search_index=index,
        )
    finally:
        index.close()


async def _map(args: argparse.Namespace) -> str:
    from whisker.content.locale_filter import filter_locale
    from whisker.content.pagemap import serialize
    from whisker.content.tree import build_page_map

    config = _load(args.root)
    result = await build_page_map(config.pages_path)
    tree = result.tree
    if args.locale:
        tree = filter_locale(tree, args.locale, config.default_locale)
    return json.dumps(serialize(tree), indent=2, ensure_ascii=False, default=str)


async def _watch(args: argparse.Namespace) -> None:
    from whisker.content.pagemap import walk_pages
    from whisker.content.tree import build_page_map
    from whisker.content.watcher import ContentWatcher

    config = _load(args.root)
    watcher = ContentWatcher(config)
    watcher.start()
    print(f"  Watching {config.pages_path}", file=sys.stderr)
    try:
        async for event in watcher.changes():
            if event.category == "config":
                config = _load(args.root)
            try:
                result = await build_page_map(config.pages_path)
            except WhiskerError as exc:
                print(f"  Rebuild failed: {exc}", file=sys.stderr)
                continue
            print(
                f"  {event.kind} {event.path.name}: "
                f"{len(walk_pages(result.tree))} pages",
                file=sys.stderr,
            )
    finally:
        watcher.stop()


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.command == "compile":
            print(asyncio.run(_compile(args)))
        elif args.command == "map":
            print(asyncio.run(_map(args)))
        elif args.command == "watch":
            asyncio.run(_watch(args))
    except WhiskerError as exc:
        print(f"whisker: {exc}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
