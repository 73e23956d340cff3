"""Sibling locale analyzer — find the locale variants of a page.

Given ``pages/docs/intro.fr.mdx``, the variants are every sibling named
``intro.<locale>.<ext>``.  Each variant is read and checked for exported
data-fetching functions:

- ``getServerSideProps``: runs on every request
- ``getStaticProps``: runs at build time

Detection is a line-anchored regex, not a parse.  Star re-exports
(``export * from "./data"``), unspaced braces (``export {getStaticProps}``)
and indented declarations are missed.
"""

from __future__ import annotations

import asyncio
import os
import re
from dataclasses import dataclass
from pathlib import Path

from whisker._errors import ContentReadError
from whisker.content.naming import CONTENT_EXTENSIONS, file_name, locale_of
from whisker.content.tree import read_text

SERVER_FETCH = "getServerSideProps"
STATIC_FETCH = "getStaticProps"

_SERVER_FETCH_RE = re.compile(rf"^export .+ {SERVER_FETCH}[= (]", re.MULTILINE)
_STATIC_FETCH_RE = re.compile(rf"^export .+ {STATIC_FETCH}[= (]", re.MULTILINE)

_EXT_PATTERN = "|".join(CONTENT_EXTENSIONS)


@dataclass(frozen=True, slots=True)
class LocaleVariant:
    """One locale variant of a page.

    Attributes:
        name: Filename of the variant (``intro.fr.mdx``).
        locale: Locale tag from the filename.
        has_server_fetch: Exports ``getServerSideProps``.
        has_static_fetch: Exports ``getStaticProps``.

    """

    name: str
    locale: str | None
    has_server_fetch: bool = False
    has_static_fetch: bool = False


@dataclass(frozen=True, slots=True)
class DispatchDescriptor:
    """Summary of a locale variant group, input to code generation.

    Attributes:
        files: Variants in directory-enumeration order.
        default_index: Index of the default-locale variant (0 if absent).
        has_any_server_fetch: Some variant exports ``getServerSideProps``.
        has_any_static_fetch: Some variant exports ``getStaticProps``.

    """

    files: tuple[LocaleVariant, ...]
    default_index: int = 0
    has_any_server_fetch: bool = False
    has_any_static_fetch: bool = False


def exports_server_fetch(source: str) -> bool:
    return _SERVER_FETCH_RE.search(source) is not None


def exports_static_fetch(source: str) -> bool:
    return _STATIC_FETCH_RE.search(source) is not None


def variant_pattern(base: str) -> re.Pattern[str]:
    """Regex matching ``<base>.<locale>.<ext>`` filenames."""
    return re.compile(rf"^{re.escape(base)}\.[a-zA-Z-]+\.(?:{_EXT_PATTERN})$")


def _list_names(directory: Path) -> list[str]:
    try:
        return os.listdir(directory)
    except OSError as exc:
        raise ContentReadError(directory, exc.strerror or str(exc)) from exc


async def analyze_locale_variants(
    file_path: str | Path,
    default_locale: str | None,
) -> DispatchDescriptor:
    """Collect and classify the locale variants sharing ``file_path``'s base name.

    Raises:
        ContentReadError: If the directory or a variant cannot be read.

    """
    path = Path(file_path)
    directory = path.parent
    pattern = variant_pattern(file_name(str(path)))

    names = [
        name for name in await asyncio.to_thread(_list_names, directory)
        if pattern.match(name)
    ]
    sources = await asyncio.gather(
        *(asyncio.to_thread(read_text, directory / name) for name in names)
    )

    variants: list[LocaleVariant] = []
    default_index = 0
    for name, source in zip(names, sources, strict=True):
        locale = locale_of(name)
        if locale == default_locale:
            default_index = len(variants)
        variants.append(
            LocaleVariant(
                name=name,
                locale=locale,
                has_server_fetch=exports_server_fetch(source),
                has_static_fetch=exports_static_fetch(source),
            )
        )

    return DispatchDescriptor(
        files=tuple(variants),
        default_index=default_index,
        has_any_server_fetch=any(v.has_server_fetch for v in variants),
        has_any_static_fetch=any(v.has_static_fetch for v in variants),
    )
