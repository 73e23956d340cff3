"""Route naming — locale tags, base names and route segments from filenames.

Filenames follow ``<base>.<ext>`` or ``<base>.<locale>.<ext>``::

    index.mdx        -> base "index", no locale, route segment ""
    about.fr.md      -> base "about", locale "fr", route segment "about"
    meta.zh-CN.json  -> meta file for locale "zh-CN"

All functions are pure string operations and never raise.
"""

from __future__ import annotations

import posixpath
import re

_LOCALE_RE = re.compile(r"\.([a-zA-Z-]+)\.(?:mdx?|jsx?|tsx?|json)$")
_BASE_RE = re.compile(r"^([^.]+)")
_CONTENT_RE = re.compile(r"\.(?:mdx?|jsx?|tsx?)$")
_MARKDOWN_RE = re.compile(r"\.mdx?$")
_META_RE = re.compile(r"^meta(?:\.([a-zA-Z-]+))?\.json$")

CONTENT_EXTENSIONS = ("md", "mdx", "js", "jsx", "ts", "tsx")


def locale_of(filename: str) -> str | None:
    """Return the locale tag of ``<base>.<locale>.<ext>``, or None."""
    match = _LOCALE_RE.search(filename)
    return match.group(1) if match else None


def base_name(filename: str) -> str:
    """Return the filename prefix up to the first ``.``."""
    match = _BASE_RE.match(filename)
    return match.group(1) if match else ""


# The page map names pages by their extensionless base.
remove_extension = base_name


def extension(filename: str) -> str:
    """Return everything after the first ``.`` (empty if there is none)."""
    _, dot, rest = filename.partition(".")
    return rest if dot else ""


def route_segment(filename: str) -> str:
    """Return the URL segment for a file or directory name.

    ``index`` collapses to the empty segment so that ``docs/index.mdx``
    serves ``/docs`` rather than ``/docs/index``.
    """
    name = base_name(filename)
    return "" if name == "index" else name


def join_route(parent: str, segment: str) -> str:
    """Join a route and a segment; an empty segment yields the parent."""
    if not segment:
        return parent
    return posixpath.join(parent, segment)


def file_name(resource_path: str) -> str:
    """Base name of the final path component of ``resource_path``."""
    return base_name(posixpath.basename(resource_path.replace("\\", "/")))


def is_content_file(filename: str) -> bool:
    return _CONTENT_RE.search(filename) is not None


def is_markdown_file(filename: str) -> bool:
    return _MARKDOWN_RE.search(filename) is not None


def is_meta_file(filename: str) -> bool:
    return _META_RE.match(filename) is not None


def meta_locale(filename: str) -> str | None:
    """Locale of a ``meta.<locale>.json`` file; None for plain ``meta.json``."""
    match = _META_RE.match(filename)
    return match.group(1) if match else None
