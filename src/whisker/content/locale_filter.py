"""Locale fallback filter — the page map as seen from one locale.

Directories are kept and recursed into unconditionally.  Among the pages and
meta files of one directory, each logical name resolves to:

1. every exact match: the node's locale equals the requested locale, or the
   node has no locale and the requested locale is the default locale;
2. otherwise the *fallback candidate*: the last node in enumeration order
   that has no locale or the default locale.

An exact match anywhere in the directory suppresses the fallback for that
name, even when the exact match comes after the candidate.  Exact matches
stay in place; fallbacks are appended after them, ordered by the first time
their name got a candidate.

Example, default locale ``en``::

    [a.md, a.en.md, a.fr.md]
    "fr" -> [a.fr.md]
    "de" -> [a.en.md]     (a.en.md overwrote a.md as the candidate)

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import overload

from whisker.content.pagemap import Directory, MetaFile, Page, PageMapNode


@overload
def filter_locale(
    nodes: Directory, locale: str | None, default_locale: str | None
) -> Directory: ...


@overload
def filter_locale(
    nodes: Sequence[PageMapNode], locale: str | None, default_locale: str | None
) -> tuple[PageMapNode, ...]: ...


def filter_locale(
    nodes: Directory | Sequence[PageMapNode],
    locale: str | None,
    default_locale: str | None,
) -> Directory | tuple[PageMapNode, ...]:
    """Return the page map visible to ``locale``.

    Args:
        nodes: A ``Directory`` (returns a ``Directory``) or a sequence of
            sibling nodes (returns a tuple).
        locale: Requested locale.  None is treated as the default locale.
        default_locale: The site's default locale.

    """
    if isinstance(nodes, Directory):
        return replace(nodes, children=_filter_children(nodes.children, locale, default_locale))
    return _filter_children(nodes, locale, default_locale)


def _filter_children(
    nodes: Sequence[PageMapNode],
    locale: str | None,
    default_locale: str | None,
) -> tuple[PageMapNode, ...]:
    is_default_locale = not locale or locale == default_locale

    output: list[PageMapNode] = []
    resolved: set[str] = set()
    # Insertion order is the order names first received a candidate.
    fallbacks: dict[str, Page | MetaFile] = {}

    for node in nodes:
        if isinstance(node, Directory):
            output.append(filter_locale(node, locale, default_locale))
            continue

        exact = node.locale == locale or (node.locale is None and is_default_locale)
        if exact:
            resolved.add(node.name)
            output.append(node)
        elif node.name not in resolved and (
            node.locale is None or node.locale == default_locale
        ):
            fallbacks[node.name] = node

    output.extend(node for name, node in fallbacks.items() if name not in resolved)
    return tuple(output)
