"""Page map nodes — the route tree handed to the layout.

The page map is a pure ownership tree: a ``Directory`` owns its children,
nothing points back to a parent.  All nodes are frozen dataclasses so a
filtered tree can share unchanged nodes with the full tree.

Serialized form (what ends up embedded in generated modules)::

    {"name": "docs", "route": "/docs", "children": [...]}
    {"name": "intro", "route": "/docs/intro", "locale": "en",
     "frontMatter": {"title": "Intro"}}
    {"name": "meta.json", "meta": {"intro": "Introduction"}, "locale": "en"}

Optional fields are omitted when absent.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

META_FILE_NAME = "meta.json"


@dataclass(frozen=True, slots=True)
class Page:
    """One content file.

    Attributes:
        name: Extensionless base name (shared by all locale variants).
        route: URL path of the page.
        locale: Locale tag from the filename, None for the default variant.
        front_matter: Header metadata; None unless the header is non-empty.

    """

    name: str
    route: str
    locale: str | None = None
    front_matter: dict[str, Any] | None = field(default=None, hash=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "route": self.route}
        if self.front_matter:
            data["frontMatter"] = self.front_matter
        if self.locale is not None:
            data["locale"] = self.locale
        return data


@dataclass(frozen=True, slots=True)
class MetaFile:
    """A ``meta.json`` / ``meta.<locale>.json`` navigation override.

    Attributes:
        meta: Mapping of child name to title (or nested settings).
        locale: Locale tag, None for the locale-less default.

    """

    meta: dict[str, Any] = field(default_factory=dict, hash=False)
    locale: str | None = None
    name: str = META_FILE_NAME

    @property
    def route(self) -> None:
        """Meta files have no route of their own."""
        return None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "meta": self.meta}
        if self.locale is not None:
            data["locale"] = self.locale
        return data


@dataclass(frozen=True, slots=True)
class Directory:
    """A directory with at least one admissible descendant.

    Attributes:
        name: Directory name on disk.
        route: URL prefix of the subtree.
        children: Child nodes in directory-enumeration order.

    """

    name: str
    route: str
    children: tuple[PageMapNode, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "children": [child.to_dict() for child in self.children],
            "route": self.route,
        }


type PageMapNode = Directory | Page | MetaFile


def serialize(nodes: Directory | Sequence[PageMapNode]) -> list[dict[str, Any]]:
    """Serialize a page map to plain JSON-compatible data.

    A ``Directory`` serializes as its children, which is the shape the
    layout receives as ``pageMap``.
    """
    if isinstance(nodes, Directory):
        nodes = nodes.children
    return [node.to_dict() for node in nodes]


def walk_pages(nodes: Directory | Sequence[PageMapNode]) -> list[Page]:
    """Return every Page in the tree, depth first, in tree order."""
    if isinstance(nodes, Directory):
        nodes = nodes.children
    pages: list[Page] = []
    for node in nodes:
        if isinstance(node, Directory):
            pages.extend(walk_pages(node))
        elif isinstance(node, Page):
            pages.append(node)
    return pages
