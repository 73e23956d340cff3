"""Content layer — the pages directory as a locale-aware page map.

Handles route naming, front matter, building the page map, filtering it
for one locale, and watching the pages tree for changes.
"""

from whisker.content.frontmatter import FrontMatter, extract
from whisker.content.locale_filter import filter_locale
from whisker.content.pagemap import Directory, MetaFile, Page, PageMapNode, serialize
from whisker.content.tree import PageMapResult, build_page_map, build_page_map_sync
from whisker.content.watcher import ChangeEvent, ContentWatcher

__all__ = [
    "ChangeEvent",
    "ContentWatcher",
    "Directory",
    "FrontMatter",
    "MetaFile",
    "Page",
    "PageMapNode",
    "PageMapResult",
    "build_page_map",
    "build_page_map_sync",
    "extract",
    "filter_locale",
    "serialize",
]
