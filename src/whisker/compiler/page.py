"""Page wrapper generation — wrap a page body in the site layout.

The wrapper imports the layout and the static-generation helper, keeps the
page body (front matter already stripped) in place, and exports a default
component handing the layout everything it needs to render navigation::

    import withLayout from 'my-theme'
    import { withSSG } from 'whisker/ssg'

    # Hello

    export default function WhiskerPage (props) {
        return withSSG(withLayout({
          filename: "hello.md",
          route: "/hello",
          meta: {"title": "Hello"},
          pageMap: [...]
        }, null))(props)
    }

"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from whisker.content.pagemap import Directory, PageMapNode, serialize


def _slash(path: str) -> str:
    return path.replace("\\", "/")


def _js(value: Any) -> str:
    # Front matter may hold YAML dates; stringify anything JSON can't encode.
    return json.dumps(value, ensure_ascii=False, default=str)


def resolve_layout(theme: str, root: Path) -> str:
    """Return the import specifier of the layout.

    Themes starting with ``.`` or ``/`` are paths resolved against ``root``;
    anything else is a package name and is returned unchanged.
    """
    if theme.startswith((".", "/")):
        return _slash(str((root / theme).resolve()))
    return theme


def resolve_layout_config(theme_config: str, root: Path) -> str:
    """Absolute, forward-slashed path of the layout configuration module."""
    return _slash(str((root / theme_config).resolve()))


def generate_page_module(
    body: str,
    *,
    filename: str,
    route: str,
    meta: dict[str, Any],
    page_map: Directory | Sequence[PageMapNode],
    layout: str,
    layout_config: str | None = None,
    ssg_module: str = "whisker/ssg",
) -> str:
    """Wrap ``body`` into a module rendering it through the layout."""
    imports = [
        f"import withLayout from '{layout}'",
        f"import {{ withSSG }} from '{ssg_module}'",
    ]
    if layout_config:
        imports.append(f"import layoutConfig from '{layout_config}'")

    suffix = "\n".join([
        "export default function WhiskerPage (props) {",
        "    return withSSG(withLayout({",
        f"      filename: {_js(_slash(filename))},",
        f"      route: {_js(_slash(route))},",
        f"      meta: {_js(meta)},",
        f"      pageMap: {_js(serialize(page_map))}",
        f"    }}, {'layoutConfig' if layout_config else 'null'}))(props)",
        "}",
    ])

    return "\n".join(imports) + "\n\n" + body + "\n\n" + suffix + "\n"
