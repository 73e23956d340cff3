"""Tests for whisker.compiler.page — layout wrapper generation."""

from __future__ import annotations

import datetime
import json
from pathlib import Path

from whisker.compiler.page import generate_page_module, resolve_layout, resolve_layout_config
from whisker.content.pagemap import Directory, Page


def _module(**overrides: object) -> str:
    kwargs: dict[str, object] = {
        "filename": "hello.md",
        "route": "/hello",
        "meta": {"title": "Hello"},
        "page_map": Directory(name="pages", route="/", children=(Page(name="hello", route="/hello"),)),
        "layout": "my-theme",
    }
    kwargs.update(overrides)
    return generate_page_module("# Hello\n", **kwargs)  # type: ignore[arg-type]


class TestGeneratePageModule:
    """generate_page_module — imports, body, and layout call."""

    def test_imports(self) -> None:
        module = _module()
        assert module.startswith("import withLayout from 'my-theme'\n")
        assert "import { withSSG } from 'whisker/ssg'" in module
        assert "layoutConfig from" not in module

    def test_body_kept_between_imports_and_export(self) -> None:
        module = _module()
        assert module.index("# Hello") < module.index("export default function WhiskerPage")

    def test_embedded_values(self) -> None:
        module = _module()
        assert 'filename: "hello.md",' in module
        assert 'route: "/hello",' in module
        assert 'meta: {"title": "Hello"},' in module
        assert "}, null))(props)" in module

    def test_page_map_is_serialized_children(self) -> None:
        module = _module()
        line = next(line for line in module.splitlines() if "pageMap:" in line)
        payload = json.loads(line.split("pageMap:", 1)[1])
        assert payload == [{"name": "hello", "route": "/hello"}]

    def test_layout_config(self) -> None:
        module = _module(layout_config="/site/theme.config.js")
        assert "import layoutConfig from '/site/theme.config.js'" in module
        assert "}, layoutConfig))(props)" in module

    def test_dates_in_meta_are_stringified(self) -> None:
        module = _module(meta={"date": datetime.date(2024, 1, 2)})
        assert 'meta: {"date": "2024-01-02"},' in module

    def test_custom_ssg_module(self) -> None:
        assert "import { withSSG } from 'ssg-helper'" in _module(ssg_module="ssg-helper")


class TestResolveLayout:
    """Theme specifiers: package names pass through, paths resolve."""

    def test_package_name(self, tmp_path: Path) -> None:
        assert resolve_layout("my-theme", tmp_path) == "my-theme"

    def test_relative_path(self, tmp_path: Path) -> None:
        assert resolve_layout("./theme/layout.js", tmp_path) == (
            (tmp_path / "theme" / "layout.js").resolve().as_posix()
        )

    def test_absolute_path(self, tmp_path: Path) -> None:
        target = tmp_path / "layout.js"
        assert resolve_layout(str(target), Path("/elsewhere")) == target.resolve().as_posix()

    def test_layout_config_always_resolved(self, tmp_path: Path) -> None:
        assert resolve_layout_config("theme.config.js", tmp_path) == (
            (tmp_path / "theme.config.js").resolve().as_posix()
        )
