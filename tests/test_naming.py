"""Tests for whisker.content.naming — route naming from filenames."""

from __future__ import annotations

import pytest

from whisker.content.naming import (
    base_name,
    extension,
    file_name,
    is_content_file,
    is_markdown_file,
    is_meta_file,
    join_route,
    locale_of,
    meta_locale,
    remove_extension,
    route_segment,
)


class TestLocaleOf:
    """locale_of — locale tag between base name and extension."""

    def test_localized_mdx(self) -> None:
        assert locale_of("index.en.mdx") == "en"

    def test_plain_mdx_has_no_locale(self) -> None:
        assert locale_of("index.mdx") is None

    def test_region_locale(self) -> None:
        assert locale_of("intro.zh-CN.md") == "zh-CN"

    @pytest.mark.parametrize("ext", ["md", "mdx", "js", "jsx", "ts", "tsx", "json"])
    def test_recognized_extensions(self, ext: str) -> None:
        assert locale_of(f"page.fr.{ext}") == "fr"

    def test_unrecognized_extension(self) -> None:
        assert locale_of("page.fr.txt") is None


class TestBaseNameAndSegments:
    """base_name / route_segment / extension."""

    def test_base_name_stops_at_first_dot(self) -> None:
        assert base_name("intro.fr.mdx") == "intro"

    def test_base_name_without_dot(self) -> None:
        assert base_name("docs") == "docs"

    def test_index_collapses(self) -> None:
        assert route_segment("index.mdx") == ""
        assert route_segment("index.en.md") == ""

    def test_regular_segment(self) -> None:
        assert route_segment("about.md") == "about"

    def test_indexes_is_not_index(self) -> None:
        assert route_segment("indexes.md") == "indexes"

    @pytest.mark.parametrize("name", ["a.md", "page.mdx", "app.tsx", "util.js"])
    def test_extension_round_trip(self, name: str) -> None:
        assert remove_extension(name) + "." + extension(name) == name

    def test_extension_empty_without_dot(self) -> None:
        assert extension("README") == ""

    def test_file_name_from_path(self) -> None:
        assert file_name("/site/pages/docs/intro.fr.mdx") == "intro"


class TestJoinRoute:
    """join_route — route composition."""

    def test_root_join(self) -> None:
        assert join_route("/", "docs") == "/docs"

    def test_nested_join(self) -> None:
        assert join_route("/docs", "intro") == "/docs/intro"

    def test_empty_segment_is_parent(self) -> None:
        assert join_route("/docs", "") == "/docs"
        assert join_route("/", "") == "/"


class TestClassification:
    """File kind predicates."""

    @pytest.mark.parametrize("name", ["a.md", "a.mdx", "a.js", "a.jsx", "a.ts", "a.tsx", "a.en.mdx"])
    def test_content_files(self, name: str) -> None:
        assert is_content_file(name)

    @pytest.mark.parametrize("name", ["meta.json", "logo.png", "style.css"])
    def test_not_content_files(self, name: str) -> None:
        assert not is_content_file(name)

    def test_markdown(self) -> None:
        assert is_markdown_file("a.md")
        assert is_markdown_file("a.fr.mdx")
        assert not is_markdown_file("a.tsx")

    def test_meta_files(self) -> None:
        assert is_meta_file("meta.json")
        assert is_meta_file("meta.en.json")
        assert not is_meta_file("metadata.json")
        assert not is_meta_file("other.json")

    def test_meta_locale(self) -> None:
        assert meta_locale("meta.json") is None
        assert meta_locale("meta.zh-CN.json") == "zh-CN"
