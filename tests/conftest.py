"""Shared test fixtures for whisker."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from whisker.content.pagemap import MetaFile, Page


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a small bilingual project and return its root.

    Layout::

        pages/
          index.md          front matter: title Home
          about.md          no front matter
          meta.json         {"index": "Home", "about": "About Us", "guide": "The Guide"}
          docs/
            intro.en.md     exports getStaticProps
            intro.fr.md
            meta.en.json    {"intro": "Introduction"}
            meta.fr.json    {"intro": "Présentation"}
          guide/
            index.md
          empty/            pruned
          assets/logo.png   pruned (no admissible file)

    """
    pages = tmp_path / "pages"
    pages.mkdir()
    (pages / "index.md").write_text("---\ntitle: Home\n---\n\n# Welcome\n\nThis is the home page.\n")
    (pages / "about.md").write_text("# About\n\nWho we are.\n")
    (pages / "meta.json").write_text(json.dumps({"index": "Home", "about": "About Us", "guide": "The Guide"}))

    docs = pages / "docs"
    docs.mkdir()
    (docs / "intro.en.md").write_text(
        "---\ntitle: Intro\n---\n\n"
        "export async function getStaticProps(context) {\n"
        "  return { props: {} }\n"
        "}\n\n"
        "# Intro\n\nHello world.\n"
    )
    (docs / "intro.fr.md").write_text("# Intro\n\nBonjour le monde.\n")
    (docs / "meta.en.json").write_text(json.dumps({"intro": "Introduction"}))
    (docs / "meta.fr.json").write_text(json.dumps({"intro": "Présentation"}, ensure_ascii=False))

    guide = pages / "guide"
    guide.mkdir()
    (guide / "index.md").write_text("# Guide\n")

    (pages / "empty").mkdir()
    assets = pages / "assets"
    assets.mkdir()
    (assets / "logo.png").write_bytes(b"\x89PNG")

    return tmp_path


@pytest.fixture
def pages_dir(tmp_project: Path) -> Path:
    return tmp_project / "pages"


def page(name: str, locale: str | None = None, route: str | None = None) -> Page:
    """Build a Page node for filter tests."""
    return Page(name=name, route=route or f"/{name}", locale=locale)


def meta(locale: str | None = None, **titles: str) -> MetaFile:
    """Build a MetaFile node for filter tests."""
    return MetaFile(meta=dict(titles), locale=locale)
