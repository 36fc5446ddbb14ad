"""Shared test fixtures for prerender."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from prerender.export.store import MemoryAssetStore
from prerender.host.compilation import BuildStats, Compilation
from prerender.observability.collector import BuildCollector

RENDER_SOURCE = textwrap.dedent('''\
    PAGES = {
        "/": '<a href="about">About</a> <a href="/docs/">Docs</a>',
        "/about": '<a href="/">Home</a>',
        "/docs/": '<a href="intro">Intro</a> <a href="https://example.com">Out</a>',
        "/docs/intro": '<a href="../">Back</a>',
    }


    def render(locals):
        body = PAGES.get(locals["path"], "<p>not found</p>")
        return f"<title>{SITE_NAME}</title>{body}"
''')


@pytest.fixture
def store() -> MemoryAssetStore:
    return MemoryAssetStore()


@pytest.fixture
def sink() -> BuildCollector:
    return BuildCollector()


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal project with a build directory and config.

    Returns the path to the project root.  ``build/render.py`` renders a
    four-page site whose pages link to each other.
    """
    build = tmp_path / "build"
    build.mkdir()
    (build / "render.py").write_text(RENDER_SOURCE)
    (build / "main.js").write_text("console.log('hi');\n")
    (tmp_path / "prerender.yaml").write_text(
        "entry: render\n"
        "globals:\n"
        "  SITE_NAME: Docs\n"
    )
    return tmp_path


def make_compilation(source: str, *, chunk: str = "render") -> Compilation:
    """Create an in-memory compilation whose only chunk is *source*."""
    filename = f"{chunk}.py"
    return Compilation(
        {filename: source},
        BuildStats({chunk: filename}, "/static/"),
    )
