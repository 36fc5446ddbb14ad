"""Tests for prerender.config."""

from pathlib import Path

import pytest

from prerender.config import PrerenderConfig


class TestPrerenderConfig:
    """PrerenderConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = PrerenderConfig()
        assert config.build_dir == "build"
        assert config.entry is None
        assert config.paths == ("/",)
        assert config.locals == {}
        assert config.globals == {}
        assert config.crawl is False
        assert config.public_path == ""

    def test_frozen(self) -> None:
        config = PrerenderConfig()
        with pytest.raises(AttributeError):
            config.crawl = True  # type: ignore[misc]

    def test_paths_resolve_from_root(self, tmp_path: Path) -> None:
        config = PrerenderConfig(root=tmp_path)
        assert config.build_path == tmp_path / "build"
        assert config.output_path == tmp_path / "dist"

    def test_absolute_output_preserved(self, tmp_path: Path) -> None:
        output = Path("/tmp/custom-output")
        config = PrerenderConfig(root=tmp_path, output=output)
        assert config.output_path == output

    def test_single_path_string(self) -> None:
        config = PrerenderConfig(paths="/about")  # type: ignore[arg-type]
        assert config.paths == ("/about",)

    def test_path_list_to_tuple(self) -> None:
        config = PrerenderConfig(paths=["/", "/a"])  # type: ignore[arg-type]
        assert config.paths == ("/", "/a")

    def test_empty_paths_kept_empty(self) -> None:
        config = PrerenderConfig(paths=[])  # type: ignore[arg-type]
        assert config.paths == ()

    def test_crawl_coerced_to_bool(self) -> None:
        config = PrerenderConfig(crawl=1)  # type: ignore[arg-type]
        assert config.crawl is True

    def test_relative_root_resolved_to_absolute(self) -> None:
        config = PrerenderConfig(root=Path("site"))
        assert config.root.is_absolute()
