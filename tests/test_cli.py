"""Tests for prerender._cli — argument parsing and command dispatch."""

from __future__ import annotations

from pathlib import Path

import pytest

from prerender._cli import _build_parser, main


class TestBuildParser:
    """_build_parser — CLI argument parsing."""

    def test_build_default_args(self) -> None:
        args = _build_parser().parse_args(["build"])
        assert args.command == "build"
        assert args.root == "."
        assert args.build_dir is None
        assert args.output is None
        assert args.entry is None
        assert args.paths is None
        assert args.crawl is None
        assert args.public_path is None

    def test_repeated_paths(self) -> None:
        args = _build_parser().parse_args(["build", "--path", "/", "--path", "/about"])
        assert args.paths == ["/", "/about"]

    def test_build_all_flags(self) -> None:
        args = _build_parser().parse_args([
            "build", "my-site/",
            "--build-dir", "out/server",
            "--output", "public",
            "--entry", "render",
            "--crawl",
            "--public-path", "/static/",
        ])
        assert args.root == "my-site/"
        assert args.build_dir == "out/server"
        assert args.output == "public"
        assert args.entry == "render"
        assert args.crawl is True
        assert args.public_path == "/static/"

    def test_no_command_returns_none(self) -> None:
        args = _build_parser().parse_args([])
        assert args.command is None


class TestMain:
    """main — dispatch and exit codes."""

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "prerender" in capsys.readouterr().out

    def test_build_command(self, tmp_project: Path) -> None:
        main(["build", str(tmp_project), "--crawl"])
        assert (tmp_project / "dist" / "docs" / "intro" / "index.html").is_file()

    def test_config_error_exits_nonzero(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "Build directory not found" in capsys.readouterr().err

    def test_render_errors_exit_nonzero(self, tmp_project: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", str(tmp_project), "--entry", "missing"])
        assert exc_info.value.code == 1
