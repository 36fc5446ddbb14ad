"""Prerender CLI — prerender build.

Entry point for the ``prerender`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the prerender CLI."""
    parser = argparse.ArgumentParser(
        prog="prerender",
        description="Render static pages from a build's render module.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # prerender build
    build_parser = subparsers.add_parser(
        "build",
        help="Render pages into the output directory",
    )
    build_parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    build_parser.add_argument("--build-dir", default=None, help="Build output directory")
    build_parser.add_argument("--output", default=None, help="Output directory")
    build_parser.add_argument("--entry", default=None, help="Render module asset or chunk name")
    build_parser.add_argument(
        "--path",
        dest="paths",
        action="append",
        default=None,
        help="Request path to render (repeatable, default: /)",
    )
    build_parser.add_argument(
        "--crawl",
        action="store_true",
        default=None,
        help="Follow same-site links found in rendered pages",
    )
    build_parser.add_argument(
        "--public-path", default=None, help="Prefix for asset manifest paths",
    )

    return parser


def _get_version() -> str:
    """Get the package version."""
    from prerender import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from prerender._errors import PrerenderError
    from prerender.app import build

    if args.command == "build":
        try:
            result = build(
                root=args.root,
                build_dir=args.build_dir,
                output=args.output,
                entry=args.entry,
                paths=args.paths,
                crawl=args.crawl,
                public_path=args.public_path,
            )
        except PrerenderError as exc:
            print(f"  Error: {exc}", file=sys.stderr)
            sys.exit(1)
        if result.errors:
            sys.exit(1)


if __name__ == "__main__":
    main()
