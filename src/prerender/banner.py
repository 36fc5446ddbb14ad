"""Build banner and summary — compact status output on stderr.

Detects ``NO_COLOR`` / ``TERM`` for safe fallback to plain text.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prerender.config import PrerenderConfig
    from prerender.export.static import ExportResult


# ---------------------------------------------------------------------------
# ANSI helpers — respect NO_COLOR (https://no-color.org)
# ---------------------------------------------------------------------------

def _supports_color() -> bool:
    """Return True if the terminal supports ANSI colors."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


_COLOR = _supports_color()

_RESET = "\033[0m" if _COLOR else ""
_BOLD = "\033[1m" if _COLOR else ""
_DIM = "\033[2m" if _COLOR else ""
_GREEN = "\033[32m" if _COLOR else ""
_YELLOW = "\033[33m" if _COLOR else ""
_RED = "\033[31m" if _COLOR else ""


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def print_banner(
    config: PrerenderConfig,
    asset_count: int,
    *,
    load_ms: float = 0.0,
) -> None:
    """Print the build banner to stderr.

    Args:
        config: Resolved PrerenderConfig.
        asset_count: Number of build assets loaded.
        load_ms: Time spent loading the build in milliseconds.

    """
    from prerender import __version__

    lines: list[str] = [
        "",
        f"  {_BOLD}prerender{_RESET} {_DIM}v{__version__}{_RESET}  {_YELLOW}[build]{_RESET}",
        f"  {_DIM}{'─' * 43}{_RESET}",
    ]

    timing = f" {_DIM}in {load_ms:.0f}ms{_RESET}" if load_ms > 0 else ""
    lines.append(f"  {_DIM}├─{_RESET} {_plural(asset_count, 'build asset')} loaded{timing}")
    lines.append(f"  {_DIM}├─{_RESET} entry: {config.entry or '(first chunk)'}")
    lines.append(f"  {_DIM}├─{_RESET} paths: {', '.join(config.paths) or '(none)'}")
    if config.crawl:
        lines.append(f"  {_DIM}├─{_RESET} {_GREEN}crawl{_RESET} — following same-site links")
    lines.append(f"  {_DIM}└─{_RESET} output: {_DIM}{config.output_path}{_RESET}")
    lines.append("")

    print("\n".join(lines), file=sys.stderr)


def print_summary(result: ExportResult) -> None:
    """Print the build completion summary (and any recorded errors) to stderr."""
    lines = [
        "",
        "─" * 41,
        f"  Rendered {_plural(result.total_pages, 'page')}"
        f" {_DIM}({_plural(result.render_calls, 'render call')},"
        f" {_plural(result.skipped, 'duplicate')} skipped){_RESET}",
        f"  Output: {result.output_dir}",
        f"  Done in {result.duration_ms:.0f}ms",
    ]

    if result.errors:
        lines.append("")
        lines.append(f"  {_RED}{_plural(len(result.errors), 'error')}{_RESET}")
        for error in result.errors:
            lines.extend(f"    {line}" for line in error.rstrip().splitlines())

    print("\n".join(lines), file=sys.stderr)
