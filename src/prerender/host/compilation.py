"""Compilation — the host build a render pass runs against.

A compilation bundles what the build produced (assets and stats), the
asset store generated pages are added to, the error sink, and a single
output-phase hook that generators subscribe to.

Build directory layout::

    build/
        render.py          # render module (entry)
        main.js            # any other build output
        stats.json         # optional: {"assetsByChunkName": {...}, "publicPath": "/"}

Without ``stats.json`` every top-level ``.py`` file becomes a chunk named
after its stem (``render.py`` -> chunk ``render``).
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias

from prerender._errors import ConfigError
from prerender.export.store import MemoryAssetStore
from prerender.observability.collector import BuildCollector

if TYPE_CHECKING:
    from pathlib import Path

    from prerender._types import AssetContent

OutputHook: TypeAlias = Callable[["Compilation"], Awaitable[None]]

_STATS_FILE = "stats.json"


@dataclass(frozen=True, slots=True)
class BuildStats:
    """Build metadata handed to render functions as ``build_stats``.

    Attributes:
        assets_by_chunk_name: Chunk name -> emitted file, or files when the
            build emits several per chunk (e.g. source maps).
        public_path: URL prefix for emitted files.

    """

    assets_by_chunk_name: dict[str, str | list[str]] = field(default_factory=dict)
    public_path: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the stats in their ``stats.json`` shape."""
        return {
            "assetsByChunkName": dict(self.assets_by_chunk_name),
            "publicPath": self.public_path,
        }


class Compilation:
    """One render pass over a build's output.

    Args:
        assets: Build assets, name -> content.
        stats: Build metadata.
        collector: Error sink and event recorder (a fresh one by default).

    """

    __slots__ = ("_hooks", "collector", "stats", "store")

    def __init__(
        self,
        assets: dict[str, AssetContent] | None = None,
        stats: BuildStats | None = None,
        collector: BuildCollector | None = None,
    ) -> None:
        self.store = MemoryAssetStore(assets)
        self.stats = stats if stats is not None else BuildStats()
        self.collector = collector if collector is not None else BuildCollector()
        self._hooks: list[OutputHook] = []

    @classmethod
    def from_directory(cls, build_dir: Path, *, public_path: str = "") -> Compilation:
        """Load every file under *build_dir* into a new compilation.

        Files that decode as UTF-8 are stored as text, others as bytes.

        Raises:
            ConfigError: If *build_dir* is missing or ``stats.json`` is invalid.

        """
        if not build_dir.is_dir():
            msg = f"Build directory not found: {build_dir}"
            raise ConfigError(msg)

        assets: dict[str, AssetContent] = {}
        for file in sorted(build_dir.rglob("*")):
            if not file.is_file() or "__pycache__" in file.parts:
                continue
            name = file.relative_to(build_dir).as_posix()
            if name == _STATS_FILE:
                continue
            data = file.read_bytes()
            try:
                assets[name] = data.decode("utf-8")
            except UnicodeDecodeError:
                assets[name] = data

        stats = _read_stats(build_dir / _STATS_FILE, assets)
        if public_path:
            stats = BuildStats(stats.assets_by_chunk_name, public_path)
        return cls(assets, stats)

    @property
    def errors(self) -> list[str]:
        """Formatted tracebacks of failures recorded during this pass."""
        return self.collector.errors()

    # ----- Output phase -----

    def on_output(self, hook: OutputHook) -> None:
        """Subscribe *hook* to the output phase."""
        self._hooks.append(hook)

    async def run_output_phase(self) -> None:
        """Run every output-phase hook in subscription order."""
        for hook in self._hooks:
            await hook(self)


def _read_stats(path: Path, assets: dict[str, AssetContent]) -> BuildStats:
    """Read ``stats.json``, or derive chunks from top-level ``.py`` files."""
    if not path.is_file():
        chunks: dict[str, str | list[str]] = {
            name.removesuffix(".py"): name
            for name in assets
            if name.endswith(".py") and "/" not in name
        }
        return BuildStats(chunks)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        msg = f"Invalid build stats in {path}: {exc}"
        raise ConfigError(msg) from exc

    chunks = data.get("assetsByChunkName") if isinstance(data, dict) else None
    if not isinstance(chunks, dict):
        msg = f"{path} must contain an 'assetsByChunkName' mapping"
        raise ConfigError(msg)
    for chunk, value in chunks.items():
        if not _is_chunk_value(value):
            msg = (
                f"{path}: chunk {chunk!r} must name a file or a list of files, "
                f"got {value!r}"
            )
            raise ConfigError(msg)
    public_path = data.get("publicPath") or ""
    return BuildStats(dict(chunks), str(public_path))


def _is_chunk_value(value: object) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, list) and all(isinstance(v, str) for v in value)
