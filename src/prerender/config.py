"""Prerender configuration.

PrerenderConfig is the central configuration object, frozen after creation.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class PrerenderConfig:
    """Configuration for a prerender build.

    Attributes:
        root: Path to the project root directory.
              Always resolved to an absolute path on construction.
        build_dir: Directory holding the compiled build output (render module,
            bundles, optional ``stats.json``).
        output: Output directory for generated pages.
        entry: Asset or chunk name of the render module.  ``None`` selects
            the first chunk.
        paths: Request paths rendered first.  A single string is accepted
            and normalized to a one-element tuple.
        locals: Extra keys merged into every render call's locals.  These
            shadow the built-in ``path``, ``assets`` and ``build_stats`` keys
            when they collide.
        globals: Names injected into the render module's namespace before it
            is executed.
        crawl: Follow same-site links found in rendered pages.
        public_path: Prefix applied to every file in the asset manifest.
            Overrides ``publicPath`` from ``stats.json`` when set.

    """

    root: Path = field(default_factory=Path.cwd)
    build_dir: str = "build"
    output: Path = field(default_factory=lambda: Path("dist"))
    entry: str | None = None
    paths: tuple[str, ...] = ("/",)
    locals: Mapping[str, Any] = field(default_factory=dict)
    globals: Mapping[str, Any] = field(default_factory=dict)
    crawl: bool = False
    public_path: str = ""

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())
        if isinstance(self.paths, str):
            object.__setattr__(self, "paths", (self.paths,))
        elif not isinstance(self.paths, tuple):
            object.__setattr__(self, "paths", tuple(self.paths))
        object.__setattr__(self, "crawl", bool(self.crawl))

    @property
    def build_path(self) -> Path:
        """Absolute path to the build directory."""
        return self.root / self.build_dir

    @property
    def output_path(self) -> Path:
        """Absolute path to output directory."""
        if self.output.is_absolute():
            return self.output
        return self.root / self.output
