"""Static site generator — render pages from a compilation's render module.

Subscribes to a compilation's output phase.  When the phase runs it locates
the render module, evaluates it, and renders the configured paths (crawling
onward when enabled) into the compilation's asset store::

    generator = StaticSiteGenerator(entry="render", paths=["/", "/about"], crawl=True)
    generator.apply(compilation)
    await compilation.run_output_phase()

Configuration errors (missing entry, non-callable export, malformed stats)
abort the pass before any page is rendered and are recorded once in the
compilation's error sink.  Per-page errors are recorded by the traversal.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from prerender._errors import ConfigError
from prerender.export.traversal import render_all
from prerender.host.artifacts import build_asset_manifest, find_artifact
from prerender.host.evaluate import evaluate_module, resolve_render

if TYPE_CHECKING:
    from prerender._types import RenderFunc
    from prerender.config import PrerenderConfig
    from prerender.host.compilation import Compilation


class StaticSiteGenerator:
    """Render a site from a build's render module.

    Args:
        entry: Asset or chunk name of the render module (first chunk if omitted).
        paths: Request paths to render; a single string is accepted.
        locals: Extra keys merged into every render call's locals.
        globals: Names injected into the render module before evaluation.
        crawl: Follow same-site links found in rendered pages.

    """

    __slots__ = ("crawl", "entry", "globals", "locals", "paths")

    def __init__(
        self,
        entry: str | None = None,
        paths: str | Sequence[str] | None = None,
        locals: Mapping[str, Any] | None = None,
        globals: Mapping[str, Any] | None = None,
        *,
        crawl: bool = False,
    ) -> None:
        self.entry = entry
        if isinstance(paths, str):
            self.paths: tuple[str, ...] = (paths,)
        elif paths is None:
            self.paths = ("/",)
        else:
            self.paths = tuple(paths)
        self.locals = locals
        self.globals = globals
        self.crawl = bool(crawl)

    @classmethod
    def from_config(cls, config: PrerenderConfig) -> StaticSiteGenerator:
        return cls(
            entry=config.entry,
            paths=config.paths,
            locals=config.locals,
            globals=config.globals,
            crawl=config.crawl,
        )

    def apply(self, compilation: Compilation) -> None:
        """Subscribe to *compilation*'s output phase."""
        compilation.on_output(self._on_output)

    async def _on_output(self, compilation: Compilation) -> None:
        try:
            render = self.load_render(compilation)
            assets = build_asset_manifest(compilation.stats)
        except Exception as exc:
            compilation.collector.record_error("config", self.entry or "", exc)
            return

        await render_all(
            self.crawl,
            self.locals,
            self.paths,
            render,
            assets,
            compilation.stats,
            compilation.store,
            compilation.collector,
        )

    def load_render(self, compilation: Compilation) -> RenderFunc:
        """Locate, evaluate and return the render function.

        Raises:
            ConfigError: If the entry is missing or exports no callable.

        """
        source = find_artifact(self.entry, compilation)
        if source is None:
            msg = f'Source file not found: "{self.entry}"'
            raise ConfigError(msg)

        identifier = self.entry or next(iter(compilation.stats.assets_by_chunk_name))
        module = evaluate_module(source, identifier, self.globals)
        return resolve_render(module, identifier)
