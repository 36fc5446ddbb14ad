"""Prerender application — load a build, render its pages, write the site.

``build()`` is the primary entry point; it drives one compilation through
its output phase with a ``StaticSiteGenerator`` subscribed.
"""

import asyncio
import time
from pathlib import Path

from prerender.banner import print_banner, print_summary
from prerender.config_loader import load_config
from prerender.export.static import ExportResult, write_generated
from prerender.generator import StaticSiteGenerator
from prerender.host.compilation import Compilation
from prerender.observability.events import AssetSkipped, PageRendered


def build(root: str | Path = ".", **kwargs: object) -> ExportResult:
    """Render the site and write generated pages to the output directory.

    Loads the build directory, renders the configured paths (and every page
    they link to when ``crawl`` is on), and writes each generated asset.
    Render failures do not stop the build; they are printed and returned in
    ``ExportResult.errors``.

    Args:
        root: Path to the project root directory.
        **kwargs: Override PrerenderConfig fields.

    Raises:
        ConfigError: If the config or build directory cannot be loaded.
        ExportError: If generated pages cannot be written.

    """
    config = load_config(Path(root), **kwargs)
    t0 = time.perf_counter()

    compilation = Compilation.from_directory(
        config.build_path, public_path=config.public_path,
    )
    load_ms = (time.perf_counter() - t0) * 1000

    print_banner(config, len(compilation.store), load_ms=load_ms)

    StaticSiteGenerator.from_config(config).apply(compilation)
    asyncio.run(compilation.run_output_phase())

    files = write_generated(compilation.store, config.output_path)
    elapsed = (time.perf_counter() - t0) * 1000

    log = compilation.collector.log
    result = ExportResult(
        files=tuple(files),
        errors=tuple(compilation.errors),
        duration_ms=elapsed,
        output_dir=config.output_path,
        render_calls=log.count(PageRendered),
        skipped=log.count(AssetSkipped),
    )
    print_summary(result)
    return result
