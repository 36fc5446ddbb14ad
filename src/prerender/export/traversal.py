"""Traversal engine — render a path set and, optionally, crawl what it links to.

Each request path is rendered concurrently.  Every output body is stored
under its mapped asset name unless that name already exists; only a fresh
write may extend the crawl.  Because the store never overwrites, it doubles
as the visited set: a page linking back to an already rendered page ends
that branch without rendering again, and the traversal terminates once no
new asset names are produced.

Failure handling:
    Errors are caught at the narrowest step (render call, store write, link
    extraction) and recorded in the sink.  Sibling branches keep going and
    ``render_all()`` itself never raises for a per-path failure.

Concurrency:
    All tasks run on one event loop and suspend only while awaiting the
    render function.  The ``has()`` / ``add()`` pair has no await between
    them, so the check-then-write is atomic with respect to other tasks.

"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from prerender.export.invoker import invoke
from prerender.export.links import extract_relative_links
from prerender.export.paths import map_to_asset_name

if TYPE_CHECKING:
    from prerender._types import AssetContent, AssetManifest, RenderFunc, RequestPath
    from prerender.export.store import AssetStore
    from prerender.observability.collector import BuildCollector


def build_locals(
    path: RequestPath,
    assets: AssetManifest,
    build_stats: object,
    user_locals: Mapping[str, Any] | None,
) -> Mapping[str, Any]:
    """Assemble the read-only locals for one render call.

    User keys are merged last and win over ``path``, ``assets`` and
    ``build_stats`` on collision.

    """
    merged: dict[str, Any] = {
        "path": path,
        "assets": assets,
        "build_stats": build_stats,
    }
    if user_locals:
        merged.update(user_locals)
    return MappingProxyType(merged)


async def render_all(
    crawl: bool,
    user_locals: Mapping[str, Any] | None,
    paths: Sequence[RequestPath],
    render: RenderFunc,
    assets: AssetManifest,
    build_stats: object,
    store: AssetStore,
    sink: BuildCollector,
) -> None:
    """Render every path in *paths* (and, when crawling, every page they reach).

    Returns once every path, including recursively discovered ones, has been
    attempted.  Per-path failures are recorded in *sink*.

    """
    await asyncio.gather(*(
        _render_path(
            path, crawl, user_locals, render, assets, build_stats, store, sink,
        )
        for path in paths
    ))


async def _render_path(
    path: RequestPath,
    crawl: bool,
    user_locals: Mapping[str, Any] | None,
    render: RenderFunc,
    assets: AssetManifest,
    build_stats: object,
    store: AssetStore,
    sink: BuildCollector,
) -> None:
    locals = build_locals(path, assets, build_stats, user_locals)

    t0 = time.perf_counter()
    try:
        output = await invoke(render, locals)
    except Exception as exc:
        sink.record_error("render", path, exc)
        return
    elapsed = (time.perf_counter() - t0) * 1000

    outputs = output if isinstance(output, Mapping) else {path: output}
    sink.record_render(path, outputs=len(outputs), duration_ms=elapsed)

    await asyncio.gather(*(
        _emit(
            output_path, body, crawl, user_locals, render, assets,
            build_stats, store, sink,
        )
        for output_path, body in outputs.items()
    ))


async def _emit(
    output_path: RequestPath,
    body: AssetContent,
    crawl: bool,
    user_locals: Mapping[str, Any] | None,
    render: RenderFunc,
    assets: AssetManifest,
    build_stats: object,
    store: AssetStore,
    sink: BuildCollector,
) -> None:
    """Store one output body and crawl it if the asset name is new."""
    try:
        asset_name = map_to_asset_name(output_path)
        if store.has(asset_name):
            sink.record_skip(asset_name, output_path)
            return
        store.add(asset_name, body)
    except Exception as exc:
        sink.record_error("store", str(output_path), exc)
        return

    links: list[str] = []
    if crawl:
        try:
            links = extract_relative_links(body, output_path)
        except Exception as exc:
            sink.record_error("extract", output_path, exc)

    size = len(body.encode("utf-8")) if isinstance(body, str) else len(body)
    sink.record_emit(asset_name, output_path, size_bytes=size, links_found=len(links))

    # Already-stored pages are not rendered again.
    frontier = [link for link in links if not store.has(map_to_asset_name(link))]
    if frontier:
        await render_all(
            crawl, user_locals, frontier, render, assets, build_stats, store, sink,
        )
