"""Artifact lookup — find the render module and build the asset manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prerender._types import AssetContent, AssetManifest
    from prerender.host.compilation import BuildStats, Compilation


def _module_file(value: str | list[str]) -> str | None:
    """Pick the render module among a chunk's files (first ``.py``)."""
    if isinstance(value, list):
        return next((name for name in value if name.endswith(".py")), None)
    return value


def _primary_file(value: str | list[str]) -> str:
    """Pick the file a chunk is published as.

    The first ``.js`` file wins; chunks without one (stylesheets, images)
    publish their first file that is not a source map.

    """
    if isinstance(value, list):
        script = next((name for name in value if name.endswith(".js")), None)
        if script is not None:
            return script
        return next((name for name in value if not name.endswith(".map")), "")
    return value


def find_artifact(entry: str | None, compilation: Compilation) -> AssetContent | None:
    """Return the source of the render module, or ``None`` if not found.

    *entry* is tried as an asset name first, then as a chunk name.  With no
    *entry*, the first chunk is used.

    """
    chunks = compilation.stats.assets_by_chunk_name
    if not entry:
        entry = next(iter(chunks), None)
        if entry is None:
            return None

    if compilation.store.has(entry):
        return compilation.store[entry]

    value = chunks.get(entry)
    if not value:
        return None
    filename = _module_file(value)
    if filename is None:
        return None
    return compilation.store.get(filename)


def build_asset_manifest(stats: BuildStats) -> AssetManifest:
    """Map each chunk name to its public file path.

    ``{"main": "main.js"}`` with ``public_path="/static/"``
    -> ``{"main": "/static/main.js"}``

    Chunks listing several files publish their ``.js`` module, or failing
    that their first file that is not a ``.map``.

    """
    manifest: AssetManifest = {}
    for chunk, value in stats.assets_by_chunk_name.items():
        filename = _primary_file(value)
        if stats.public_path:
            filename = stats.public_path + filename
        manifest[chunk] = filename
    return manifest
