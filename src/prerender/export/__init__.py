"""Export layer — the render/crawl engine and static output.

Renders request paths through the user's render function, stores each
output under a clean-URL asset name, follows same-site links when crawling,
and writes generated assets to disk.
"""

from prerender.export.invoker import invoke, render_arity
from prerender.export.links import extract_relative_links
from prerender.export.paths import map_to_asset_name
from prerender.export.static import ExportedFile, ExportResult, write_generated
from prerender.export.store import AssetStore, MemoryAssetStore
from prerender.export.traversal import build_locals, render_all

__all__ = [
    "AssetStore",
    "ExportResult",
    "ExportedFile",
    "MemoryAssetStore",
    "build_locals",
    "extract_relative_links",
    "invoke",
    "map_to_asset_name",
    "render_all",
    "render_arity",
    "write_generated",
]
