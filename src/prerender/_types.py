"""Shared type definitions for prerender."""

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

# Logical page location submitted for rendering (e.g., "/", "about", "/a.html")
RequestPath: TypeAlias = str

# Normalized storage key (e.g., "index.html", "about/index.html")
AssetName: TypeAlias = str

# Chunk name -> public file path
AssetManifest: TypeAlias = dict[str, str]

# Generated or build-provided asset body
AssetContent: TypeAlias = str | bytes

# A single HTML body, or output path -> HTML body
RenderOutput: TypeAlias = str | Mapping[str, str]

# User render function: render(locals) or render(locals, callback)
RenderFunc: TypeAlias = Callable[..., Any]

# Node-style completion callback: callback(err, result)
RenderCallback: TypeAlias = Callable[[object, object], None]
