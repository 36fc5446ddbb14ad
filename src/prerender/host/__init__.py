"""Host build adapter — compilation, artifact lookup, module evaluation.

Public API::

    from prerender.host import Compilation, find_artifact, evaluate_module

    compilation = Compilation.from_directory(Path("build"))
    source = find_artifact("render", compilation)
    module = evaluate_module(source, "render", {"SITE_NAME": "Docs"})
"""

from prerender.host.artifacts import build_asset_manifest, find_artifact
from prerender.host.compilation import BuildStats, Compilation
from prerender.host.evaluate import evaluate_module, resolve_render

__all__ = [
    "BuildStats",
    "Compilation",
    "build_asset_manifest",
    "evaluate_module",
    "find_artifact",
    "resolve_render",
]
