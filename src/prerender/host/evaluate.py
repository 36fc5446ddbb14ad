"""Module evaluator — execute the built render module and find its render function.

The render module is plain Python source taken from the build output.  It is
executed in a fresh module object, never registered in ``sys.modules``, with
the configured globals injected into its namespace first::

    # build/render.py
    def render(locals):
        return f"<h1>{SITE_NAME}</h1><p>{locals['path']}</p>"

    # prerender.yaml
    globals:
      SITE_NAME: Docs

The exported callable is the module's ``default`` attribute if it has one,
otherwise its ``render`` attribute.
"""

import importlib.util
import re
from collections.abc import Mapping
from types import ModuleType
from typing import Any

from prerender._errors import ConfigError
from prerender._types import AssetContent, RenderFunc

_INVALID_NAME_CHARS = re.compile(r"\W")


def _module_name(identifier: str) -> str:
    """Build a dotted module name: ``pages/render.py`` -> ``prerender_build.pages_render``."""
    stem = identifier.removesuffix(".py")
    return "prerender_build." + (_INVALID_NAME_CHARS.sub("_", stem) or "entry")


def evaluate_module(
    source: AssetContent,
    identifier: str,
    globals: Mapping[str, Any] | None = None,
) -> ModuleType:
    """Compile and execute *source* as a module.

    Args:
        source: Module source text (bytes are decoded as UTF-8).
        identifier: Asset name, used as the module's ``__file__`` and in
            tracebacks.
        globals: Names placed in the module namespace before execution.

    Raises:
        ConfigError: If the source does not compile or raises on import.

    """
    spec = importlib.util.spec_from_loader(_module_name(identifier), loader=None)
    module = importlib.util.module_from_spec(spec)  # type: ignore[arg-type]
    module.__file__ = identifier
    if globals:
        module.__dict__.update(globals)

    try:
        text = source.decode("utf-8") if isinstance(source, bytes) else source
        code = compile(text, identifier, "exec")
        exec(code, module.__dict__)  # noqa: S102
    except Exception as exc:
        msg = f"Failed to evaluate render module {identifier!r}: {exc}"
        raise ConfigError(msg) from exc

    return module


def resolve_render(module: ModuleType, entry: str | None) -> RenderFunc:
    """Return the render function exported by *module*.

    Raises:
        ConfigError: If no callable export is found.

    """
    render: object = module
    for attr in ("default", "render"):
        if hasattr(module, attr):
            render = getattr(module, attr)
            break

    if not callable(render):
        msg = (
            f'Export from "{entry}" must be a function that returns an HTML '
            "string. Define 'render(locals)' or 'default' in the module."
        )
        raise ConfigError(msg)
    return render
