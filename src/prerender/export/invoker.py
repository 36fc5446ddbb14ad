"""Render invoker — one async contract for every render calling convention.

Render functions come in two shapes, told apart by their declared arity:

    def render(locals): ...               # returns output (or a coroutine)
    async def render(locals): ...
    def render(locals, callback): ...     # calls callback(err, result)

``invoke()`` turns either into a single awaitable result so the traversal
never branches on the calling convention.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from prerender._errors import RenderError

if TYPE_CHECKING:
    from prerender._types import RenderFunc, RenderOutput

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def render_arity(render: RenderFunc) -> int:
    """Count positional parameters without defaults.

    Callables whose signature cannot be inspected (some builtins) count as
    arity 0, i.e. the synchronous-return convention.

    """
    try:
        sig = inspect.signature(render)
    except (TypeError, ValueError):
        return 0
    return sum(
        1
        for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


async def invoke(render: RenderFunc, locals: Mapping[str, Any]) -> RenderOutput:
    """Call *render* with *locals* and return its output.

    Raises:
        Exception: Whatever the render function raised, or the error it
            passed to its callback (non-exception errors are wrapped in
            :class:`RenderError`).

    """
    if render_arity(render) < 2:
        result = render(locals)
        if inspect.isawaitable(result):
            result = await result
        return result
    return await _invoke_with_callback(render, locals)


async def _invoke_with_callback(
    render: RenderFunc,
    locals: Mapping[str, Any],
) -> RenderOutput:
    loop = asyncio.get_running_loop()
    future: asyncio.Future[RenderOutput] = loop.create_future()

    def settle(err: object, result: object) -> None:
        if future.done():
            return
        if err:
            exc = err if isinstance(err, BaseException) else RenderError(str(err))
            future.set_exception(exc)
        else:
            future.set_result(result)  # type: ignore[arg-type]

    def callback(err: object = None, result: object = None) -> None:
        # May be called from a worker thread; settle on the loop thread.
        loop.call_soon_threadsafe(settle, err, result)

    returned = render(locals, callback)
    if inspect.isawaitable(returned):
        await returned
    return await future
