"""Render-pass observability — events, event log, and the error sink.

Every traversal step reports to a ``BuildCollector``:

- **PageRendered**: a render call returned output
- **AssetEmitted** / **AssetSkipped**: an output was stored or deduplicated
- **BuildFailure**: a branch failed (config, render, extract, store)

Quick Start:
    >>> from prerender.observability import BuildCollector, EventLog
    >>> collector = BuildCollector(EventLog())
    >>> # pass collector to render_all(...) as the error sink
    >>> collector.errors()
    []

"""

from prerender.observability.collector import BuildCollector
from prerender.observability.events import (
    AssetEmitted,
    AssetSkipped,
    BuildFailure,
    PageRendered,
    RenderEvent,
    now_ns,
)
from prerender.observability.log import EventLog

__all__ = [
    "AssetEmitted",
    "AssetSkipped",
    "BuildCollector",
    "BuildFailure",
    "EventLog",
    "PageRendered",
    "RenderEvent",
    "now_ns",
]
