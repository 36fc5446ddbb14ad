"""Event model for render-pass observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal, TypeAlias

# Where in the render pass a failure happened
FailureStage: TypeAlias = Literal["config", "render", "extract", "store"]


# ---------------------------------------------------------------------------
# Traversal events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PageRendered:
    """A render function returned output for a request path.

    Attributes:
        path: The request path passed to the render function.
        outputs: Number of output bodies the call produced.
        duration_ms: Time spent awaiting the render function.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    outputs: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class AssetEmitted:
    """A new asset was written to the store.

    Attributes:
        asset_name: Storage key (e.g., ``about/index.html``).
        source: Output path the asset was rendered for.
        size_bytes: UTF-8 size of the body.
        links_found: Crawl candidates extracted from the body (0 when not crawling).
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    asset_name: str
    source: str
    size_bytes: int
    links_found: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class AssetSkipped:
    """An output was dropped because its asset name already existed."""

    asset_name: str
    source: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BuildFailure:
    """A branch of the render pass failed without aborting the pass.

    Attributes:
        stage: Which step failed.
        path: Request or output path being processed (empty for config errors).
        error: ``"ExcType: message"`` summary.
        traceback: Fully formatted traceback.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    stage: FailureStage
    path: str
    error: str
    traceback: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

RenderEvent: TypeAlias = PageRendered | AssetEmitted | AssetSkipped | BuildFailure


def now_ns() -> int:
    """Return the current monotonic time in nanoseconds."""
    return time.monotonic_ns()
