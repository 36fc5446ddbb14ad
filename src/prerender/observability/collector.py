"""Build collector — the render pass's error sink and event recorder.

The traversal reports every outcome here: rendered pages, emitted and
skipped assets, and branch failures.  Failures never propagate past the
branch that raised them; they are recorded as ``BuildFailure`` events and
surfaced through :meth:`BuildCollector.errors`.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

import traceback

from prerender.observability.events import (
    AssetEmitted,
    AssetSkipped,
    BuildFailure,
    FailureStage,
    PageRendered,
    now_ns,
)
from prerender.observability.log import EventLog


class BuildCollector:
    """Event collector and error sink for one render pass.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_failures", "_log")

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()
        # Failures are also kept outside the ring buffer so they are never evicted.
        self._failures: list[BuildFailure] = []

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Traversal events -----

    def record_render(self, path: str, *, outputs: int = 1, duration_ms: float = 0.0) -> None:
        """Record a successful render call."""
        self._log.append(
            PageRendered(
                path=path,
                outputs=outputs,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_emit(
        self,
        asset_name: str,
        source: str,
        *,
        size_bytes: int = 0,
        links_found: int = 0,
    ) -> None:
        """Record a newly stored asset."""
        self._log.append(
            AssetEmitted(
                asset_name=asset_name,
                source=source,
                size_bytes=size_bytes,
                links_found=links_found,
                timestamp_ns=now_ns(),
            )
        )

    def record_skip(self, asset_name: str, source: str) -> None:
        """Record an output dropped because its asset already existed."""
        self._log.append(
            AssetSkipped(asset_name=asset_name, source=source, timestamp_ns=now_ns())
        )

    # ----- Error sink -----

    def record_error(self, stage: FailureStage, path: str, exc: BaseException) -> None:
        """Record a failed branch with its full traceback."""
        failure = BuildFailure(
            stage=stage,
            path=path,
            error=f"{type(exc).__name__}: {exc}",
            traceback="".join(traceback.format_exception(exc)),
            timestamp_ns=now_ns(),
        )
        self._log.append(failure)
        self._failures.append(failure)

    def failures(self) -> list[BuildFailure]:
        """All recorded failures, oldest first."""
        return list(self._failures)

    def errors(self) -> list[str]:
        """Formatted tracebacks of all recorded failures, oldest first."""
        return [f.traceback for f in self._failures]
