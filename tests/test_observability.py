"""Tests for prerender.observability — events, event log, build collector."""

from __future__ import annotations

import threading

import pytest

from prerender.observability import (
    AssetEmitted,
    AssetSkipped,
    BuildCollector,
    BuildFailure,
    EventLog,
    PageRendered,
    now_ns,
)


class TestEvents:
    """Events are frozen and timestamped."""

    def test_frozen(self) -> None:
        event = AssetSkipped(asset_name="index.html", source="/", timestamp_ns=now_ns())
        with pytest.raises(AttributeError):
            event.asset_name = "other"  # type: ignore[misc]

    def test_now_ns_monotonic(self) -> None:
        assert now_ns() <= now_ns()


class TestEventLog:
    """EventLog — bounded buffer with exact per-type counts, thread-safe."""

    def test_ring_buffer_bound(self) -> None:
        log = EventLog(max_events=3)
        for i in range(5):
            log.append(PageRendered(path=f"/{i}", outputs=1, duration_ms=0.0, timestamp_ns=i))
        assert len(log) == 3
        assert [e.path for e in log.events()] == ["/2", "/3", "/4"]

    def test_counts_include_evicted_events(self) -> None:
        log = EventLog(max_events=2)
        for i in range(4):
            log.append(AssetSkipped(f"{i}/index.html", f"/{i}", i))
        log.append(PageRendered(path="/", outputs=1, duration_ms=0.0, timestamp_ns=9))

        assert log.count(AssetSkipped) == 4
        assert log.count(PageRendered) == 1
        assert log.count(AssetEmitted) == 0

    def test_events_by_type_oldest_first(self) -> None:
        log = EventLog()
        log.append(PageRendered(path="/a", outputs=1, duration_ms=0.0, timestamp_ns=1))
        log.append(AssetSkipped(asset_name="a/index.html", source="/a", timestamp_ns=2))
        log.append(PageRendered(path="/b", outputs=1, duration_ms=0.0, timestamp_ns=3))

        assert [e.path for e in log.events(PageRendered)] == ["/a", "/b"]
        assert len(log.events()) == 3

    def test_concurrent_appends(self) -> None:
        log = EventLog()

        def worker() -> None:
            for _ in range(200):
                log.append(AssetSkipped("x", "/x", now_ns()))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(log) == 800
        assert log.count(AssetSkipped) == 800


class TestBuildCollector:
    """BuildCollector — typed recording and the error sink."""

    def test_records_traversal_events(self) -> None:
        collector = BuildCollector()
        collector.record_render("/", outputs=2, duration_ms=1.5)
        collector.record_emit("index.html", "/", size_bytes=12, links_found=3)
        collector.record_skip("index.html", "/")

        types = [type(e) for e in collector.log.events()]
        assert types == [PageRendered, AssetEmitted, AssetSkipped]

    def test_record_error(self) -> None:
        collector = BuildCollector()
        try:
            raise ValueError("bad page")
        except ValueError as exc:
            collector.record_error("render", "/x", exc)

        (failure,) = collector.failures()
        assert isinstance(failure, BuildFailure)
        assert failure.stage == "render"
        assert failure.path == "/x"
        assert failure.error == "ValueError: bad page"
        assert "Traceback" in failure.traceback
        assert collector.errors() == [failure.traceback]

    def test_failures_survive_log_eviction(self) -> None:
        collector = BuildCollector(EventLog(max_events=1))
        collector.record_error("store", "/a", RuntimeError("first"))
        collector.record_skip("a", "/a")
        assert len(collector.log) == 1
        assert len(collector.failures()) == 1

    def test_shared_log(self) -> None:
        log = EventLog()
        collector = BuildCollector(log)
        assert collector.log is log
