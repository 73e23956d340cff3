"""Tests for whisker.observability — build events and the event log."""

import threading

from whisker.observability import BuildCollector, EventLog
from whisker.observability.events import (
    IndexWritten,
    MetadataSkipped,
    ModuleCompiled,
    ThemeMissing,
    TreeBuilt,
    now_ns,
)


def _skipped(path: str) -> MetadataSkipped:
    return MetadataSkipped(path=path, reason="bad", timestamp_ns=now_ns())


class TestEventLog:
    """Bounded, queryable storage."""

    def test_append_and_len(self) -> None:
        log = EventLog()
        assert len(log) == 0
        log.append(_skipped("/a/meta.json"))
        assert len(log) == 1

    def test_max_events_enforced(self) -> None:
        log = EventLog(max_events=5)
        log.append_many([_skipped(f"/{i}.md") for i in range(10)])
        assert len(log) == 5
        assert log.recent(1)[0].path == "/9.md"

    def test_query_by_type_newest_first(self) -> None:
        log = EventLog()
        log.append(_skipped("/a.md"))
        log.append(ThemeMissing(path="/b.md", timestamp_ns=now_ns()))
        log.append(_skipped("/c.md"))
        results = log.query(event_type=MetadataSkipped)
        assert [e.path for e in results] == ["/c.md", "/a.md"]

    def test_query_by_path(self) -> None:
        log = EventLog()
        log.append(TreeBuilt(root="/site/pages", pages=3, active_route="/", duration_ms=1.0, timestamp_ns=now_ns()))
        log.append(IndexWritten(locale="en", route="/", target="/site/public/index-en.toml", entries=1, timestamp_ns=now_ns()))
        assert len(log.query(path="/site")) == 2
        assert len(log.query(path="public")) == 1

    def test_query_since(self) -> None:
        log = EventLog()
        log.append(MetadataSkipped(path="/old", reason="", timestamp_ns=10))
        log.append(MetadataSkipped(path="/new", reason="", timestamp_ns=20))
        assert [e.path for e in log.query(since_ns=15)] == ["/new"]

    def test_query_limit(self) -> None:
        log = EventLog()
        log.append_many([_skipped(f"/{i}") for i in range(10)])
        assert len(log.query(limit=3)) == 3

    def test_skipped_metadata(self) -> None:
        log = EventLog()
        log.append(_skipped("/a"))
        log.append(ThemeMissing(path="/b", timestamp_ns=now_ns()))
        assert [e.path for e in log.skipped_metadata()] == ["/a"]

    def test_clear(self) -> None:
        log = EventLog()
        log.append_many([_skipped("/a"), _skipped("/b")])
        assert log.clear() == 2
        assert len(log) == 0

    def test_stats(self) -> None:
        log = EventLog(max_events=50)
        log.append(_skipped("/a"))
        log.append(_skipped("/b"))
        log.append(ThemeMissing(path="/c", timestamp_ns=now_ns()))
        stats = log.stats()
        assert stats["total"] == 3
        assert stats["max_events"] == 50
        assert stats["by_type"] == {"MetadataSkipped": 2, "ThemeMissing": 1}

    def test_concurrent_appends(self) -> None:
        log = EventLog()

        def worker() -> None:
            for i in range(100):
                log.append(_skipped(f"/{i}"))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(log) == 400


class TestBuildCollector:
    """Collector methods create the matching events."""

    def test_default_log(self) -> None:
        assert isinstance(BuildCollector().log, EventLog)

    def test_records_every_kind(self) -> None:
        collector = BuildCollector()
        collector.record_tree_built("/pages", pages=2, active_route="/a", duration_ms=1.5)
        collector.record_metadata_skipped("/pages/meta.json", reason="bad json")
        collector.record_module("/pages/a.md", "page", route="/a", duration_ms=2.0)
        collector.record_theme_missing("/pages/a.md")
        collector.record_index_written("en", "/a", "/public/index-en.toml", entries=1)

        types = [type(e) for e in collector.log.recent(10)]
        assert types == [TreeBuilt, MetadataSkipped, ModuleCompiled, ThemeMissing, IndexWritten]

        (module,) = collector.log.query(event_type=ModuleCompiled)
        assert module.kind == "page"
        assert module.route == "/a"
