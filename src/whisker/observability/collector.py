"""Build collector — records compilation events into the event log.

Every compilation step accepts an optional collector.  When one is passed,
the step reports what it did (tree built, metadata skipped, module
compiled, index written) as a frozen event.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

from whisker._types import ModuleKind
from whisker.observability.events import (
    IndexWritten,
    MetadataSkipped,
    ModuleCompiled,
    ThemeMissing,
    TreeBuilt,
    now_ns,
)
from whisker.observability.log import EventLog


class BuildCollector:
    """Event collector for one build session.

    Args:
        log: The EventLog to store events in (a fresh one by default).

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Page map -----

    def record_tree_built(
        self,
        root: str,
        *,
        pages: int = 0,
        active_route: str = "",
        duration_ms: float = 0.0,
    ) -> None:
        self._log.append(
            TreeBuilt(
                root=root,
                pages=pages,
                active_route=active_route,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_metadata_skipped(self, path: str, *, reason: str = "") -> None:
        self._log.append(MetadataSkipped(path=path, reason=reason, timestamp_ns=now_ns()))

    # ----- Compilation -----

    def record_module(
        self,
        path: str,
        kind: ModuleKind,
        *,
        route: str = "",
        duration_ms: float = 0.0,
    ) -> None:
        self._log.append(
            ModuleCompiled(
                path=path,
                kind=kind,
                route=route,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_theme_missing(self, path: str) -> None:
        self._log.append(ThemeMissing(path=path, timestamp_ns=now_ns()))

    # ----- Export -----

    def record_index_written(
        self,
        locale: str,
        route: str,
        target: str,
        *,
        entries: int = 0,
    ) -> None:
        self._log.append(
            IndexWritten(
                locale=locale,
                route=route,
                target=target,
                entries=entries,
                timestamp_ns=now_ns(),
            )
        )
