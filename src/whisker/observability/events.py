"""Build event model for compilation observability.

Defines the structured events emitted while compiling pages: page map
builds, skipped metadata, module compilations and search index writes.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal


# ---------------------------------------------------------------------------
# Page map events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TreeBuilt:
    """A page map was built from the content directory.

    Attributes:
        root: Absolute path of the content root.
        pages: Number of pages in the tree.
        active_route: Route resolved for the active file (may be empty).
        duration_ms: Time spent walking the tree in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    root: str
    pages: int
    active_route: str
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class MetadataSkipped:
    """Front matter or a meta file could not be parsed and was ignored.

    Attributes:
        path: File whose metadata was dropped.
        reason: Parser error message.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    reason: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Compilation events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ModuleCompiled:
    """A source file was compiled into a module.

    Attributes:
        path: Source file path.
        kind: ``page`` (layout wrapper), ``dispatch`` (locale router)
            or ``raw`` (bare body, no theme).
        route: Route of the compiled file.
        duration_ms: Total compilation time in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    kind: Literal["page", "dispatch", "raw"]
    route: str
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ThemeMissing:
    """A page was compiled without a theme; the body was emitted unwrapped.

    Attributes:
        path: Source file path.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Export events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class IndexWritten:
    """A per-locale search index file was flushed.

    Attributes:
        locale: Index locale.
        route: Route that was added.
        target: Written file path.
        entries: Number of documents in the index after the write.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    locale: str
    route: str
    target: str
    entries: int
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type BuildEvent = (
    TreeBuilt
    | MetadataSkipped
    | ModuleCompiled
    | ThemeMissing
    | IndexWritten
)


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
