"""Build observability — structured events for every compilation step.

Records what the compiler did as frozen dataclass events with nanosecond
timestamps:
- **Page map**: tree builds, skipped metadata
- **Compilation**: page and dispatch modules, missing themes
- **Export**: search index writes

Quick Start:
    >>> from whisker.observability import BuildCollector, EventLog
    >>> log = EventLog()
    >>> collector = BuildCollector(log)
    >>> # Pass collector to compile_source(..., collector=collector)

"""

from whisker.observability.collector import BuildCollector
from whisker.observability.events import (
    BuildEvent,
    IndexWritten,
    MetadataSkipped,
    ModuleCompiled,
    ThemeMissing,
    TreeBuilt,
    now_ns,
)
from whisker.observability.log import EventLog

__all__ = [
    "BuildCollector",
    "BuildEvent",
    "EventLog",
    "IndexWritten",
    "MetadataSkipped",
    "ModuleCompiled",
    "ThemeMissing",
    "TreeBuilt",
    "now_ns",
]
