"""Content watcher — rebuild when the pages tree changes.

Every compiled page embeds the whole page map, so any change under the
pages directory invalidates every compiled page.  The watcher reports:

- Content file changed -> recompile (route, front matter or title changed)
- Meta file changed -> recompile (navigation titles changed)
- Config changed -> reload configuration, then recompile
"""

from __future__ import annotations

import asyncio
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from watchfiles import Change

from whisker.content.naming import is_content_file, is_meta_file

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from whisker.config import WhiskerConfig

CONFIG_FILES = frozenset({"whisker.yaml", "whisker.yml", "whisker.toml"})


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """A file change detected by the watcher.

    Attributes:
        path: Absolute path to the changed file.
        kind: Type of filesystem change.
        category: What kind of file changed.

    """

    path: Path
    kind: Literal["created", "modified", "deleted"]
    category: Literal["content", "meta", "config"]


_CHANGE_KIND_MAP: dict[Change, Literal["created", "modified", "deleted"]] = {
    Change.added: "created",
    Change.modified: "modified",
    Change.deleted: "deleted",
}


def categorize_change(path: Path, config: WhiskerConfig) -> str | None:
    """Return the category of a changed file, or None if it is irrelevant."""
    try:
        rel = path.relative_to(config.root)
    except ValueError:
        return None

    parts = rel.parts
    if not parts:
        return None

    if len(parts) == 1 and parts[0] in CONFIG_FILES:
        return "config"

    try:
        path.relative_to(config.pages_path)
    except ValueError:
        return None

    if is_meta_file(path.name):
        return "meta"
    if is_content_file(path.name):
        return "content"
    return None


class ContentWatcher:
    """Watches the project for changes that invalidate compiled pages.

    Runs watchfiles in a background thread and bridges events to an asyncio
    queue consumed via :meth:`changes`.

    """

    def __init__(self, config: WhiskerConfig) -> None:
        self._config = config
        self._queue: asyncio.Queue[ChangeEvent] = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start watching in a background thread.

        Must be called from the event loop that consumes :meth:`changes`.
        """
        if self.is_running:
            return

        self._loop = asyncio.get_running_loop()
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._watch_loop,
            name="whisker-watcher",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Signal the watcher to stop and wait for the thread to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=5.0)
            self._thread = None

    async def changes(self) -> AsyncIterator[ChangeEvent]:
        """Yield ChangeEvent objects as they occur until the watcher stops."""
        while self.is_running or not self._queue.empty():
            try:
                event = await asyncio.wait_for(self._queue.get(), timeout=0.5)
                yield event
            except TimeoutError:
                if not self.is_running:
                    break

    def _watch_loop(self) -> None:
        from watchfiles import watch

        for raw_changes in watch(
            self._config.root,
            stop_event=self._stop_event,
            debounce=300,
            step=100,
        ):
            for change_type, path_str in raw_changes:
                path = Path(path_str)
                category = categorize_change(path, self._config)
                if category is None:
                    continue

                kind = _CHANGE_KIND_MAP.get(change_type, "modified")
                event = ChangeEvent(path=path, kind=kind, category=category)  # type: ignore[arg-type]
                if self._loop is not None:
                    self._loop.call_soon_threadsafe(self._queue.put_nowait, event)
