"""
Источник событий файловой системы.

watchdog рекурсивно следит за корнем и складывает события в две FIFO-очереди:
- events — AssetEvent в порядке поступления
- errors — исключения, возникшие при разборе событий

После close() в обе очереди кладётся None, чтобы потребители завершились.
"""
from __future__ import annotations

import queue
from typing import Callable, Optional, Protocol

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from asset_packager.domain.assets import AssetEvent, EventKind, WatcherStartError
from utils.logging import get_logger

logger = get_logger("asset_packager.watcher")


class EventSource(Protocol):
    """Интерфейс, который ожидает AssetIndex от источника событий."""

    events: "queue.Queue[Optional[AssetEvent]]"
    errors: "queue.Queue[Optional[BaseException]]"

    def start(self) -> None: ...

    def close(self) -> None: ...


def _decode(path) -> str:
    if isinstance(path, bytes):
        return path.decode("utf-8", "surrogateescape")
    return path


class AssetEventHandler(FileSystemEventHandler):
    """Переводит события watchdog в AssetEvent."""

    def __init__(self, events: queue.Queue, errors: queue.Queue):
        super().__init__()
        self.events = events
        self.errors = errors

    def dispatch(self, event: FileSystemEvent) -> None:
        try:
            for asset_event in self.translate(event):
                self.events.put(asset_event)
        except Exception as e:
            self.errors.put(e)

    @staticmethod
    def translate(event: FileSystemEvent) -> list[AssetEvent]:
        src = _decode(event.src_path)
        if event.event_type == EVENT_TYPE_CREATED:
            return [AssetEvent(EventKind.CREATE, src)]
        if event.event_type == EVENT_TYPE_DELETED:
            return [AssetEvent(EventKind.REMOVE, src)]
        if event.event_type == EVENT_TYPE_MOVED:
            # Как и inotify: старое имя пропадает, новое появляется
            dest = _decode(event.dest_path)
            return [AssetEvent(EventKind.RENAME, src), AssetEvent(EventKind.CREATE, dest)]
        if event.event_type == EVENT_TYPE_MODIFIED:
            return [AssetEvent(EventKind.MODIFY, src)]
        return []


class WatchdogEventSource:
    """Рекурсивное наблюдение за папкой через watchdog Observer."""

    def __init__(self, root: str, observer_factory: Callable[[], Observer] = Observer):
        self.root = root
        self.events: "queue.Queue[Optional[AssetEvent]]" = queue.Queue()
        self.errors: "queue.Queue[Optional[BaseException]]" = queue.Queue()
        self._observer_factory = observer_factory
        self._observer = None
        self._closed = False

    def start(self) -> None:
        try:
            observer = self._observer_factory()
            observer.schedule(AssetEventHandler(self.events, self.errors), self.root, recursive=True)
            observer.start()
        except Exception as e:
            raise WatcherStartError(f"Cannot watch {self.root}: {e}") from e
        self._observer = observer
        logger.debug(f"👀 Наблюдение запущено: {self.root} ({type(observer).__name__})")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
        self.events.put(None)
        self.errors.put(None)
        logger.debug(f"Наблюдение остановлено: {self.root}")
