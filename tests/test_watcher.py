"""
Тесты источника событий watchdog
"""
import queue

import pytest
from watchdog.events import (
    DirModifiedEvent,
    FileClosedEvent,
    FileCreatedEvent,
    FileDeletedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from asset_packager.domain.assets import AssetEvent, EventKind, WatcherStartError
from asset_packager.infrastructure.watcher import AssetEventHandler, WatchdogEventSource


class TestEventTranslation:
    """Перевод событий watchdog в AssetEvent"""

    def test_created(self):
        assert AssetEventHandler.translate(FileCreatedEvent("/r/a")) == [AssetEvent(EventKind.CREATE, "/r/a")]

    def test_deleted(self):
        assert AssetEventHandler.translate(FileDeletedEvent("/r/a")) == [AssetEvent(EventKind.REMOVE, "/r/a")]

    def test_moved_is_rename_then_create(self):
        """Перемещение: старое имя пропадает, новое появляется"""
        assert AssetEventHandler.translate(FileMovedEvent("/r/a", "/r/b")) == [
            AssetEvent(EventKind.RENAME, "/r/a"),
            AssetEvent(EventKind.CREATE, "/r/b"),
        ]

    def test_modified(self):
        assert AssetEventHandler.translate(FileModifiedEvent("/r/a")) == [AssetEvent(EventKind.MODIFY, "/r/a")]
        assert AssetEventHandler.translate(DirModifiedEvent("/r")) == [AssetEvent(EventKind.MODIFY, "/r")]

    def test_other_events_dropped(self):
        assert AssetEventHandler.translate(FileClosedEvent("/r/a")) == []

    def test_bytes_paths_decoded(self):
        assert AssetEventHandler.translate(FileCreatedEvent(b"/r/a")) == [AssetEvent(EventKind.CREATE, "/r/a")]


class TestEventHandler:
    """Диспетчеризация событий в очереди"""

    def test_dispatch_keeps_order(self):
        events, errors = queue.Queue(), queue.Queue()
        handler = AssetEventHandler(events, errors)

        handler.dispatch(FileCreatedEvent("/r/x"))
        handler.dispatch(FileMovedEvent("/r/x", "/r/y"))
        handler.dispatch(FileDeletedEvent("/r/y"))

        received = [events.get_nowait() for _ in range(events.qsize())]
        assert [(e.kind, e.path) for e in received] == [
            (EventKind.CREATE, "/r/x"),
            (EventKind.RENAME, "/r/x"),
            (EventKind.CREATE, "/r/y"),
            (EventKind.REMOVE, "/r/y"),
        ]
        assert errors.empty()

    def test_broken_event_goes_to_errors(self):
        events, errors = queue.Queue(), queue.Queue()
        handler = AssetEventHandler(events, errors)

        handler.dispatch(object())

        assert events.empty()
        assert isinstance(errors.get_nowait(), AttributeError)


class TestWatchdogEventSource:
    """Жизненный цикл WatchdogEventSource"""

    def test_start_failure_wrapped(self, tmp_path):
        def broken_observer():
            raise OSError("no inotify")

        source = WatchdogEventSource(str(tmp_path), observer_factory=broken_observer)

        with pytest.raises(WatcherStartError) as exc_info:
            source.start()
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_close_puts_sentinels_once(self, tmp_path):
        source = WatchdogEventSource(str(tmp_path))

        source.close()
        source.close()

        assert source.events.get_nowait() is None
        assert source.errors.get_nowait() is None
        assert source.events.empty()
        assert source.errors.empty()
