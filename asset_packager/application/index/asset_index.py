"""
Индекс ассетов: "относительный путь → файл сейчас есть".

=== ЖИЗНЕННЫЙ ЦИКЛ ===
    open()  →  полный обход папки  →  события watchdog  →  close()

=== СЕМАНТИКА ===
- Ключи добавляются при обходе и по событию create
- remove/rename не удаляют ключ, а ставят False ("видели, но пропал")
- Неизвестный ключ → False
- Индекс eventually consistent: сразу после изменения на диске запрос
  может вернуть старое значение, пока событие не применено

=== ПОТОКИ ===
- asset-index-events — единственный писатель, применяет события по порядку
- asset-index-errors — логирует ошибки источника, не останавливая индекс
Все чтения и записи словаря идут под одной блокировкой.
"""
from __future__ import annotations

import os
import threading
from typing import Callable, Dict, Optional

from asset_packager.domain.assets import (
    AssetEvent,
    AssetRootNotADirectoryError,
    AssetRootNotFoundError,
    EventKind,
    to_asset_name,
)
from asset_packager.infrastructure.watcher import EventSource, WatchdogEventSource
from utils.logging import get_logger

logger = get_logger("asset_packager.index")


class AssetIndex:
    """Потокобезопасный индекс файлов под root."""

    def __init__(self, root: str, source: EventSource):
        self._root = root
        self._source = source
        self._presence: Dict[str, bool] = {}
        self._lock = threading.Lock()
        self._threads: list[threading.Thread] = []
        self._closed = False

    @classmethod
    def open(
        cls,
        root: str,
        source_factory: Callable[[str], EventSource] = WatchdogEventSource,
    ) -> "AssetIndex":
        """Создаёт индекс: проверка папки, запуск наблюдения, обход дерева, фоновые потоки.

        Raises:
            AssetRootNotFoundError: папки нет
            AssetRootNotADirectoryError: путь не является папкой
            WatcherStartError: не удалось запустить наблюдение
        """
        root = os.path.abspath(root)
        if not os.path.exists(root):
            raise AssetRootNotFoundError(root)
        if not os.path.isdir(root):
            raise AssetRootNotADirectoryError(root)

        source = source_factory(root)
        source.start()

        index = cls(root, source)
        try:
            index._scan()
        except BaseException:
            source.close()
            raise
        index._start_workers()

        logger.info(f"📦 Индекс построен: {root} ({index.present_count} ассетов)")
        return index

    @property
    def root(self) -> str:
        return self._root

    # --- Queries ------------------------------------------------------------
    def exists(self, name: str) -> bool:
        with self._lock:
            return self._presence.get(name, False)

    def known(self, name: str) -> bool:
        """True если путь хоть раз попадал в индекс (даже если сейчас удалён)."""
        with self._lock:
            return name in self._presence

    def snapshot(self) -> Dict[str, bool]:
        with self._lock:
            return dict(self._presence)

    @property
    def present_count(self) -> int:
        with self._lock:
            return sum(1 for present in self._presence.values() if present)

    def resolve(self, name: str) -> str:
        """Абсолютный путь для относительного имени ассета."""
        return os.path.join(self._root, *name.split("/"))

    # --- Mutation -----------------------------------------------------------
    def apply(self, event: AssetEvent) -> None:
        """Применяет одно событие файловой системы к индексу."""
        if event.kind not in (EventKind.CREATE, EventKind.REMOVE, EventKind.RENAME):
            return

        name = self._relative(event.path)
        if name is None:
            logger.warning(f"⚠️ Событие вне корня пропущено: {event.kind.value} {event.path}")
            return

        present = event.kind == EventKind.CREATE
        with self._lock:
            self._presence[name] = present
        logger.debug(f"Событие применено: {event.kind.value} {name} -> {present}")

    # --- Lifecycle ----------------------------------------------------------
    def close(self, timeout: Optional[float] = 5.0) -> None:
        """Закрывает наблюдение и ждёт завершения фоновых потоков.

        Повторный вызов ничего не делает; индекс остаётся доступным для чтения.
        """
        if self._closed:
            return
        self._closed = True
        self._source.close()
        for thread in self._threads:
            thread.join(timeout)
        logger.info(f"🛑 Индекс закрыт: {self._root}")

    def __enter__(self) -> "AssetIndex":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- Internal helpers ---------------------------------------------------
    def _relative(self, path: str) -> Optional[str]:
        rel = os.path.relpath(path, self._root)
        if rel == os.curdir or rel == os.pardir or rel.startswith(os.pardir + os.sep):
            return None
        return to_asset_name(rel)

    def _scan(self) -> None:
        found: Dict[str, bool] = {}
        for dirpath, _dirnames, filenames in os.walk(self._root):
            for filename in filenames:
                found[to_asset_name(os.path.relpath(os.path.join(dirpath, filename), self._root))] = True
        with self._lock:
            # События, пришедшие во время обхода, применятся позже и перекроют эти значения
            self._presence.update(found)

    def _start_workers(self) -> None:
        self._threads = [
            threading.Thread(target=self._consume_events, name="asset-index-events", daemon=True),
            threading.Thread(target=self._log_errors, name="asset-index-errors", daemon=True),
        ]
        for thread in self._threads:
            thread.start()

    def _consume_events(self) -> None:
        while True:
            event = self._source.events.get()
            if event is None:
                break
            try:
                self.apply(event)
            except Exception as e:
                logger.error(f"❌ Не удалось применить событие {event}: {e}", exc_info=True)

    def _log_errors(self) -> None:
        while True:
            error = self._source.errors.get()
            if error is None:
                break
            logger.warning(f"⚠️ Ошибка наблюдения за файлами: {error}")
