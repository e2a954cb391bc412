"""
Pytest fixtures для тестирования Asset Packager
"""
import logging
import queue
import time
from pathlib import Path
from typing import Callable, Dict, List

import pytest

from asset_packager.application.index import AssetIndex


class FakeEventSource:
    """Источник событий в памяти: тест сам кладёт события в очередь."""

    def __init__(self, root: str):
        self.root = root
        self.events: queue.Queue = queue.Queue()
        self.errors: queue.Queue = queue.Queue()
        self.started = False
        self.close_calls = 0

    def start(self) -> None:
        self.started = True

    def close(self) -> None:
        self.close_calls += 1
        if self.close_calls == 1:
            self.events.put(None)
            self.errors.put(None)


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Настройка логирования для тестов - только ошибки"""
    root_logger = logging.getLogger()
    handler = logging.StreamHandler()
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s - %(message)s'))
    root_logger.addHandler(handler)

    yield

    root_logger.removeHandler(handler)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, bytes]], Path]:
    """Создаёт дерево файлов {относительный путь: содержимое} во временной папке"""
    def _make(files: Dict[str, bytes]) -> Path:
        root = tmp_path / "assets"
        root.mkdir(exist_ok=True)
        for name, content in files.items():
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        return root

    return _make


@pytest.fixture
def sources() -> List[FakeEventSource]:
    """Все FakeEventSource, созданные в тесте"""
    return []


@pytest.fixture
def fake_source_factory(sources) -> Callable[[str], FakeEventSource]:
    """Фабрика FakeEventSource, запоминающая созданные источники"""
    def factory(root: str) -> FakeEventSource:
        source = FakeEventSource(root)
        sources.append(source)
        return source

    return factory


@pytest.fixture
def open_index(fake_source_factory):
    """Открывает AssetIndex с FakeEventSource и закрывает его после теста"""
    opened: List[AssetIndex] = []

    def _open(root) -> AssetIndex:
        index = AssetIndex.open(str(root), source_factory=fake_source_factory)
        opened.append(index)
        return index

    yield _open

    for index in opened:
        index.close()


@pytest.fixture
def wait_until():
    """Ждёт выполнения условия (для событий от настоящего watchdog)"""
    def _wait(condition: Callable[[], bool], timeout: float = 5.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if condition():
                return True
            time.sleep(0.05)
        return condition()

    return _wait
