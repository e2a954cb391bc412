"""Ошибки Asset Packager.

Ошибки конструирования индекса наследуют стандартные OSError-классы,
чтобы вызывающий код мог ловить их как FileNotFoundError / NotADirectoryError.
"""


class AssetPackagerError(Exception):
    """Базовая ошибка сервиса."""


class AssetRootNotFoundError(AssetPackagerError, FileNotFoundError):
    def __init__(self, path: str):
        super().__init__(f"{path} does not exist")
        self.path = path


class AssetRootNotADirectoryError(AssetPackagerError, NotADirectoryError):
    def __init__(self, path: str):
        super().__init__(f"{path} is not a directory")
        self.path = path


class WatcherStartError(AssetPackagerError):
    """Не удалось запустить наблюдение за файловой системой."""


class PackageBuildError(AssetPackagerError):
    """Сборка архива прервана: структура архива в выходном потоке повреждена."""
