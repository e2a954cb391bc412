"""
Потоковая сборка архива.

Формат: tar внутри gzip. Порядок записей — успешно добавленные файлы в
порядке запроса, последней идёт metadata.json.

=== ОШИБКИ ===
- Файла нет в индексе, не удался stat или open — путь попадает в
  ResourcesFailed, сборка продолжается
- Ошибка записи заголовка, тела файла или manifest — PackageBuildError,
  архив в выходном потоке считается испорченным
"""
from __future__ import annotations

import gzip
import io
import os
import posixpath
import stat
import tarfile
import time
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Optional

from asset_packager.application.index import AssetIndex
from asset_packager.domain.assets import (
    MANIFEST_MODE,
    MANIFEST_NAME,
    PackageBuildError,
    PackageManifest,
    PackageRequest,
)
from utils.logging import get_logger


def entry_name(prefix: str, name: str) -> str:
    """Имя записи в архиве: prefix/name. Пустой префикс даёт просто name."""
    return posixpath.normpath(posixpath.join(prefix, name))


@dataclass
class PackageBuilder:
    """Собирает пакет из файлов, которые индекс считает существующими."""

    index: AssetIndex
    logger_name: str = field(default="asset_packager.packaging")

    def __post_init__(self) -> None:
        self.logger = get_logger(self.logger_name)

    def build(self, destination: BinaryIO, prefix: str, requested: Iterable[str]) -> PackageManifest:
        """Пишет tar.gz в destination и возвращает manifest.

        Raises:
            PackageBuildError: запись в destination не удалась, архив непригоден
        """
        manifest = PackageManifest()
        try:
            with gzip.GzipFile(filename="", mode="wb", fileobj=destination) as compressed:
                with tarfile.open(fileobj=compressed, mode="w") as archive:
                    for name in requested:
                        self._add_asset(archive, prefix, name, manifest)
                    self._add_manifest(archive, prefix, manifest)
        except (OSError, ValueError, tarfile.TarError) as e:
            self.logger.error(f"❌ Сборка пакета прервана (prefix={prefix!r}): {e}")
            raise PackageBuildError(f"Package build aborted: {e}") from e

        if manifest.failed:
            self.logger.info(f"📦 Пакет собран с ошибками: запрошено {len(manifest.requested)}, с ошибкой {len(manifest.failed)}")
        else:
            self.logger.debug(f"📦 Пакет собран: {len(manifest.requested)} файлов")
        return manifest

    def build_request(self, destination: BinaryIO, request: PackageRequest) -> PackageManifest:
        return self.build(destination, request.prefix, request.paths)

    # --- Internal helpers ---------------------------------------------------
    def _add_asset(self, archive: tarfile.TarFile, prefix: str, name: str, manifest: PackageManifest) -> None:
        manifest.record_requested(name)

        if not self.index.exists(name):
            self.logger.info(f"Resource request failed: [{name}] not in asset index")
            manifest.record_failed(name)
            return

        path = self.index.resolve(name)
        try:
            info = os.stat(path)
        except OSError as e:
            self.logger.info(f"Resource request failed: {e}")
            manifest.record_failed(name)
            return

        handle = self._open(path)
        if handle is None:
            manifest.record_failed(name)
            return

        # Размер берётся из stat: заголовок и тело должны совпадать
        member = tarfile.TarInfo(entry_name(prefix, name))
        member.mode = stat.S_IMODE(info.st_mode)
        member.size = info.st_size
        member.mtime = int(info.st_mtime)
        with handle:
            archive.addfile(member, handle)

    def _open(self, path: str) -> Optional[BinaryIO]:
        try:
            return open(path, "rb")
        except OSError as e:
            self.logger.info(f"Resource request failed: {e}")
            return None

    def _add_manifest(self, archive: tarfile.TarFile, prefix: str, manifest: PackageManifest) -> None:
        payload = manifest.to_json()
        member = tarfile.TarInfo(entry_name(prefix, MANIFEST_NAME))
        member.mode = MANIFEST_MODE
        member.size = len(payload)
        member.mtime = int(time.time())
        archive.addfile(member, io.BytesIO(payload))
