from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import List

MANIFEST_NAME = "metadata.json"
MANIFEST_MODE = 0o600


def to_asset_name(path: str) -> str:
    """Приводит относительный путь к виду с прямыми слешами."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path


@dataclass(slots=True)
class PackageRequest:
    """Запрос на сборку пакета: упорядоченный список путей и префикс внутри архива."""

    paths: List[str]
    prefix: str = ""


@dataclass(slots=True)
class PackageManifest:
    """Итог сборки одного архива.

    failed всегда является подпоследовательностью requested, а
    requested без failed — это ровно те файлы, что попали в архив.
    """

    requested: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    def record_requested(self, path: str) -> None:
        self.requested.append(path)

    def record_failed(self, path: str) -> None:
        self.failed.append(path)

    @property
    def succeeded(self) -> List[str]:
        pending = list(self.failed)
        result = []
        for path in self.requested:
            if pending and pending[0] == path:
                pending.pop(0)
                continue
            result.append(path)
        return result

    def as_dict(self) -> dict:
        return {
            "ResourcesRequested": list(self.requested),
            "ResourcesFailed": list(self.failed),
        }

    def to_json(self) -> bytes:
        """metadata.json в UTF-8.

        Пути с одиночными суррогатами (имена файлов не в UTF-8, экранированные
        запросы) пишутся через \\u-экранирование: JSON остаётся валидным, а
        json.loads возвращает ту же строку.
        """
        text = json.dumps(self.as_dict(), indent="\t", ensure_ascii=False)
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError:
            return json.dumps(self.as_dict(), indent="\t").encode("ascii")
