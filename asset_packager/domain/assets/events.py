from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventKind(str, Enum):
    """Виды изменений файловой системы, которые видит индекс."""

    CREATE = "create"
    REMOVE = "remove"
    RENAME = "rename"
    MODIFY = "modify"


@dataclass(frozen=True, slots=True)
class AssetEvent:
    """Одно изменение файловой системы. path — абсолютный путь."""

    kind: EventKind
    path: str
