"""
Доменные объекты для индекса ассетов и сборки пакетов.

=== МОДЕЛИ ===
- AssetEvent / EventKind — изменение файловой системы (create, remove, rename, modify)
- PackageRequest — список относительных путей + префикс в архиве
- PackageManifest — requested/failed, сериализуется в metadata.json

=== ФОРМАТ metadata.json ===
    {
        "ResourcesRequested": ["x.txt", "missing.txt"],
        "ResourcesFailed": ["missing.txt"]
    }
"""

from .events import AssetEvent, EventKind
from .models import (
    MANIFEST_MODE,
    MANIFEST_NAME,
    PackageManifest,
    PackageRequest,
    to_asset_name,
)
from .exceptions import (
    AssetPackagerError,
    AssetRootNotADirectoryError,
    AssetRootNotFoundError,
    PackageBuildError,
    WatcherStartError,
)

__all__ = [
    "AssetEvent",
    "EventKind",
    "MANIFEST_MODE",
    "MANIFEST_NAME",
    "PackageManifest",
    "PackageRequest",
    "to_asset_name",
    "AssetPackagerError",
    "AssetRootNotADirectoryError",
    "AssetRootNotFoundError",
    "PackageBuildError",
    "WatcherStartError",
]
