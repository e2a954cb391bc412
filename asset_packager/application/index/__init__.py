"""Живой индекс файлов отслеживаемой папки."""

from .asset_index import AssetIndex

__all__ = ["AssetIndex"]
