"""Сборка tar.gz пакетов из ассетов индекса."""

from .builder import PackageBuilder, entry_name

__all__ = ["PackageBuilder", "entry_name"]
