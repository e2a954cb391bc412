"""Источник событий файловой системы на базе watchdog."""

from .source import EventSource, WatchdogEventSource, AssetEventHandler

__all__ = ["EventSource", "WatchdogEventSource", "AssetEventHandler"]
