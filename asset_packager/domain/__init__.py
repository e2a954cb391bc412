"""Доменные объекты: события, manifest пакета и ошибки."""
