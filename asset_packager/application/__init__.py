"""Сценарии приложения: индекс ассетов и сборка пакетов."""
