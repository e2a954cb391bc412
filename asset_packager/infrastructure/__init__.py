"""Инфраструктура: интеграция с файловой системой."""
