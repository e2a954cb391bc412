"""
API роуты Asset Packager.

Структура эндпоинтов:
- /health — проверка здоровья и размер индекса
- /api/package — сборка tar.gz пакета по списку путей
"""
from fastapi import APIRouter

from .health import router as health_router
from .package import router as package_router
from .app import create_app

router = APIRouter()
router.include_router(health_router)
router.include_router(package_router, prefix="/api")

__all__ = ["router", "create_app"]
