"""
Asset Packager — FastAPI приложение.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from asset_packager.application.index import AssetIndex
from settings import Settings, settings as default_settings
from utils.logging import get_logger

logger = get_logger("asset_packager.api")


def create_app(index: Optional[AssetIndex] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Создаёт приложение.

    Если index не передан, он строится по settings.ASSETS_PATH при старте
    и закрывается при остановке. Переданный индекс закрывает вызывающий код.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle: startup и shutdown."""
        logger.info(f"🚀 {settings.APP_NAME} v{settings.VERSION} starting...")
        owned = None
        if app.state.index is None:
            owned = AssetIndex.open(settings.ASSETS_PATH)
            app.state.index = owned
        logger.info(f"📁 Assets: {app.state.index.root}")

        yield

        if owned is not None:
            owned.close(timeout=settings.INDEX_CLOSE_TIMEOUT)
        logger.info("👋 Asset Packager shutting down...")

    from asset_packager.api import router

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        description="Сборка tar.gz пакетов из отслеживаемой папки",
        lifespan=lifespan,
    )
    app.state.index = index
    app.state.settings = settings
    app.include_router(router)
    return app
