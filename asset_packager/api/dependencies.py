"""Зависимости FastAPI."""
from fastapi import HTTPException, Request

from asset_packager.application.index import AssetIndex


def get_index(request: Request) -> AssetIndex:
    """Индекс, созданный при старте приложения."""
    index = getattr(request.app.state, "index", None)
    if index is None:
        raise HTTPException(status_code=503, detail="Asset index is not ready")
    return index
