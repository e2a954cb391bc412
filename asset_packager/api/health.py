"""
Health check endpoint.
"""
from fastapi import APIRouter, Depends, Request

from asset_packager.api.dependencies import get_index
from asset_packager.application.index import AssetIndex

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request, index: AssetIndex = Depends(get_index)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": request.app.state.settings.APP_NAME,
        "assets": index.present_count,
    }
