"""
Package API — сборка архива из набора ассетов.
"""
import posixpath
import tempfile
from typing import BinaryIO, Iterator, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from asset_packager.api.dependencies import get_index
from asset_packager.application.index import AssetIndex
from asset_packager.application.packaging import PackageBuilder
from asset_packager.domain.assets import PackageBuildError
from utils.logging import get_logger

logger = get_logger("asset_packager.api.package")

router = APIRouter(prefix="/package", tags=["Package"])

CHUNK_SIZE = 64 * 1024


def _iter_file(handle: BinaryIO) -> Iterator[bytes]:
    while True:
        chunk = handle.read(CHUNK_SIZE)
        if not chunk:
            break
        yield chunk


def _archive_filename(prefix: str) -> str:
    base = posixpath.basename(prefix.strip("/"))
    return f"{base or 'package'}.tar.gz"


@router.post("")
async def build_package(
    request: Request,
    paths: List[str] = Body(..., description="Относительные пути ассетов"),
    prefix: Optional[str] = Query(None, description="Папка внутри архива"),
    index: AssetIndex = Depends(get_index),
):
    """
    Собрать tar.gz из запрошенных ассетов.

    Архив сначала собирается целиком во временный файл: если сборка
    прервалась, клиент получает 500, а не обрезанный архив.

    Example:
        POST /api/package?prefix=pkg
        ["css/site.css", "img/logo.png"]
    """
    app_settings = request.app.state.settings
    if prefix is None:
        prefix = app_settings.PACKAGE_PREFIX

    spool = tempfile.SpooledTemporaryFile(max_size=app_settings.PACKAGE_SPOOL_MAX_SIZE)
    builder = PackageBuilder(index)
    try:
        manifest = await run_in_threadpool(builder.build, spool, prefix, paths)
    except PackageBuildError as e:
        spool.close()
        logger.error(f"❌ Package build failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    spool.seek(0)
    logger.info(f"📤 Пакет отдан: prefix={prefix!r}, запрошено {len(manifest.requested)}, с ошибкой {len(manifest.failed)}")
    return StreamingResponse(
        _iter_file(spool),
        media_type="application/x-tar",
        headers={
            "Content-Encoding": "gzip",
            "Content-Disposition": f'attachment; filename="{_archive_filename(prefix)}"',
            "X-Resources-Failed": str(len(manifest.failed)),
        },
        background=BackgroundTask(spool.close),
    )
