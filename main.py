#!/usr/bin/env python3
"""
Asset Packager — HTTP сервис сборки пакетов из отслеживаемой папки
"""
import argparse
import sys
from typing import List, Optional

import uvicorn

from asset_packager.api import create_app
from asset_packager.application.index import AssetIndex
from asset_packager.domain.assets import AssetPackagerError
from settings import settings
from utils.logging import setup_logging, get_logger

logger = get_logger("asset_packager")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="asset-packager",
        description="Serve tar.gz packages of files from a watched directory.",
    )
    parser.add_argument("assets_dir", nargs="?", default=settings.ASSETS_PATH, help="directory to index and serve")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--prefix", default=settings.PACKAGE_PREFIX, help="default folder inside each archive")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Строит индекс и запускает uvicorn"""
    args = parse_args(argv)
    setup_logging()

    config = settings.model_copy(update={
        "ASSETS_PATH": args.assets_dir,
        "HOST": args.host,
        "PORT": args.port,
        "PACKAGE_PREFIX": args.prefix,
    })

    logger.info("=" * 60)
    logger.info(f"{config.APP_NAME} v{config.VERSION} starting")
    logger.info(f"Assets path: {config.ASSETS_PATH}")
    logger.info(f"Listen: {config.HOST}:{config.PORT}")
    logger.info("=" * 60)

    try:
        index = AssetIndex.open(config.ASSETS_PATH)
    except AssetPackagerError as e:
        logger.error(f"❌ Failed to initialize asset index: {e}")
        return 1

    try:
        uvicorn.run(create_app(index=index, settings=config), host=config.HOST, port=config.PORT, log_config=None)
    finally:
        index.close(timeout=config.INDEX_CLOSE_TIMEOUT)

    logger.info("Asset Packager stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
