"""
Настройка логирования для приложения
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from settings import Settings, settings as default_settings


def setup_logging(config: Optional[Settings] = None) -> None:
    """Настраивает логирование для всего приложения"""
    config = config or default_settings
    level = getattr(logging, config.LOG_LEVEL.upper())

    # Получаем корневой logger
    logger = logging.getLogger()
    logger.setLevel(level)

    # Очищаем существующие handlers
    logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Формат логов
    if config.ENVIRONMENT == 'production':
        # JSON формат для production
        formatter = jsonlogger.JsonFormatter(
            '%(asctime)s %(name)s %(levelname)s %(message)s',
            timestamp=True
        )
    else:
        # Читаемый формат для development
        formatter = logging.Formatter(
            config.LOG_FORMAT,
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Уменьшаем уровень логирования для сторонних библиотек
    logging.getLogger('watchdog').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Получить logger для модуля"""
    return logging.getLogger(name)
