"""
Настройки Asset Packager

"""
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Определяем путь к корню проекта (где находится settings.py)
PROJECT_ROOT = Path(__file__).parent
ENV_FILE = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Настройки приложения

    Значения можно переопределить через переменные окружения или .env,
    по умолчанию сервис раздаёт ./assets на порту 8080.
    """

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Application
    APP_NAME: str = "Asset Packager"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"

    # Assets
    ASSETS_PATH: str = "./assets"  # Отслеживаемая папка с ассетами
    INDEX_CLOSE_TIMEOUT: float = 5.0  # Ожидание фоновых потоков индекса при остановке (секунды)

    # HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Packaging
    PACKAGE_PREFIX: str = ""  # Префикс записей в архиве по умолчанию
    PACKAGE_SPOOL_MAX_SIZE: int = 16 * 1024 * 1024  # Сколько байт архива держать в памяти до сброса на диск


def get_settings() -> Settings:
    """Получить настройки из ENV."""
    return Settings()


settings = get_settings()
