"""
Централизованная конфигурация клиента
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pikks_client.constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_TIMEOUT,
    DEFAULT_STORAGE_DIR,
)


class Settings(BaseSettings):
    """Настройки клиента с валидацией через Pydantic"""

    # API
    api_base_url: str = DEFAULT_API_BASE_URL
    api_timeout: int = DEFAULT_API_TIMEOUT

    # Хранилище сессии
    storage_dir: Path = Path(DEFAULT_STORAGE_DIR)

    # Логирование
    log_level: str = "INFO"
    json_logs: bool = False

    model_config = SettingsConfigDict(
        env_prefix="PIKKS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Базовый URL хранится без завершающего слэша"""
        return v.rstrip("/")

    @field_validator("storage_dir")
    @classmethod
    def expand_storage_dir(cls, v: Path) -> Path:
        return v.expanduser()


@lru_cache()
def get_settings() -> Settings:
    """Возвращает синглтон настроек"""
    return Settings()
