"""Конфигурация приложения"""
from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки приложения"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        # Игнорируем посторонние переменные окружения хостинга
        extra="ignore",
    )

    # Идентификатор сервиса в ответе /health
    service_name: str = "karmicAnk"

    # API (хостинг передает порт в PORT)
    api_host: str = "0.0.0.0"
    api_port: int = Field(
        default=3000,
        validation_alias=AliasChoices("port", "api_port"),
    )

    # CORS
    cors_origins: List[str] = ["*"]

    # Application
    debug: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Единственный экземпляр настроек на процесс"""
    return Settings()


settings = get_settings()
