"""Configuration management for Todo Store."""

from __future__ import annotations

import logging
from functools import lru_cache

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()


class StoreSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TODO_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    title_max_length: int = Field(default=20, ge=1)


class ServerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TODO_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 8000


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_json: bool = False

    @property
    def store(self) -> StoreSettings:
        return StoreSettings()

    @property
    def server(self) -> ServerSettings:
        return ServerSettings()


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Route structlog output through a level filter and a console/JSON renderer."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        logger.warning("unknown_log_level", log_level=settings.log_level)
        level = logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
