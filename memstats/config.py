from __future__ import annotations

from functools import lru_cache

from loguru import logger
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from memstats.exceptions import ConfigError


class MemStatsSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    max_stats: int = Field(default=0, alias="MEMSTATS_MAX_STATS")
    include_headers: bool = Field(default=False, alias="MEMSTATS_INCLUDE_HEADERS")
    log_level: str = Field(default="INFO", alias="MEMSTATS_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        try:
            logger.level(level)
        except ValueError as exc:
            raise ValueError(f"Unknown log level: {value}") from exc
        return level


@lru_cache
def get_settings() -> MemStatsSettings:
    try:
        return MemStatsSettings()
    except ValidationError as exc:
        logger.error("Configuration validation failed: {}", exc)
        raise ConfigError("Invalid memstats configuration", detail=str(exc)) from exc
