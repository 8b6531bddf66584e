"""Application settings using pydantic-settings.

Every field can be overridden through an environment variable with the
``SHOP_`` prefix, or a ``.env`` file in the working directory.

Environment Variables:
    SHOP_DATA_DIR: directory holding products/baskets/orders JSON files
    SHOP_DEFAULT_CURRENCY: currency used when a command omits one
    SHOP_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR
    SHOP_LOG_FORMAT: console | json
    SHOP_LOCK_TIMEOUT: seconds to wait for the data directory lock
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="SHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(default=Path("data"), description="JSON storage directory")
    default_currency: str = Field(default="USD", min_length=1)
    lock_timeout: float = Field(default=10.0, gt=0, description="Data directory lock wait")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: Literal["console", "json"] = "console"

    @field_validator("default_currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
