from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import ClassVar

from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StrEnum(str, Enum):
    pass


class Environment(StrEnum):
    dev = "dev"
    prod = "prod"


class Paths:
    # repository root
    ROOT_DIR: Path = Path(__file__).parent.parent
    # dependent_filters package
    BASE_DIR: Path = ROOT_DIR / "dependent_filters"


class Settings(BaseSettings):
    PATHS: ClassVar[Paths] = Paths()

    DEBUG: bool = False
    ENV: Environment = Environment.dev
    # Mount point of the filter endpoints inside the admin panel
    URL_PREFIX: str = "/nova-vendor/awesome-nova"

    LOGGING_LEVEL: str = "INFO"

    SERVER_HOST: str | AnyHttpUrl = "http://localhost:8000"

    BACKEND_CORS_ORIGINS: list[AnyHttpUrl | str] = []

    # Modules declaring resources, imported at startup so they can register themselves
    RESOURCE_MODULES: list[str] = []

    @field_validator("BACKEND_CORS_ORIGINS", "RESOURCE_MODULES", mode="before")
    @classmethod
    def assemble_list(cls, v: str | list[str]) -> list[str] | str:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # pydantic settings config
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Get the settings object.
    Loaded lazily on first use and cached afterwards.
    :return: Settings
    """
    return Settings()
