import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _env_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS")
    if raw is None:
        return list(DEFAULT_CORS_ORIGINS)
    return _split_origins(raw)


class Settings(BaseModel):
    PROJECT_NAME: str = "EasyCRUD Backend"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"

    # Server
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(default_factory=lambda: int(os.getenv("PORT", "8080")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    # CORS, comma separated in the environment
    cors_origins: List[str] = Field(default_factory=_env_origins)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origin_string(cls, v):
        return _split_origins(v) if isinstance(v, str) else v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
