"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jwlib_linker.core.language import Language, parse_language


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Default bible language for the adapters; the engine itself always takes it explicitly
    JWLIB_LINKER_LANGUAGE: Language = Field(default=Language.ENGLISH)
    JWLIB_LINKER_LOG_LEVEL: str = Field(default="info")
    JWLIB_LINKER_LOG_DIR: Path | None = Field(default=None)
    JWLIB_LINKER_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")

    DATA_DIR: Path = Field(default=Path("/data"))

    @field_validator("JWLIB_LINKER_LANGUAGE", mode="before")
    @classmethod
    def _coerce_language(cls, value: str | Language) -> Language:
        # accepts "EN", "en", "English", "french"...
        return parse_language(value)


settings = Settings()


__all__ = ["Settings", "settings"]
