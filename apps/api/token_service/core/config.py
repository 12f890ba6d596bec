"""Application configuration for the token service."""
from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_env: str = Field(default="development")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    log_level: str = Field(default="INFO")
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    secret_name: str = Field(default="lag-live-agora")
    aws_region: str | None = Field(default=None)

    # Local development override; when both are set the secret store is skipped.
    agora_app_id: str = Field(default="")
    agora_app_certificate: str = Field(default="")

    default_expiry_seconds: str = Field(default="3600")

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """Allow comma-separated env values for CORS origins."""

        if isinstance(value, str):
            parts = [item.strip() for item in value.split(",") if item.strip()]
            return parts
        return value

    @field_validator("port", mode="before")
    @classmethod
    def _default_blank_port(cls, value: object) -> object:
        """Treat an empty PORT variable the same as an unset one."""

        if isinstance(value, str) and not value.strip():
            return 8080
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


settings = get_settings()
