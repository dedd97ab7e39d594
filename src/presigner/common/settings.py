"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PRESIGNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Signing
    secret_key: SecretStr | None = Field(
        default=None,
        description="Shared secret used to sign requests",
    )
    default_ttl_seconds: int = Field(
        default=3600,
        gt=0,
        description="Lifetime of a presigned request when no expiry is given",
    )

    # Presentation
    signature_header: str = Field(
        default="X-Signature",
        description="Header carrying the signature",
    )
    expires_header: str = Field(
        default="X-Expires",
        description="Header carrying the expiry timestamp",
    )
    signature_param: str = Field(
        default="signature",
        description="Query parameter carrying the signature",
    )
    expires_param: str = Field(
        default="expires",
        description="Query parameter carrying the expiry timestamp",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Minimum log level",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON lines instead of console output",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def secret_key_bytes(self) -> bytes | None:
        """Get the configured secret as bytes, or None if unset."""
        if self.secret_key is None:
            return None
        return self.secret_key.get_secret_value().encode("utf-8")


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
