"""
Runtime configuration helpers for the artbase service.

Loads DATABASE_URL and other variables from the .env file located in the
project root.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Final

from dotenv import load_dotenv
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[1]

ENV_PATH = BASE_DIR / ".env"

# Platform-provided environment variables win over .env defaults
load_dotenv(dotenv_path=ENV_PATH, override=False)

_PLACEHOLDER_SECRETS: Final[set[str]] = {"changeme", "change-me", "placeholder", "secret", "your-key-here"}


class MissingSecretError(RuntimeError):
    """Raised when a required secret is unset or still holds a placeholder."""


class Settings(BaseSettings):
    database_url: str = Field(..., alias="DATABASE_URL")

    app_name: str = Field(default="artbase", alias="APP_NAME")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")
    public_base_url: str = Field(default="http://localhost:8000", alias="PUBLIC_BASE_URL")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    jwt_secret_key: SecretStr | None = Field(default=None, alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expires_minutes: int = Field(default=1440, alias="JWT_EXPIRES_MINUTES")

    # Manual tip settlement target shown on the tip screen
    tip_recipient_number: str = Field(default="+263 77 123 4567", alias="TIP_RECIPIENT_NUMBER")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return origins or ["*"]

    def require_jwt_secret(self) -> str:
        """Return the signing key or raise :class:`MissingSecretError`."""

        value = self.jwt_secret_key.get_secret_value().strip() if self.jwt_secret_key else ""
        if not value or value.lower() in _PLACEHOLDER_SECRETS:
            raise MissingSecretError("JWT_SECRET_KEY is required and must not use a placeholder value")
        return value


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["MissingSecretError", "Settings", "get_settings"]
