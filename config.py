"""
Centralised settings loader (pydantic-settings).

Every field can be overridden from the environment or a local `.env`.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime / DB ───────────────────────────────────────────────
    env_name: str = Field("local", validation_alias="ENV_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    database_url: str | None = Field(None, validation_alias="DATABASE_URL")

    # ─── auth ───────────────────────────────────────────────────────
    jwt_secret: str = Field(
        "your-secret-key-change-in-production", validation_alias="JWT_SECRET"
    )
    jwt_ttl_minutes: int = Field(7 * 24 * 60, validation_alias="JWT_TTL_MINUTES")
    reset_token_ttl_minutes: int = Field(60, validation_alias="RESET_TOKEN_TTL_MINUTES")

    # ─── mail (password reset) ──────────────────────────────────────
    frontend_url: str = Field("http://localhost:5173", validation_alias="FRONTEND_URL")
    email_host: str = Field("localhost", validation_alias="EMAIL_HOST")
    email_port: int = Field(587, validation_alias="EMAIL_PORT")
    email_user: str | None = Field(None, validation_alias="EMAIL_USER")
    email_pass: str | None = Field(None, validation_alias="EMAIL_PASS")
    email_from: str = Field(
        '"Fitness Tracker" <noreply@fitnesstracker.com>', validation_alias="EMAIL_FROM"
    )

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )

    @property
    def is_production(self) -> bool:
        return self.env_name.lower() in ("prod", "production")


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
