"""
Centralised settings loader (pydantic-settings).

Everything can be overridden from the environment or a local `.env`.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = Field("local", validation_alias="ENV_NAME")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # ─── HTTP ───────────────────────────────────────────────────────
    cors_origins: list[str] = Field(["*"], validation_alias="CORS_ORIGINS")

    # ─── calculator ─────────────────────────────────────────────────
    # body weight behind the "calories by steps & pace" table
    reference_weight_kg: float = Field(68.0, validation_alias="REFERENCE_WEIGHT_KG")

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
