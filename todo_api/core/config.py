from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── App ──────────────────────────────────────────────────────────────────
    app_name: str = "Todo API"
    app_version: str = "0.1.0"
    debug: bool = False

    # ── Logging ──────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── Plans ────────────────────────────────────────────────────────────────
    # Max todos a free (non-pro) user may hold
    free_plan_todo_limit: int = 10

    # ── CORS ─────────────────────────────────────────────────────────────────
    cors_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
