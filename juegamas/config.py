from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str | None = None  # e.g. sqlite+aiosqlite:///./juegamas.db
    database_echo: bool = False
    use_in_memory: bool = True
    seed_demo_data: bool = True

    notification_webhook_url: str | None = None
    notification_timeout_seconds: float = 5.0

    storage_base_url: str | None = None
    storage_api_key: str | None = None
    storage_timeout_seconds: float = 10.0
    avatar_max_bytes: int = 5 * 1024 * 1024

    incidencia_auto_cierre_dias: int = 7
    default_per_page: int = 10
    max_per_page: int = 50
    zona_horaria: str = "America/Santiago"

    preferencias_path: str | None = None  # sin ruta: preferencias en memoria
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
