from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Reflections Content API"
    app_version: str = "1.0.0"
    app_env: str = "dev"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    # Required: the service refuses to start without a database.
    database_url: str
    auto_create_tables: bool = True

    cors_origins: str = "https://monkreflections.com,http://localhost:3000"

    storage_backend: str = "s3"  # s3 | local | none
    media_dir: str = "./media"
    media_base_url: str = "http://localhost:8000/media"

    s3_bucket: str = ""
    s3_region: str = "us-east-1"
    s3_endpoint: str | None = None
    s3_access_key: str | None = None
    s3_secret_key: str | None = None
    s3_public_base_url: str | None = None

    image_max_bytes: int = 5 * 1024 * 1024
    image_jpeg_quality: int = 80

    @property
    def media_path(self) -> Path:
        return Path(self.media_dir).resolve()

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    get_settings.cache_clear()
