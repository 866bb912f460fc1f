"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) - single instance per process
    - Storage endpoint and public URL derive from auth_url unless set explicitly

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql+asyncpg://inkwell:inkwell@db:5432/inkwell"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Hosted auth provider (GoTrue-compatible REST)
    auth_url: str = "http://localhost:54321"
    auth_anon_key: str = "anon-placeholder"
    auth_timeout_seconds: float = 10.0
    signup_redirect_url: str = "http://localhost:3000/login"

    # Object storage (S3-compatible)
    storage_endpoint_url: str | None = None
    storage_public_base_url: str | None = None
    storage_access_key_id: str = "storage-access-key"
    storage_secret_access_key: str = "storage-secret-key"
    storage_region: str = "us-east-1"
    thumbnail_bucket: str = "post-thumbnail"
    thumbnail_prefix: str = "private"
    thumbnail_cache_control: str = "max-age=3600"

    # Client
    api_base_url: str = "http://localhost:8000"
    contact_webhook_url: str = "http://localhost:8000/contacts"
    request_timeout_seconds: float = 30.0
    locale: str = "en"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def resolved_storage_endpoint_url(self) -> str:
        return self.storage_endpoint_url or f"{self.auth_url.rstrip('/')}/storage/v1/s3"

    @property
    def resolved_storage_public_base_url(self) -> str:
        return (
            self.storage_public_base_url
            or f"{self.auth_url.rstrip('/')}/storage/v1/object/public"
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
