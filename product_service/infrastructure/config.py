"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be overridden with a ``PRODUCT_SERVICE_`` prefixed
    variable, e.g. ``PRODUCT_SERVICE_PORT=8080``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    service_name: str = "product-service"
    api_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3001
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Catalog
    seed_catalog: bool = True
    generated_products: int = Field(default=0, ge=0)
    random_seed: int = 42
    default_page_limit: int = Field(default=10, ge=1)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
