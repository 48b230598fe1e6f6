"""Configuration management for the Bijbel API."""
import os
from pathlib import Path
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    app_name: str = Field(default="bijbel-api", env="APP_NAME")
    app_version: str = Field(default="1.0.0", env="APP_VERSION")
    debug: bool = Field(default=False, env="DEBUG")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # Bundled data location. The bundle itself is static; only its location
    # can be pointed elsewhere (fixture bundles, redeployed data volumes).
    data_dir: Path = Field(default=PACKAGE_DATA_DIR, env="DATA_DIR")

    # In-process memoization of parsed per-book files
    cache_enabled: bool = Field(default=True, env="CACHE_ENABLED")

    # CORS Configuration
    @computed_field
    @property
    def allowed_origins(self) -> list[str]:
        """Parse allowed origins from environment variable or allow all."""
        allowed_origins_str = os.getenv("ALLOWED_ORIGINS", "*")
        return [origin.strip() for origin in allowed_origins_str.split(",") if origin.strip()]

    @property
    def books_catalog_path(self) -> Path:
        return self.data_dir / "books.json"

    @property
    def books_dir(self) -> Path:
        return self.data_dir / "books"

    @property
    def crossrefs_dir(self) -> Path:
        return self.data_dir / "crossrefs"

    model_config = SettingsConfigDict(
        env_file=None,  # Don't load from .env file
        case_sensitive=False,
        extra="ignore"
    )


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
