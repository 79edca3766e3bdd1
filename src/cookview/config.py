"""
cookview - Configuration and settings.

The API base address depends on the environment: production deployments
serve the API next to the web app under a relative path, development talks
to a recipe server on localhost. Settings are passed to RecipeClient
explicitly rather than read from module state.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_API_ROOT = "/api/0"
DEVELOPMENT_API_ROOT = "http://localhost:6969/api/0"


class Settings(BaseSettings):
    """Settings read from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    cookview_env: Literal["development", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Recipe server
    cookview_api_root: str | None = None  # Overrides the per-environment default
    cookview_origin: str = "http://localhost:6969"  # Used to resolve a relative api_root
    request_timeout: float = 10.0

    @property
    def is_development(self) -> bool:
        return self.cookview_env == "development"

    @property
    def is_production(self) -> bool:
        return self.cookview_env == "production"

    @property
    def api_root(self) -> str:
        """Base address of the recipe API, without a trailing slash."""
        if self.cookview_api_root:
            return self.cookview_api_root.rstrip("/")
        if self.is_production:
            return PRODUCTION_API_ROOT
        return DEVELOPMENT_API_ROOT

    @property
    def api_url(self) -> str:
        """Absolute API address, resolving a relative api_root against the origin."""
        root = self.api_root
        if root.startswith(("http://", "https://")):
            return root
        return self.cookview_origin.rstrip("/") + "/" + root.lstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
