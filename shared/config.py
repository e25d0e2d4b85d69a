"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Exa API
    exa_api_key: str = ""
    exa_api_base: str = "https://api.exa.ai"
    # Seconds; None leaves timeouts to the caller's cancellation
    exa_timeout: float | None = None

    # Inter-service auth (empty disables the check)
    service_auth_token: str = ""

    # Service
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def require_api_key(self) -> str:
        """Return the Exa API key, raising if it is not configured."""
        if not self.exa_api_key:
            raise RuntimeError(
                "EXA_API_KEY environment variable is required. "
                "Set it with: export EXA_API_KEY=your_key_here"
            )
        return self.exa_api_key


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
