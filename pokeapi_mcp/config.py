"""Runtime settings for the poke-api MCP server."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Immutable server configuration.

    Values are read from ``POKEAPI_MCP_*`` environment variables or a local
    ``.env`` file, falling back to the public PokeAPI defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="POKEAPI_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    api_base: str = Field(
        default="https://pokeapi.co/api/v2",
        description="Base URL that request paths are appended to",
    )
    # Highest national dex number (as of April 2025).
    max_pokemon_id: int = Field(default=1025, ge=1)
    server_name: str = "poke-api"
    log_level: str = "INFO"

    @field_validator("api_base")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, built once at startup."""
    return Settings()
