"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Limits applied while loading and reporting on configuration files.

    Values are read from ``YAMLBIND_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="YAMLBIND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Loader safety limits
    max_document_size: int = Field(default=5_000_000, gt=0)  # characters
    max_node_count: int = Field(default=50_000, gt=0)
    max_depth: int = Field(default=20, gt=0)

    # Reporting
    max_suggestions: int = Field(default=5, gt=0)
