"""⚙️ Render Settings - Environment and YAML based configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings shared by every render.

    Read from ``PLUGINDOCS_*`` environment variables, or from a YAML file:

        metadata_error_policy: raise
        provider_dir: ./terraform-provider-example
        verbose: true
    """

    model_config = SettingsConfigDict(env_prefix="PLUGINDOCS_", case_sensitive=False)

    metadata_error_policy: Literal["abort", "raise"] = Field(
        default="abort",
        description="What to do with a malformed metadata file: exit the process or raise",
    )
    provider_dir: Path = Field(
        default=Path("."),
        description="Base directory for relative codefile/tffile paths",
    )
    verbose: bool = Field(default=False, description="Echo each render to the console")

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Settings":
        """Load settings from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings from environment."""
    return Settings()
