from __future__ import annotations

from typing import Literal

from pydantic import NonNegativeInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TEMPCONV_",
        extra="ignore",
    )

    output_format: Literal["rich", "json", "quiet"] | None = None
    precision: NonNegativeInt | None = None
    verbose: bool = False
