"""Validation policy configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables (or a local .env file)."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # State machine policy
    # "any": several entry states are legal; "single": exactly one is required.
    ENTRY_POINT_POLICY: Literal["any", "single"] = "any"
    REPORT_REACHABILITY: bool = True

    model_config = {"env_prefix": "PROJECTSPEC_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
