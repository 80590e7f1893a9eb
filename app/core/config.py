from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "production", "staging", "test"]


def _resolve_env_files() -> tuple[str, ...]:
    env = os.getenv("OPHTHA_CONTENT_ENVIRONMENT", "development").lower()
    if env in {"prod", "production"}:
        return (".env", ".env.prod")
    if env in {"dev", "development"}:
        return (".env", ".env.dev")
    if env in {"test", "testing"}:
        return (".env", ".env.test")
    return (".env",)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OPHTHA_CONTENT_",
        env_file=_resolve_env_files(),
        extra="ignore",
        populate_by_name=True,
    )

    environment: Environment = "development"
    project_name: str = "Ophthalmology Content API"
    api_prefix: str = "/api"
    log_level: str = "INFO"
    log_json: bool = False
    allowed_hosts: list[str] = ["*"]
    enable_docs: bool = True
    expose_error_details: bool = True

    # Deployment secrets keep their unprefixed names.
    custom_api_key: str | None = Field(default=None, validation_alias="CUSTOM_API_KEY")
    openai_api_key: str | None = Field(default=None, validation_alias="OPENAI_API_KEY")


@lru_cache
def get_settings() -> Settings:
    return Settings()
