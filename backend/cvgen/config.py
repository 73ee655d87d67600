"""
Store env variables and other config settings.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RESUME_DIR = Path(__file__).resolve().parent / "resumes"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars to prevent crashes
    )

    # LLM Configuration
    # NOTE: keep it optional for import-time, enforce at call-time.
    openai_api_key: SecretStr | None = Field(default=None, description="OpenAI provider key")
    gemini_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "googleai_api_key"),
        description="Google Gemini provider key",
    )

    openai_model: str = "gpt-4o"
    gemini_model: str = "gemini-2.5-flash"
    timeout_seconds: int = 60

    # Shared secret every form submission must carry
    auth_token: SecretStr | None = Field(default=None, description="Submission auth token")

    csrf_cookie_secure: bool = False

    resume_dir: Path = DEFAULT_RESUME_DIR
    log_level: str = "INFO"

    def configured_auth_token(self) -> Optional[str]:
        """Return the submission token, or None when unset or empty."""
        if self.auth_token is None:
            return None
        token = self.auth_token.get_secret_value()
        return token or None


def configuration_warnings(settings: Settings) -> List[str]:
    """Degraded-functionality warnings shown on every rendered page."""
    warnings: List[str] = []
    if not settings.openai_api_key or not settings.openai_api_key.get_secret_value():
        warnings.append("OPENAI_API_KEY is not set. OpenAI features may not work.")
    if not settings.gemini_api_key or not settings.gemini_api_key.get_secret_value():
        warnings.append("GEMINI_API_KEY is not set. Google AI features may not work.")
    if settings.configured_auth_token() is None:
        warnings.append(
            "AUTH_TOKEN is not set or is empty. The application is insecure, "
            "and submissions will be blocked."
        )
    return warnings


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
