"""
Configuration module for spellcheck_bridge.

Settings are loaded from .env files and environment variables prefixed with
``SPELLCHECK_BRIDGE_``.
"""

from __future__ import annotations

from dotenv import find_dotenv, load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from spellcheck_bridge.models import LanguageConfig

load_dotenv(find_dotenv(".env", usecwd=True))


class Settings(BaseSettings):
    """Configuration settings for the spell-check bridge."""

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(
        default="", description="'json' or 'console'; empty selects by ENVIRONMENT"
    )
    ENVIRONMENT: str = "development"
    SERVICE_NAME: str = "spellcheck_bridge"

    DEFAULT_LANGUAGE: str = Field(
        default="en", description="Language the character-attribute table is built for"
    )

    # Names looked up on the provider object at call time
    PROVIDER_SPELL_CHECK_METHOD: str = "spell_check"
    PROVIDER_BATCH_CHECK_METHOD: str = "request_checking_of_text"
    PROVIDER_AUTO_CORRECT_METHOD: str = "auto_correct_word"

    PYSPELLCHECKER_DISTANCE: int = Field(
        default=2, ge=1, le=3, description="Edit distance used for auto-correction candidates"
    )

    @property
    def language_config(self) -> LanguageConfig:
        return LanguageConfig(default_language=self.DEFAULT_LANGUAGE)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="SPELLCHECK_BRIDGE_",
    )


settings = Settings()
