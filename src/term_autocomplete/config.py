"""Centralized configuration for term-autocomplete using Pydantic Settings."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from term_autocomplete.search.models import MAX_TERM_LENGTH


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    All environment variables are validated at startup with proper types.
    Command-line flags override these values where the CLI exposes them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Dictionary settings
    dictionary_path: str = Field(default="", description="Path of the weighted dictionary file to load")
    file_encoding: str = Field(default="utf-8", description="Text encoding of dictionary files")
    max_term_length: int = Field(
        default=MAX_TERM_LENGTH,
        ge=1,
        description="Maximum UTF-8 length of a term in bytes; longer terms are rejected",
    )

    # Query settings
    result_limit: int | None = Field(
        default=None,
        ge=0,
        description="Maximum suggestions returned per query (unset returns every match)",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON log lines")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        if not isinstance(logging.getLevelName(value.upper()), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return value.lower()

    def get_dictionary_path(self) -> Path | None:
        """Get the configured dictionary path.

        Returns:
            Expanded path, or None when DICTIONARY_PATH is not set
        """
        if not self.dictionary_path.strip():
            return None
        return Path(self.dictionary_path.strip()).expanduser()

    def get_log_level(self) -> int:
        """Get the numeric logging level."""
        return logging.getLevelName(self.log_level.upper())
