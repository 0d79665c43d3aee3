"""Configuration management for casemark."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Compiler configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Inline formatting
    max_inline_depth: int = Field(
        default=32,
        ge=1,
        alias="CASEMARK_MAX_INLINE_DEPTH",
    )

    # JSON highlighting
    highlight_class_prefix: str = Field(
        default="json-",
        alias="CASEMARK_HIGHLIGHT_PREFIX",
    )

    # HTML rendering
    allowed_link_schemes: str = Field(
        default="http,https,mailto",
        alias="CASEMARK_LINK_SCHEMES",
    )
    link_new_tab: bool = Field(
        default=True,
        alias="CASEMARK_LINK_NEW_TAB",
    )

    # CLI
    default_output_format: str = Field(
        default="html",
        alias="CASEMARK_OUTPUT_FORMAT",
    )
    log_level: str = Field(
        default="WARNING",
        alias="CASEMARK_LOG_LEVEL",
    )

    @field_validator("default_output_format")
    @classmethod
    def _normalize_format(cls, value: str) -> str:
        return value.strip().lower()

    @property
    def link_schemes(self) -> tuple[str, ...]:
        """Allowed link schemes as a lowercase tuple."""
        return tuple(
            scheme.strip().lower()
            for scheme in self.allowed_link_schemes.split(",")
            if scheme.strip()
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
