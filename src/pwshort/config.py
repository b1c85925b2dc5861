"""Configuration management for pwshort."""

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LINE_ENDINGS: dict[str, str] = {"crlf": "\r\n", "lf": "\n"}


class Settings(BaseSettings):
    """Shortener settings."""

    model_config = SettingsConfigDict(
        env_prefix="PWSHORT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Resolution
    implied_verb_prefix: str = Field(default="Get-", description="Verb prefix that may be dropped from a command")
    abbreviate_parameters: bool = Field(
        default=False, description="Shorten alias-less parameters to their shortest unambiguous prefix"
    )
    registry_path: Optional[Path] = Field(None, description="Extra YAML command definitions")

    # Output
    line_ending: Literal["crlf", "lf"] = Field(default="crlf", description="Line ending written between lines")
    collapse_whitespace: bool = Field(default=True, description="Collapse runs of spaces outside literals")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")

    @property
    def newline(self) -> str:
        return LINE_ENDINGS[self.line_ending]


def get_settings(**overrides: Any) -> Settings:
    """Get shortener settings.

    Args:
        **overrides: Field values that take precedence over the environment

    Returns:
        Settings instance
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
