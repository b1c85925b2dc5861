"""Application-level exception types for pwshort."""

from __future__ import annotations


class PwshortError(Exception):
    """Base exception for pwshort."""


class ParseFailure(PwshortError):
    """Raised when source text cannot be split into a syntax tree."""

    def __init__(self, message: str, *, offset: int = -1) -> None:
        super().__init__(message if offset < 0 else f"{message} (offset {offset})")
        self.reason = message
        self.offset = offset


class ConfigurationError(PwshortError):
    """Base exception for configuration and startup validation errors."""


class RegistryLoadError(ConfigurationError):
    """Raised when a command registry file cannot be read or validated."""
