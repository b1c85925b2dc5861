"""Command and parameter alias registry."""

from __future__ import annotations

from pathlib import Path

from pwshort.registry.models import CommandDefinition, ParameterDefinition, RegistryFile
from pwshort.registry.store import DEFAULT_COMMANDS_FILE, AliasRegistry, CommandRegistry


def load_registry(extra_path: Path | None = None) -> CommandRegistry:
    """Load bundled definitions, overlaid with an optional user file."""

    registry = CommandRegistry.default()
    if extra_path is not None:
        registry = registry.merge(CommandRegistry.from_yaml(extra_path))
    return registry


__all__ = [
    "DEFAULT_COMMANDS_FILE",
    "AliasRegistry",
    "CommandDefinition",
    "CommandRegistry",
    "ParameterDefinition",
    "RegistryFile",
    "load_registry",
]
