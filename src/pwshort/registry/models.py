"""Registry file schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _definitions_from_mapping(value: Any) -> Any:
    # `{Name: [alias, ...]}` is shorthand for `[{name: Name, aliases: [...]}]`
    if isinstance(value, dict):
        return [{"name": name, "aliases": aliases or []} for name, aliases in value.items()]
    return value


class ParameterDefinition(BaseModel):
    """One declared parameter and its aliases."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    aliases: tuple[str, ...] = ()


class CommandDefinition(BaseModel):
    """One command with its aliases and parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    aliases: tuple[str, ...] = ()
    parameters: tuple[ParameterDefinition, ...] = ()

    @field_validator("parameters", mode="before")
    @classmethod
    def _parameters_mapping(cls, value: Any) -> Any:
        return _definitions_from_mapping(value)


class RegistryFile(BaseModel):
    """Top-level layout of a commands YAML file."""

    model_config = ConfigDict(extra="forbid")

    commands: list[CommandDefinition] = Field(default_factory=list)
    common_parameters: list[ParameterDefinition] = Field(default_factory=list)

    @field_validator("common_parameters", mode="before")
    @classmethod
    def _common_parameters_mapping(cls, value: Any) -> Any:
        return _definitions_from_mapping(value)
