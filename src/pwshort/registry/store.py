"""In-memory command registry backed by YAML definitions."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Protocol

import yaml
from loguru import logger
from pydantic import ValidationError

from pwshort.core.types import CommandInfo, ParameterInfo
from pwshort.errors import RegistryLoadError
from pwshort.registry.models import CommandDefinition, ParameterDefinition, RegistryFile

DEFAULT_COMMANDS_FILE = Path(__file__).resolve().parent / "data" / "commands.yaml"


class AliasRegistry(Protocol):
    """Read-only lookup contract used by the resolver."""

    def lookup(self, name: str) -> CommandInfo | None: ...


class CommandRegistry:
    """Case-insensitive registry of commands, their aliases and parameters."""

    def __init__(
        self,
        commands: Iterable[CommandDefinition] = (),
        common_parameters: Iterable[ParameterDefinition] = (),
    ) -> None:
        self._commands: dict[str, CommandDefinition] = {}
        self._aliases: dict[str, str] = {}
        self._common_parameters: list[ParameterDefinition] = list(common_parameters)
        for definition in commands:
            self.register(definition)

    def register(self, definition: CommandDefinition) -> None:
        key = definition.name.casefold()
        if key in self._commands:
            logger.debug("registry.replace name={}", definition.name)
            self._aliases = {alias: target for alias, target in self._aliases.items() if target != key}
        self._commands[key] = definition
        for alias in definition.aliases:
            previous = self._aliases.get(alias.casefold())
            if previous is not None and previous != key:
                logger.debug("registry.alias.reassigned alias={} from={} to={}", alias, previous, key)
            self._aliases[alias.casefold()] = key

    def lookup(self, name: str) -> CommandInfo | None:
        key = name.casefold()
        queried_alias = False
        definition = self._commands.get(key)
        if definition is None:
            target = self._aliases.get(key)
            if target is None:
                return None
            definition = self._commands[target]
            queried_alias = True

        return CommandInfo(
            canonical_name=definition.name,
            queried_alias=queried_alias,
            aliases=definition.aliases,
            parameters=self._parameters_for(definition),
        )

    def has(self, name: str) -> bool:
        return self.lookup(name) is not None

    def commands(self) -> list[CommandDefinition]:
        return sorted(self._commands.values(), key=lambda item: item.name.casefold())

    @property
    def common_parameters(self) -> list[ParameterDefinition]:
        return list(self._common_parameters)

    def merge(self, other: CommandRegistry) -> CommandRegistry:
        """Return a new registry where definitions from `other` take precedence."""

        common = {parameter.name.casefold(): parameter for parameter in self._common_parameters}
        for parameter in other.common_parameters:
            common[parameter.name.casefold()] = parameter
        merged = CommandRegistry(self._commands.values(), common.values())
        for definition in other.commands():
            merged.register(definition)
        return merged

    def _parameters_for(self, definition: CommandDefinition) -> tuple[ParameterInfo, ...]:
        parameters = [ParameterInfo(name=item.name, aliases=item.aliases) for item in definition.parameters]
        declared = {item.name.casefold() for item in definition.parameters}
        for item in self._common_parameters:
            if item.name.casefold() not in declared:
                parameters.append(ParameterInfo(name=item.name, aliases=item.aliases))
        return tuple(parameters)

    @classmethod
    def from_mapping(cls, payload: Any, *, source: str = "<mapping>") -> CommandRegistry:
        if payload is None:
            payload = {}
        try:
            parsed = RegistryFile.model_validate(payload)
        except ValidationError as exc:
            raise RegistryLoadError(f"invalid registry definitions in {source}: {exc}") from exc
        return cls(parsed.commands, parsed.common_parameters)

    @classmethod
    def from_yaml(cls, path: Path) -> CommandRegistry:
        try:
            payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise RegistryLoadError(f"cannot read registry file {path}: {exc}") from exc
        registry = cls.from_mapping(payload, source=str(path))
        logger.debug("registry.loaded path={} commands={}", path, len(registry.commands()))
        return registry

    @classmethod
    def default(cls) -> CommandRegistry:
        return cls.from_yaml(DEFAULT_COMMANDS_FILE)
