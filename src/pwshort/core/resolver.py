"""Alias resolution for commands and parameters."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from pwshort.core.types import (
    CommandInfo,
    ParameterInfo,
    ResolvedCommand,
    ResolvedParameter,
    ResolvedParameterMap,
)
from pwshort.registry.store import AliasRegistry

DEFAULT_IMPLIED_VERB_PREFIX = "Get-"


def shortest_alias(aliases: Iterable[str]) -> str | None:
    """Pick the alias with the fewest characters.

    Equal lengths keep declaration order: the first declared alias wins.
    """

    return min(aliases, key=len, default=None)


class AliasResolver:
    """Look up short forms through an injected registry."""

    def __init__(
        self,
        registry: AliasRegistry,
        *,
        implied_verb_prefix: str = DEFAULT_IMPLIED_VERB_PREFIX,
        abbreviate_parameters: bool = False,
    ) -> None:
        self._registry = registry
        self._implied_verb_prefix = implied_verb_prefix
        self._abbreviate_parameters = abbreviate_parameters

    def resolve_command_alias(self, name: str) -> ResolvedCommand:
        info = self._registry.lookup(name)
        if info is None:
            logger.debug("resolve.command.unknown name={}", name)
            return ResolvedCommand(name=name)

        candidate = shortest_alias(info.aliases)
        if candidate is None:
            candidate = self._strip_implied_verb(info.canonical_name)

        if candidate is None or len(candidate) >= len(name):
            return ResolvedCommand(name=name, canonical_name=info.canonical_name)
        return ResolvedCommand(name=name, canonical_name=info.canonical_name, short_form=candidate)

    def resolve_parameter_alias(self, command: str, token: str) -> ResolvedParameter:
        info = self._registry.lookup(command)
        if info is None:
            return ResolvedParameter(canonical_name=token, token=token, known=False)

        parameter = _match_parameter(info, token)
        if parameter is None:
            logger.debug("resolve.parameter.unknown command={} token={}", info.canonical_name, token)
            return ResolvedParameter(canonical_name=token, token=token, known=False)

        candidate = shortest_alias(parameter.aliases)
        if candidate is None and self._abbreviate_parameters:
            candidate = unique_prefix(parameter, info.parameters)

        if candidate is None or len(candidate) >= len(token):
            return ResolvedParameter(canonical_name=parameter.name, token=token)
        return ResolvedParameter(canonical_name=parameter.name, token=token, alias=candidate)

    def resolve_parameters(self, command: str, tokens: Iterable[str]) -> ResolvedParameterMap:
        """Resolve every parameter token of one invocation, keyed by canonical name."""

        resolved: ResolvedParameterMap = {}
        for token in tokens:
            parameter = self.resolve_parameter_alias(command, token)
            resolved.setdefault(parameter.canonical_name, parameter)
        return resolved

    def _strip_implied_verb(self, canonical_name: str) -> str | None:
        prefix = self._implied_verb_prefix
        if not prefix or not canonical_name.casefold().startswith(prefix.casefold()):
            return None
        stripped = canonical_name[len(prefix) :]
        return stripped or None


def _match_parameter(info: CommandInfo, token: str) -> ParameterInfo | None:
    lowered = token.casefold()
    for parameter in info.parameters:
        if parameter.name.casefold() == lowered:
            return parameter
        if any(alias.casefold() == lowered for alias in parameter.aliases):
            return parameter
    return None


def unique_prefix(parameter: ParameterInfo, parameters: Iterable[ParameterInfo]) -> str | None:
    """Shortest prefix of the parameter name that no other parameter name or alias starts with."""

    others = [
        name.casefold()
        for other in parameters
        if other.name.casefold() != parameter.name.casefold()
        for name in (other.name, *other.aliases)
    ]
    for length in range(1, len(parameter.name) + 1):
        prefix = parameter.name[:length]
        lowered = prefix.casefold()
        if not any(name.startswith(lowered) for name in others):
            return prefix
    return None
