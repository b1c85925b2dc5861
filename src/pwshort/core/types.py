"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class SplitResult:
    """Statement fragments and the delimiter runs that separated them."""

    fragments: list[str] = field(default_factory=list)
    delimiters: list[str] = field(default_factory=list)
    leading: str = ""  # delimiters seen before the first fragment


@dataclass(frozen=True)
class InvocationNode:
    """One command call with its parameter names as typed."""

    command_name: str
    parameters: list[str] = field(default_factory=list)
    text: str = ""


@dataclass(frozen=True)
class ExpressionNode:
    """Top-level statement that does not start with a command name."""

    text: str


SyntaxNode = Union[InvocationNode, ExpressionNode]


@dataclass(frozen=True)
class ParameterInfo:
    """Parameter definition exposed by a registry lookup."""

    name: str
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class CommandInfo:
    """Command metadata exposed by a registry lookup."""

    canonical_name: str
    queried_alias: bool = False
    aliases: tuple[str, ...] = ()
    parameters: tuple[ParameterInfo, ...] = ()


@dataclass(frozen=True)
class ResolvedCommand:
    """Command token as written and the short form chosen for it."""

    name: str
    canonical_name: str | None = None
    short_form: str | None = None

    @property
    def known(self) -> bool:
        return self.canonical_name is not None


@dataclass(frozen=True)
class ResolvedParameter:
    """Parameter token as typed and the alias chosen for it."""

    canonical_name: str
    token: str
    alias: str | None = None
    known: bool = True


ResolvedParameterMap = dict[str, ResolvedParameter]


@dataclass
class ShortenResult:
    """Output text of one shortening pass with its counters."""

    text: str
    fragments: int = 0
    commands_rewritten: int = 0
    parameters_rewritten: int = 0
    unknown_commands: int = 0
    unknown_parameters: int = 0
    unmatched_fragments: int = 0

    def summary(self) -> str:
        return (
            f"fragments={self.fragments} commands={self.commands_rewritten} "
            f"parameters={self.parameters_rewritten} unknown_commands={self.unknown_commands} "
            f"unknown_parameters={self.unknown_parameters} unmatched={self.unmatched_fragments}"
        )
