"""Shortening pipeline orchestration."""

from __future__ import annotations

from loguru import logger

from pwshort.config import Settings, get_settings
from pwshort.core.parser import SourceParser, StructuralParser
from pwshort.core.reassembler import reassemble
from pwshort.core.resolver import AliasResolver
from pwshort.core.rewriter import rewrite_invocation
from pwshort.core.splitter import split_statements
from pwshort.core.types import InvocationNode, ShortenResult
from pwshort.registry import load_registry
from pwshort.registry.store import AliasRegistry


class Shortener:
    """Rewrite source text to its shortest known command and parameter forms.

    One call to `run` is one independent pass: the registry is only read, and
    nothing computed for one input is kept for the next.
    """

    def __init__(
        self,
        registry: AliasRegistry | None = None,
        parser: StructuralParser | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._registry = registry if registry is not None else load_registry(self._settings.registry_path)
        self._parser = parser or SourceParser()
        self._resolver = AliasResolver(
            self._registry,
            implied_verb_prefix=self._settings.implied_verb_prefix,
            abbreviate_parameters=self._settings.abbreviate_parameters,
        )

    @property
    def resolver(self) -> AliasResolver:
        return self._resolver

    def shorten(self, source: str) -> str:
        return self.run(source).text

    def run(self, source: str) -> ShortenResult:
        """Shorten one block of source text.

        Raises:
            ParseFailure: the parser rejected the input. Nothing is shortened.
        """

        nodes = self._parser.parse(source)
        split = split_statements(source)
        if len(nodes) != len(split.fragments):
            logger.warning(
                "shorten.positional_mismatch fragments={} nodes={}",
                len(split.fragments),
                len(nodes),
            )

        result = ShortenResult(text="", fragments=len(split.fragments))
        rewritten: list[str] = []
        for index, fragment in enumerate(split.fragments):
            if index >= len(nodes):
                result.unmatched_fragments += 1
                rewritten.append(fragment)
                continue
            node = nodes[index]
            if not self._parser.is_invocation(node):
                rewritten.append(fragment)
                continue
            rewritten.append(self._rewrite(fragment, node, result))

        result.text = reassemble(
            rewritten,
            split.delimiters,
            leading=split.leading,
            line_ending=self._settings.newline,
            collapse_whitespace=self._settings.collapse_whitespace,
        )
        logger.debug("shorten.done {}", result.summary())
        return result

    def _rewrite(self, fragment: str, node: InvocationNode, result: ShortenResult) -> str:
        command = self._resolver.resolve_command_alias(node.command_name)
        if not command.known:
            result.unknown_commands += 1
            return fragment

        parameters = self._resolver.resolve_parameters(command.canonical_name or node.command_name, node.parameters)
        result.unknown_parameters += sum(1 for item in parameters.values() if not item.known)

        text = rewrite_invocation(fragment, command, parameters)
        if command.short_form is not None:
            result.commands_rewritten += 1
        result.parameters_rewritten += sum(1 for item in parameters.values() if item.alias is not None)
        logger.debug("shorten.fragment before={!r} after={!r}", fragment, text)
        return text


def shorten(
    source: str,
    *,
    registry: AliasRegistry | None = None,
    parser: StructuralParser | None = None,
    settings: Settings | None = None,
) -> str:
    """Shorten source text in one call."""

    return Shortener(registry=registry, parser=parser, settings=settings).shorten(source)
