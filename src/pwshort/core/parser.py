"""Structural parsing of source text into top-level syntax nodes."""

from __future__ import annotations

import re
from typing import Protocol, TypeGuard

from pwshort.core.scanner import ESCAPE, scan_source
from pwshort.core.splitter import split_statements
from pwshort.core.types import ExpressionNode, InvocationNode, SyntaxNode
from pwshort.errors import ParseFailure

PARAMETER_RE = re.compile(r"^-([A-Za-z_][A-Za-z0-9_]*)(?::|$)")
EXPRESSION_LEADERS = frozenset("$#@([{'\"0123456789.&!+<>=,-")
KEYWORDS = frozenset(
    {
        "begin",
        "break",
        "catch",
        "class",
        "continue",
        "data",
        "do",
        "dynamicparam",
        "else",
        "elseif",
        "end",
        "enum",
        "exit",
        "filter",
        "finally",
        "for",
        "foreach",
        "function",
        "if",
        "param",
        "process",
        "return",
        "switch",
        "throw",
        "trap",
        "try",
        "until",
        "using",
        "while",
        "workflow",
    }
)


class StructuralParser(Protocol):
    """Contract for parsers that feed the shortener."""

    def parse(self, source: str) -> list[SyntaxNode]: ...

    def is_invocation(self, node: SyntaxNode) -> TypeGuard[InvocationNode]: ...


class SourceParser:
    """Parser producing one node per top-level statement fragment."""

    def parse(self, source: str) -> list[SyntaxNode]:
        scan = scan_source(source)
        if scan.error is not None:
            raise ParseFailure(scan.error, offset=scan.error_offset)
        split = split_statements(source)
        nodes: list[SyntaxNode] = []
        for index, fragment in enumerate(split.fragments):
            before = split.delimiters[index - 1] if index else split.leading
            nodes.append(parse_statement(fragment, piped="|" in before))
        return nodes

    def invocations(self, source: str) -> list[InvocationNode]:
        return [node for node in self.parse(source) if self.is_invocation(node)]

    @staticmethod
    def is_invocation(node: SyntaxNode) -> TypeGuard[InvocationNode]:
        return isinstance(node, InvocationNode)


def parse_statement(fragment: str, *, piped: bool = False) -> SyntaxNode:
    """Classify one fragment as a command invocation or a plain expression.

    A fragment that follows a pipe is always in command position, so a word
    such as `foreach` there names a command rather than a loop.
    """

    words = statement_words(fragment)
    if not words:
        return ExpressionNode(text=fragment)

    command_name = words[0]
    if command_name[0] in EXPRESSION_LEADERS:
        return ExpressionNode(text=fragment)
    if not piped and command_name.casefold() in KEYWORDS:
        return ExpressionNode(text=fragment)

    parameters: list[str] = []
    for word in words[1:]:
        match = PARAMETER_RE.match(word)
        if match is not None:
            parameters.append(match.group(1))
    return InvocationNode(command_name=command_name, parameters=parameters, text=fragment)


def statement_words(text: str) -> list[str]:
    """Split a statement into words at top-level whitespace.

    Strings and bracket groups stay inside the word they start in. Comments
    separate words like whitespace; a line comment runs to the end of the
    statement.
    """

    scan = scan_source(text)
    comments = dict(scan.comments)
    spans = {start: end for start, end in [*scan.literals, *scan.groups]}

    words: list[str] = []
    current: list[str] = []
    index = 0
    while index < len(text):
        if index in comments:
            _flush(words, current)
            index = comments[index]
            continue
        if index in spans:
            end = spans[index]
            current.append(text[index:end])
            index = end
            continue
        char = text[index]
        if char == ESCAPE:
            escaped = text[index + 1 : index + 2]
            if escaped in ("\r", "\n"):
                _flush(words, current)
            else:
                current.append(text[index : index + 2])
            index += 2
            continue
        if char.isspace():
            _flush(words, current)
        else:
            current.append(char)
        index += 1
    _flush(words, current)
    return words


def _flush(words: list[str], current: list[str]) -> None:
    if current:
        words.append("".join(current))
        current.clear()
