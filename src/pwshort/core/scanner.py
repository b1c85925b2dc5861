"""Quote- and bracket-aware source scanning."""

from __future__ import annotations

from dataclasses import dataclass, field

Span = tuple[int, int]

ESCAPE = "`"
OPENERS = {"{": "}", "(": ")", "[": "]"}
CLOSERS = {closer: opener for opener, closer in OPENERS.items()}
STATEMENT_DELIMITERS = frozenset({"\n", "\r", "|", ";"})
HERE_STRING_OPENERS = ("@'", '@"')
COMMENT_LEADERS = frozenset(" \t\r\n;|{(")


@dataclass(frozen=True)
class ScanResult:
    """Positions of top-level delimiters and spans that must not be split or edited."""

    delimiters: list[Span] = field(default_factory=list)
    literals: list[Span] = field(default_factory=list)
    comments: list[Span] = field(default_factory=list)
    groups: list[Span] = field(default_factory=list)  # outermost bracket groups
    error: str | None = None
    error_offset: int = -1

    def protected(self, *, groups: bool = False) -> list[Span]:
        spans = [*self.literals, *self.comments]
        if groups:
            spans.extend(self.groups)
        return sorted(spans)


def overlaps(spans: list[Span], start: int, end: int) -> bool:
    return any(span_start < end and start < span_end for span_start, span_end in spans)


def scan_source(source: str) -> ScanResult:
    """Walk source once, tracking strings, comments and bracket depth.

    Only delimiters at bracket depth zero and outside strings and comments are
    reported. Unbalanced input does not raise; the first problem is recorded in
    ``error`` and ``error_offset`` and scanning goes on as far as it can.
    """

    delimiters: list[Span] = []
    literals: list[Span] = []
    comments: list[Span] = []
    groups: list[Span] = []
    stack: list[tuple[str, int]] = []
    error: str | None = None
    error_offset = -1

    length = len(source)
    index = 0
    while index < length:
        char = source[index]

        if char == ESCAPE:
            index += 2
            continue

        if source.startswith(HERE_STRING_OPENERS, index) and source[index + 2 : index + 3] in ("\r", "\n"):
            terminator = "\n" + source[index + 1] + "@"
            end = source.find(terminator, index + 2)
            if end < 0:
                literals.append((index, length))
                if error is None:
                    error, error_offset = "unterminated here-string", index
                break
            stop = end + len(terminator)
            literals.append((index, stop))
            index = stop
            continue

        if char in ("'", '"'):
            end = _string_end(source, index)
            if end < 0:
                literals.append((index, length))
                if error is None:
                    error, error_offset = "unterminated string", index
                break
            literals.append((index, end))
            index = end
            continue

        if source.startswith("<#", index):
            end = source.find("#>", index + 2)
            stop = length if end < 0 else end + 2
            comments.append((index, stop))
            if end < 0 and error is None:
                error, error_offset = "unterminated block comment", index
            index = stop
            continue

        if char == "#" and (index == 0 or source[index - 1] in COMMENT_LEADERS):
            stop = _line_end(source, index)
            comments.append((index, stop))
            index = stop
            continue

        if char in OPENERS:
            stack.append((char, index))
            index += 1
            continue

        if char in CLOSERS:
            if stack and stack[-1][0] == CLOSERS[char]:
                _, opened_at = stack.pop()
                if not stack:
                    groups.append((opened_at, index + 1))
            elif error is None:
                error, error_offset = f"unexpected '{char}'", index
            index += 1
            continue

        if not stack and char in STATEMENT_DELIMITERS:
            width = 2 if source.startswith("\r\n", index) else 1
            delimiters.append((index, index + width))
            index += width
            continue

        index += 1

    if stack:
        groups.append((stack[0][1], length))
        if error is None:
            opener, opened_at = stack[-1]
            error, error_offset = f"missing closing '{OPENERS[opener]}'", opened_at

    return ScanResult(
        delimiters=delimiters,
        literals=literals,
        comments=comments,
        groups=groups,
        error=error,
        error_offset=error_offset,
    )


def _string_end(source: str, start: int) -> int:
    quote = source[start]
    index = start + 1
    while index < len(source):
        char = source[index]
        if char == ESCAPE and quote == '"':
            index += 2
            continue
        if char == quote:
            # doubled quote is an escaped quote
            if source.startswith(quote * 2, index):
                index += 2
                continue
            return index + 1
        index += 1
    return -1


def _line_end(source: str, start: int) -> int:
    for index in range(start, len(source)):
        if source[index] in "\r\n":
            return index
    return len(source)
