"""Join rewritten fragments back into one source text."""

from __future__ import annotations

import re

from pwshort.core.scanner import scan_source

NEWLINE_RE = re.compile(r"\r\n|\r|\n")
SPACE_RUN_RE = re.compile(r" {2,}")


def reassemble(
    fragments: list[str],
    delimiters: list[str],
    *,
    leading: str = "",
    line_ending: str = "\r\n",
    collapse_whitespace: bool = True,
) -> str:
    """Interleave fragments with their delimiters and normalise the result.

    A delimiter list shorter than the fragment list is fine; fragments past
    its end are joined without a separator. `split_statements` never produces
    such a list, so this only happens with delimiters from another source,
    and the joined fragments may then run together into one token.
    """

    parts = [leading]
    for index, fragment in enumerate(fragments):
        parts.append(fragment)
        if index < len(delimiters):
            parts.append(delimiters[index])
    return normalize(
        "".join(parts),
        line_ending=line_ending,
        collapse_whitespace=collapse_whitespace,
    )


def normalize(text: str, *, line_ending: str = "\r\n", collapse_whitespace: bool = True) -> str:
    """Rewrite line endings and space runs, leaving strings and comments untouched."""

    protected = scan_source(text).protected()
    pieces: list[str] = []
    cursor = 0
    for start, end in protected:
        if start < cursor:
            continue
        pieces.append(_normalize_code(text[cursor:start], line_ending, collapse_whitespace))
        pieces.append(text[start:end])
        cursor = end
    pieces.append(_normalize_code(text[cursor:], line_ending, collapse_whitespace))
    return "".join(pieces)


def _normalize_code(chunk: str, line_ending: str, collapse_whitespace: bool) -> str:
    chunk = NEWLINE_RE.sub(line_ending, chunk)
    if collapse_whitespace:
        chunk = SPACE_RUN_RE.sub(" ", chunk)
    return chunk
