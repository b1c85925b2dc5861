"""Statement splitting on top-level delimiters."""

from __future__ import annotations

from pwshort.core.scanner import scan_source
from pwshort.core.types import SplitResult


def split_statements(source: str) -> SplitResult:
    """Split source into statement fragments and the delimiters between them.

    Whitespace-only fragments are dropped but their delimiters are kept: a run
    of delimiters with only blank text between them is stored as one entry, so
    ``delimiters[i]`` is everything that followed ``fragments[i]``. Delimiters
    before the first fragment are kept in ``leading``.
    """

    scan = scan_source(source)
    fragments: list[str] = []
    delimiters: list[str] = []
    pending = ""
    leading = ""
    cursor = 0

    for start, end in scan.delimiters:
        fragment = source[cursor:start].strip()
        if fragment:
            if fragments:
                delimiters.append(pending)
            else:
                leading = pending
            fragments.append(fragment)
            pending = ""
        pending += source[start:end]
        cursor = end

    fragment = source[cursor:].strip()
    if fragment:
        if fragments:
            delimiters.append(pending)
        else:
            leading = pending
        fragments.append(fragment)
    elif pending:
        if fragments:
            delimiters.append(pending)
        else:
            leading = pending

    return SplitResult(fragments=fragments, delimiters=delimiters, leading=leading)
