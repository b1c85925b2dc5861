"""Token substitution inside one statement fragment."""

from __future__ import annotations

import re

from pwshort.core.scanner import overlaps, scan_source
from pwshort.core.types import ResolvedCommand, ResolvedParameterMap

# a token may not touch a word character or a dash on either side
_BEFORE = r"(?<![\w$.-])"
_AFTER = r"(?![\w-])"


def rewrite_invocation(fragment: str, command: ResolvedCommand, parameters: ResolvedParameterMap) -> str:
    """Apply the command short form, then each parameter alias in map order."""

    text = fragment
    if command.short_form is not None:
        text = replace_token(text, command.name, command.short_form)

    for parameter in parameters.values():
        if parameter.alias is None:
            continue
        text = replace_token(text, f"-{parameter.token}", f"-{parameter.alias}")
    return text


def replace_token(text: str, token: str, replacement: str) -> str:
    """Replace the first whole-token occurrence outside strings, comments and brackets."""

    protected = scan_source(text).protected(groups=True)
    pattern = re.compile(_BEFORE + re.escape(token) + _AFTER)
    for match in pattern.finditer(text):
        if overlaps(protected, match.start(), match.end()):
            continue
        return text[: match.start()] + replacement + text[match.end() :]
    return text
