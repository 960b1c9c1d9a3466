"""Replacement of backslash escape sequences in string literals."""

from __future__ import annotations

import re

_ESCAPE = re.compile(r"\\([nrtabvfe])")
_REPLACEMENTS = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "a": "\a",
    "b": "\b",
    "v": "\v",
    "f": "\f",
    "e": "\u001b",
}


def replace_escape_sequences(text: str) -> str:
    """Replace \\n, \\r, \\t, \\a, \\b, \\v, \\f and \\e with their characters."""
    return _ESCAPE.sub(lambda match: _REPLACEMENTS[match.group(1)], text)