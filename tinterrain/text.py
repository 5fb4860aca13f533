"""Small text helpers."""

from __future__ import annotations

import re

__all__ = ["tokenize", "DEFAULT_DELIMITERS"]

DEFAULT_DELIMITERS = " \n\r\t\0"


def tokenize(s: str, delimiters: str | None = None) -> list[str]:
    """Split ``s`` at any of the delimiter characters, dropping empty tokens.

    Without ``delimiters`` the string is split at spaces, newlines, carriage
    returns, tabs and NUL characters.
    """
    if delimiters is None:
        delimiters = DEFAULT_DELIMITERS
    if not delimiters:
        return [s] if s else []
    pattern = "[" + "".join(re.escape(c) for c in delimiters) + "]+"
    return [token for token in re.split(pattern, s) if token]