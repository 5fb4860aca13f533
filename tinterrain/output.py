"""Printing of program output to standard output."""

from __future__ import annotations

import sys

__all__ = ["println", "print_text", "print_raw"]


def _render(fmt, args) -> str:
    if fmt is None:
        return ""
    if args:
        return str(fmt).format(*args)
    return str(fmt)


def println(fmt=None, *args) -> None:
    """Write a line to stdout; with ``args`` the text is a format string."""
    sys.stdout.write(_render(fmt, args) + "\n")


def print_text(fmt=None, *args) -> None:
    """Like :func:`println` but without the trailing newline."""
    text = _render(fmt, args)
    if text:
        sys.stdout.write(text)


def print_raw(data) -> None:
    """Write raw bytes (or text) to stdout unchanged."""
    if not data:
        return
    if isinstance(data, str):
        sys.stdout.write(data)
        return
    sys.stdout.flush()
    sys.stdout.buffer.write(bytes(data))
    sys.stdout.buffer.flush()