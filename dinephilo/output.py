"""Writing characters, strings and integers to text streams."""

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to stream (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string to stream (standard output by default)."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    put_char("\n", out)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal, with a leading minus sign when negative."""
    put_str(str(int(n)), stream)