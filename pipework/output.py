"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from pipework.cstr import duplicate, format_int


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write the text of ``s`` up to its first NUL."""
    _target(stream).write(duplicate(s))


def put_line(s: str, stream: Optional[TextIO] = None) -> None:
    """Write the text of ``s`` followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    put_char("\n", out)


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(stream).write(format_int(n))