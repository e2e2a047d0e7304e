"""Building, cutting and splitting text.

Input strings are read up to their first NUL character, if they have one.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

from pipework.cstr import duplicate


def substring(s: str, start: int, size: int) -> str:
    """Return at most ``size`` characters of ``s`` beginning at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or size < 0:
        raise ValueError("start and size must not be negative")
    text = duplicate(s)
    if start >= len(text):
        return ""
    return text[start:start + size]


def join(first: str, second: str) -> str:
    """Return the text of ``first`` followed by the text of ``second``."""
    return duplicate(first) + duplicate(second)


def trim(s: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``s``."""
    return duplicate(s).strip(duplicate(chars))


def split_words(text: str, sep: str) -> List[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in duplicate(text).split(sep) if word]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    if func is None:
        raise TypeError("a mapping function is required")
    return "".join(func(index, char) for index, char in enumerate(duplicate(s)))


def each_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` for each character, in place.

    Iteration stops at a NUL element. A non-None result replaces the
    character at that index.
    """
    if chars is None or func is None:
        return
    for index, char in enumerate(chars):
        if char == "\0":
            break
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement