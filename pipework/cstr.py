"""Operations on NUL-terminated text held in Python strings.

A string is read up to its first NUL character, if it has one, in the same
way that a terminated character array is read. Results that would be
pointers into a string are indices, and ``None`` means "not found".
"""

from __future__ import annotations

from typing import Optional, Tuple

from pipework.chars import is_digit

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _text(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    head, _, _ = s.partition("\0")
    return head


def _single(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return c


def length(s: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_text(s))


def find_char(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``length(s)``.
    """
    text = _text(s)
    if _single(c) == "\0":
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``length(s)``.
    """
    text = _text(s)
    if _single(c) == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Return the difference of the first pair of codes that differ, or of the
    pair where either string ends, and 0 when the first ``n`` match.
    """
    if n < 0:
        raise ValueError("count must not be negative")
    a_text, b_text = _text(first), _text(second)
    for i in range(n):
        a = ord(a_text[i]) if i < len(a_text) else 0
        b = ord(b_text[i]) if i < len(b_text) else 0
        if a != b or a == 0:
            return a - b
    return 0


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Return where ``needle`` first occurs wholly within the first ``limit``
    characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    hay, pattern = _text(haystack), _text(needle)
    if not pattern:
        return 0
    for i in range(min(limit, len(hay))):
        if hay.startswith(pattern, i) and i + len(pattern) <= limit:
            return i
    return None


def duplicate(s: str) -> str:
    """Return a copy of the text of ``s``."""
    return "".join(_text(s))


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Return the text that fits and the full length of ``src``; a result length
    not below ``size`` means the copy was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    text = _text(src)
    if size == 0:
        return "", len(text)
    return text[: size - 1], len(text)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Return the new text and the length it tried to build. When ``dst`` is
    already ``size`` or longer it is left alone and ``size + length(src)``
    is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    head, tail = _text(dst), _text(src)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def parse_int(text: str) -> int:
    """Read a decimal integer the way ``atoi`` does.

    Leading spaces and control whitespace are skipped, one optional sign is
    read, then digits up to the first non-digit. No digits gives 0.
    """
    s = _text(text)
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(s) and is_digit(s[pos]):
        result = result * 10 + (ord(s[pos]) - ord("0"))
        pos += 1
    return result * sign


def format_int(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    if n == _INT_MIN:
        return "-2147483648"
    digits = []
    value = abs(n)
    while True:
        value, rest = divmod(value, 10)
        digits.append(chr(ord("0") + rest))
        if value == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))