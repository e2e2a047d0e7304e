"""Byte-buffer primitives: filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: object) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):  # type: ignore[arg-type]
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")  # type: ignore[arg-type]


def fill(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to the low byte of ``value``."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def zero(buf: bytearray, n: int) -> None:
    """Clear the first ``n`` bytes of ``buf``."""
    fill(buf, 0, n)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError when the product would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count > 0 and SIZE_MAX // count < size:
        raise OverflowError("requested size overflows")
    return bytearray(count * size)


def find_byte(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(data).find(bytes([value & 0xFF]), 0, n)
    return None if index < 0 else index


def compare(first: bytes, second: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def copy_into(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def move(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to ``dest``; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError("range exceeds buffer length")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf