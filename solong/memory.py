"""Filling, copying, searching and comparing byte buffers."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_count(n: int, *buffers: BytesLike) -> int:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"count {n} exceeds buffer length {len(buffer)}")
    return n


def _check_span(name: str, offset: int, n: int, length: int) -> None:
    if offset < 0:
        raise ValueError(f"{name} must not be negative, got {offset}")
    if offset + n > length:
        raise ValueError(
            f"{name} span {offset}..{offset + n} exceeds buffer length {length}"
        )


def memset(buffer: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Set the first n bytes of buffer to value, reduced to one byte.

    Returns the buffer itself.
    """
    _check_count(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: WritableBuffer, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def memcpy(dest: WritableBuffer, src: BytesLike, n: int) -> WritableBuffer:
    """Copy the first n bytes of src over the first n bytes of dest.

    Returns dest.
    """
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: WritableBuffer, dest: int, src: int, n: int) -> WritableBuffer:
    """Copy n bytes within one buffer from offset src to offset dest.

    The regions may overlap; the result is as if the source bytes were first
    copied aside. Returns the buffer.
    """
    _check_count(n)
    _check_span("dest", dest, n, len(buffer))
    _check_span("src", src, n, len(buffer))
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c among the first n, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return index if index >= 0 else None


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first n bytes of two buffers.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_count(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of nmemb elements of size bytes each.

    Raises ValueError for negative arguments and OverflowError when the
    total does not fit in a 64-bit size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError(f"negative allocation request: {nmemb} x {size}")
    total = nmemb * size
    if total > SIZE_MAX:
        raise OverflowError(f"allocation of {nmemb} x {size} bytes overflows")
    return bytearray(total)