"""String searching, comparison, slicing and bounded copy helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Optional, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings.

    Returns the difference of the first differing character codes, a missing
    character counting as code 0, or 0 when the compared parts are equal.
    """
    _non_negative("n", n)
    left = s1.split(_NUL, 1)[0][:n]
    right = s2.split(_NUL, 1)[0][:n]
    for a, b in zip_longest(left, right, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of little within the first length characters of big.

    The whole of little must lie inside that window. An empty little is
    found at index 0; otherwise None is returned when there is no match.
    """
    _non_negative("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return index if index >= 0 else None


def substr(text: str, start: int, length: int) -> str:
    """Return up to length characters of text beginning at start.

    A start at or past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: Optional[str]) -> str:
    """Remove every leading and trailing character that appears in charset.

    A charset of None leaves the text unchanged.
    """
    if charset is None:
        return text
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: CharLike) -> list[str]:
    """Split text on a single separator character, dropping empty pieces."""
    ch = _char(sep)
    return [piece for piece in text.split(ch) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> None:
    """Call func(index, text) for each position of a mutable character sequence.

    The callback may replace text[index] in place.
    """
    for index in range(len(text)):
        func(index, text)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text, truncated to at most size - 1 characters, and
    the full length of src. A size of 0 copies nothing.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters including the terminator.

    Returns the resulting text and the length the full concatenation would
    have had. When size is 0 the length of src is returned; when dest already
    fills the buffer, the length of src plus size is returned. In both cases
    dest is left unchanged.
    """
    _non_negative("size", size)
    if size == 0:
        return dest, len(src)
    if len(dest) >= size:
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)