"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO, Union


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: TextIO | None = None) -> None:
    """Write one character, given as a one-character string or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        char = c
    else:
        char = chr(c)
    _target(stream).write(char)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write a string as it is."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    out.write(text)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal, with a leading '-' if negative."""
    _target(stream).write(f"{int(n):d}")