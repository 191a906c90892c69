"""Minimal printf supporting %d, %i, %s, %c and %%."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, TextIO


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def format_number(nb: int) -> str:
    """Render *nb* as a signed 32-bit decimal integer."""
    return str(_to_int32(operator.index(nb)))


def put_nbr(nb: int, file: TextIO | None = None) -> int:
    """Write *nb* in decimal and return the number of characters written."""
    text = format_number(nb)
    (file if file is not None else sys.stdout).write(text)
    return len(text)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(operator.index(value) % 256)


_SPECIFIERS: dict[str, Callable[[Iterator[Any]], str]] = {
    "d": lambda args: format_number(next(args)),
    "i": lambda args: format_number(next(args)),
    "s": lambda args: str(next(args)),
    "c": lambda args: _format_char(next(args)),
    "%": lambda args: "%",
}


def render(fmt: str, *args: Any) -> str:
    """Expand *fmt* with *args*; unknown specifiers produce nothing."""
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append(char)
            break
        handler = _SPECIFIERS.get(spec)
        if handler is None:
            continue
        try:
            pieces.append(handler(values))
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the expanded *fmt* and return the number of characters written."""
    text = render(fmt, *args)
    (file if file is not None else sys.stdout).write(text)
    return len(text)