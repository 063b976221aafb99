"""A small formatter for the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: int) -> int:
    return ((int(value) + 2**31) % 2**32) - 2**31


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    return "0x" + format(int(value) & _ULONG_MASK, "x")


def _signed(value: Any) -> str:
    return str(_as_int32(value))


def _unsigned(value: Any) -> str:
    return str(int(value) & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(int(value) & _UINT_MASK, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions are dropped silently, as is a lone trailing ``%``.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    values = iter(args)
    chars = iter(fmt)
    parts: list[str] = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            parts.append("%")
        elif spec in _CONVERSIONS:
            parts.append(_CONVERSIONS[spec](_next_arg(values)))
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)