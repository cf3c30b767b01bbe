"""A small printf supporting the conversions the shell's messages use."""

from __future__ import annotations

import sys
from typing import Any, Callable, TextIO

from minishell.libft import itoa

_UINT32_MASK = 0xFFFF_FFFF
_UINT64_MASK = 0xFFFF_FFFF_FFFF_FFFF


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: int) -> str:
    address = value & _UINT64_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _signed(value: int) -> str:
    return itoa(value)


def _unsigned(value: int) -> str:
    return str(value & _UINT32_MASK)


def _hex_lower(value: int) -> str:
    return format(value & _UINT32_MASK, "x")


def _hex_upper(value: int) -> str:
    return format(value & _UINT32_MASK, "X")


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


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with the conversions ``%c %s %p %d %i %u %x %X %%``.

    An unknown conversion character is dropped together with its ``%`` and
    consumes no argument; a lone trailing ``%`` is ignored.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            argument = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion %{spec}") from None
        pieces.append(convert(argument))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)