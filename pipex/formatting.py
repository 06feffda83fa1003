"""A minimal printf-style formatter supporting %c %s %d %i %u %p %x %X %%."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, TextIO

_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for an invalid format string or unsuitable argument."""


def _as_int(value: Any, conversion: str) -> int:
    try:
        return operator.index(value)
    except TypeError as exc:
        raise FormatError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        ) from exc


def _signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c expects a single character")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise FormatError(f"%s expects a string, got {type(value).__name__}")
    return value


def _signed(conversion: str) -> Callable[[Any], str]:
    def convert(value: Any) -> str:
        return str(_signed32(_as_int(value, conversion)))

    return convert


def _unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UINT_MASK)


def _pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p") & _PTR_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _hex_lower(value: Any) -> str:
    return f"{_as_int(value, 'x') & _UINT_MASK:x}"


def _hex_upper(value: Any) -> str:
    return f"{_as_int(value, 'X') & _UINT_MASK:X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed("d"),
    "i": _signed("i"),
    "u": _unsigned,
    "p": _pointer,
    "x": _hex_lower,
    "X": _hex_upper,
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise FormatError("format string ends with a lone '%'")
        if conversion == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(conversion)
        if converter is None:
            raise FormatError(f"unknown conversion '%{conversion}'")
        try:
            value = next(remaining)
        except StopIteration:
            raise FormatError(f"missing argument for '%{conversion}'") from None
        pieces.append(converter(value))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)