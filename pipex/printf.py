"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Callable, Iterator, TextIO

from pipex.strings import itoa

CONVERSIONS = "cspdiuxX%"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
# Without a single recognised conversion the whole format collapses to this.
NO_CONVERSION_OUTPUT = "N"

_CONVERSION_PATTERN = re.compile("%[" + re.escape(CONVERSIONS) + "]")
_INT_BITS = 32
_POINTER_BITS = 64


def _to_signed32(value: Any) -> int:
    number = operator.index(value)
    half = 1 << (_INT_BITS - 1)
    return (number + half) % (1 << _INT_BITS) - half


def _to_unsigned32(value: Any) -> int:
    return operator.index(value) & ((1 << _INT_BITS) - 1)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_text(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError("%s requires a string or None")
    return value


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value)
    address &= (1 << _POINTER_BITS) - 1
    if address == 0:
        return NULL_POINTER
    return f"0x{address:x}"


def _format_signed(value: Any) -> str:
    return itoa(_to_signed32(value))


def _format_unsigned(value: Any) -> str:
    return itoa(_to_unsigned32(value))


def _format_hex_lower(value: Any) -> str:
    return f"{_to_unsigned32(value):x}"


def _format_hex_upper(value: Any) -> str:
    return f"{_to_unsigned32(value):X}"


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_text,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _next_argument(arguments: Iterator[Any], spec: str) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    Unknown conversions are dropped together with their ``%`` and consume
    no argument; surplus arguments are ignored. A format holding no
    recognised conversion at all renders as ``"N"``.
    """
    if not _CONVERSION_PATTERN.search(fmt):
        return NO_CONVERSION_OUTPUT
    arguments = iter(args)
    characters = iter(fmt)
    pieces: list[str] = []
    for char in characters:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(characters, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        handler = _HANDLERS.get(spec)
        if handler is not None:
            pieces.append(handler(_next_argument(arguments, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered ``fmt`` to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)