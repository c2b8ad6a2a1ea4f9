"""Formatted output supporting the conversions %c %s %p %d %i %u %x %X %%."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(n: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    n &= _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def format_hex(n: int, upper: bool = False) -> str:
    """Return ``n`` as an unsigned hexadecimal number without prefix.

    Negative values are taken as 64-bit unsigned quantities.
    """
    n &= _ULONG_MASK
    digits = _HEX_UPPER if upper else _HEX_LOWER
    out = []
    while True:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
        if not n:
            break
    return "".join(reversed(out))


def format_pointer(address: int | None) -> str:
    """Return an address as ``0x`` followed by lower-case hex digits."""
    if not address:
        return "0x0"
    return "0x" + format_hex(address)


def format_decimal(n: int) -> str:
    """Return ``n`` as a signed 32-bit decimal number."""
    return str(_to_int32(n))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def _convert(spec: str, args: list[Any]) -> str:
    """Render one conversion, consuming arguments from the front of ``args``."""
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    if not args:
        raise TypeError(f"not enough arguments for %{spec}")
    value = args.pop(0)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return format_decimal(value)
    if spec == "u":
        return str(value & _UINT_MASK)
    return format_hex(value & _UINT_MASK, upper=(spec == "X"))


def cformat(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args``.

    Unknown conversions produce no output and a lone trailing ``%`` is
    dropped.
    """
    pending = list(args)
    out: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, pending))
    return "".join(out)


def cprintf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the rendered format to ``file`` and return the characters written."""
    text = cformat(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write ``n`` as a signed 32-bit decimal number."""
    (sys.stdout if stream is None else stream).write(format_decimal(n))


def put_string(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s``; nothing is written for None."""
    if s is not None:
        (sys.stdout if stream is None else stream).write(s)


def put_line(s: str | None, stream: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; nothing is written for None."""
    if s is not None:
        (sys.stdout if stream is None else stream).write(s + "\n")