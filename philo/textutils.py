"""Character classification and string helpers with C-library semantics."""

from __future__ import annotations

from itertools import islice, zip_longest

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _code(c: str | int) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _wrap_int(value: int) -> int:
    """Wrap an integer into the range of a signed 32-bit int."""
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace; 0 if none.

    Overflow wraps around like a signed 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the match, or None when there is none.  An empty
    needle matches at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the first code difference."""
    pairs = zip_longest(s1, s2, fillvalue="\0")
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def isalpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: str | int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: str | int, low: str, high: str, delta: int) -> str | int:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def toupper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; other values are returned unchanged."""
    return _convert(c, "a", "z", ord("A") - ord("a"))


def tolower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; other values are returned unchanged."""
    return _convert(c, "A", "Z", ord("a") - ord("A"))