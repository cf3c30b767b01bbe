"""String helpers shared by the shell: integer conversion, splitting and searching."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the shell's numeric arguments are read.

    Leading whitespace and one sign are accepted and parsing stops at the first
    non-digit. The digits are accumulated in a 64-bit register; when that register
    is seen to wrap, ``-1`` is returned for positive input and ``0`` for negative
    input. The result is finally truncated to a 32-bit signed integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("+", "-"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]

    result = 0
    for char in stripped:
        if not "0" <= char <= "9":
            break
        previous = result
        result = _wrap(result * 10 + (ord(char) - ord("0")) * sign, 64)
        if sign == -1 and result > previous:
            return 0
        if sign == 1 and result < previous:
            return -1
    return _wrap(result, 32)


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    return str(_wrap(n, 32))


def split(text: str | None, sep: str) -> list[str] | None:
    """Split ``text`` into the non-empty words separated by runs of ``sep``.

    A string made only of separators yields an empty list. A string of exactly
    one non-separator character also yields an empty list.
    """
    if text is None:
        return None
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    words = [word for word in text.split(sep) if word]
    if len(text) == 1 and words:
        return []
    return words


def strtrim(text: str | None, charset: str | None) -> str | None:
    """Remove every leading and trailing character of ``text`` found in ``charset``."""
    if text is None:
        return None
    if charset is None:
        return text
    return text.strip(charset)


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def strncmp(s1: str | bytes | None, s2: str | bytes | None, n: int) -> int:
    """Compare at most ``n`` bytes; return the difference of the first unequal pair.

    A missing operand compares as ``1``.
    """
    if s1 is None or s2 is None:
        return 1
    _require_non_negative(n=n)
    left = _as_bytes(s1)
    right = _as_bytes(s2)
    for index in range(n):
        a = left[index] if index < len(left) else 0
        b = right[index] if index < len(right) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def substr(text: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if text is None:
        return None
    _require_non_negative(start=start, length=length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str | None, needle: str | None, length: int) -> str | None:
    """Find ``needle`` lying wholly within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match onwards, ``haystack`` itself
    for an empty needle, or ``None`` when there is no match.
    """
    if haystack is None and needle is None:
        return None
    if not needle:
        return haystack
    if haystack is None:
        return None
    _require_non_negative(length=length)
    index = haystack.find(needle, 0, length)
    if index < 0:
        return None
    return haystack[index:]