"""Turning command-line arguments into a list of distinct 32-bit integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the numbers given to a program are not acceptable."""


def parse_int(text: str) -> int:
    """Read a whole string as a 32-bit integer.

    Leading whitespace and one sign are allowed. Anything left over after the
    digits, or a value outside the 32-bit range, yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits_end = len(rest)
    for position, char in enumerate(rest):
        if not "0" <= char <= "9":
            digits_end = position
            break
    digits, tail = rest[:digits_end], rest[digits_end:]
    value = sign * int(digits) if digits else 0
    if tail or not INT_MIN <= value <= INT_MAX:
        return 0
    return value


def is_zero(text: str) -> bool:
    """Tell whether the text spells zero: "0" with at most one sign before it."""
    body = text[1:] if text[:1] in ("-", "+") else text
    return body == "0"


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Join the arguments with spaces, split on spaces and read every number.

    Raises ArgumentError when no number is given or a word is not a valid
    32-bit integer.
    """
    words = [word for word in " ".join(args).split(" ") if word]
    if not words:
        raise ArgumentError("no numbers given")
    values = []
    for word in words:
        value = parse_int(word)
        if value == 0 and not is_zero(word):
            raise ArgumentError(f"not a valid integer: {word!r}")
        values.append(value)
    return values


def check_duplicates(values: Sequence[int]) -> Sequence[int]:
    """Return the values unchanged, or raise ArgumentError if one repeats."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise ArgumentError(f"duplicate value: {value}")
        seen.add(value)
    return values