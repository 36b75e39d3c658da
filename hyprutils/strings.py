"""Small string helpers: trimming, number checks and substring replacement."""

from __future__ import annotations

WHITESPACE = " \t\n\v\f\r"
"""Characters treated as whitespace (the classic C locale set)."""


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def trim(text: str) -> str:
    """Return ``text`` without leading and trailing whitespace."""
    return text.strip(WHITESPACE)


def is_number(text: str, allow_float: bool = False) -> bool:
    """Tell whether ``text`` is an integer, or a decimal if ``allow_float`` is set.

    A single leading ``-`` is accepted. A decimal point may not come first,
    may appear only once, and the text must end with a digit.
    """
    if not text:
        return False

    decimal_parsed = False
    for position, char in enumerate(text):
        if position == 0 and char == "-":
            continue
        if _is_digit(char):
            continue
        if not allow_float or char != "." or position == 0 or decimal_parsed:
            return False
        decimal_parsed = True

    return _is_digit(text[-1])


def replace_in_string(text: str, what: str, to: str) -> str:
    """Return ``text`` with every occurrence of ``what`` replaced by ``to``.

    Replacement runs left to right and never rescans inserted text.
    """
    if not text:
        return text
    if not what:
        raise ValueError("the substring to replace must not be empty")
    return text.replace(what, to)