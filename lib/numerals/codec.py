"""Conversion between arabic integers and canonical Roman numerals.

Only the classical range ``1..3999`` is supported.  :func:`encode` always
produces the canonical (minimal) spelling and :func:`decode` accepts nothing
else, so ``encode(decode(s)) == s`` holds for every string ``decode``
accepts.  Both functions are pure; they neither log nor keep state.
"""

from __future__ import annotations

import re
from typing import Dict, Tuple

MIN_VALUE = 1
MAX_VALUE = 3999

# Greedy basis, strictly descending.  The subtractive pairs must sit between
# their neighbours for ``encode`` to produce canonical output.
DIGIT_VALUES: Tuple[Tuple[int, str], ...] = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)

SYMBOL_VALUES: Dict[str, int] = {
    "I": 1, "V": 5, "X": 10, "L": 50,
    "C": 100, "D": 500, "M": 1000,
}

CANONICAL_RE = re.compile(r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})")

RANGE_MESSAGE = f"value must be an integer between {MIN_VALUE} and {MAX_VALUE}"
EMPTY_MESSAGE = "input must be a non-empty string"
FORMAT_MESSAGE = "invalid or out-of-range Roman numeral format"


class NumeralError(ValueError):
    """Base class for codec failures; ``code`` identifies the kind."""

    code = "numeral"


class RangeError(NumeralError):
    """Raised by :func:`encode` for values outside ``1..3999``."""

    code = "range"


class FormatError(NumeralError):
    """Raised by :func:`decode` for anything but a canonical numeral."""

    code = "format"


def encode(value: int) -> str:
    """Return the canonical Roman numeral for ``value``.

    ``bool`` and ``float`` are rejected even when they compare equal to an
    integer in range.
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeError(RANGE_MESSAGE)
    if not MIN_VALUE <= value <= MAX_VALUE:
        raise RangeError(RANGE_MESSAGE)

    parts = []
    remainder = value
    for digit, symbol in DIGIT_VALUES:
        while remainder >= digit:
            parts.append(symbol)
            remainder -= digit
    return "".join(parts)


def decode(text: str) -> int:
    """Return the integer value of the canonical Roman numeral ``text``.

    Validation is case-sensitive: ``"mcmxciv"`` is rejected.  Callers that
    want case-insensitive input must upper-case it themselves.
    """

    if not isinstance(text, str) or not text:
        raise FormatError(EMPTY_MESSAGE)
    if any(ch not in SYMBOL_VALUES for ch in text):
        raise FormatError(FORMAT_MESSAGE)
    if CANONICAL_RE.fullmatch(text) is None:
        raise FormatError(FORMAT_MESSAGE)

    total = 0
    i = 0
    n = len(text)
    while i < n:
        current = SYMBOL_VALUES[text[i]]
        nxt = SYMBOL_VALUES[text[i + 1]] if i + 1 < n else 0
        if nxt > current:
            total += nxt - current
            i += 2
        else:
            total += current
            i += 1

    try:
        canonical = encode(total)
    except RangeError:
        raise FormatError(FORMAT_MESSAGE) from None
    if canonical != text:
        raise FormatError(FORMAT_MESSAGE)
    return total


__all__ = [
    "DIGIT_VALUES",
    "SYMBOL_VALUES",
    "MIN_VALUE",
    "MAX_VALUE",
    "NumeralError",
    "RangeError",
    "FormatError",
    "encode",
    "decode",
]
