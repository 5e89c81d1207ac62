"""
Fraction text grammar.

Accepted input is either a single vulgar-fraction glyph (or ASCII digit), or
``{integer}[ws]/[ws]{integer}`` with arbitrary surrounding whitespace. A bare
``{integer}`` is read as ``integer/1``.

Integer tokens follow a ``NumberStyles`` / ``NumberFormat`` pair, the
equivalent of a number-style plus culture-specific format provider.
"""

import re
from dataclasses import dataclass
from enum import IntFlag

from ..core.errors import ParseError


class NumberStyles(IntFlag):
    """Which optional elements an integer token may carry."""

    NONE = 0
    ALLOW_LEADING_WHITE = 1
    ALLOW_TRAILING_WHITE = 2
    ALLOW_LEADING_SIGN = 4
    ALLOW_THOUSANDS = 64

    INTEGER = ALLOW_LEADING_WHITE | ALLOW_TRAILING_WHITE | ALLOW_LEADING_SIGN
    NUMBER = INTEGER | ALLOW_THOUSANDS


@dataclass(frozen=True)
class NumberFormat:
    """
    Culture-specific symbols used when reading integers.

    Attributes:
        positive_sign: Symbol accepted for an explicit positive sign
        negative_sign: Symbol accepted for a negative sign
        group_separator: Digit grouping symbol (only with ALLOW_THOUSANDS)
    """

    positive_sign: str = "+"
    negative_sign: str = "-"
    group_separator: str = ","

    @classmethod
    def invariant(cls) -> "NumberFormat":
        return cls()


# Single characters that parse directly to (numerator, denominator)
VULGAR_FRACTIONS = {
    **{str(digit): (digit, 1) for digit in range(10)},
    "¼": (1, 4),
    "½": (1, 2),
    "¾": (3, 4),
    "⅐": (1, 7),
    "⅑": (1, 9),
    "⅒": (1, 10),
    "⅓": (1, 3),
    "⅔": (2, 3),
    "⅕": (1, 5),
    "⅖": (2, 5),
    "⅗": (3, 5),
    "⅘": (4, 5),
    "⅙": (1, 6),
    "⅚": (5, 6),
    "⅛": (1, 8),
    "⅜": (3, 8),
    "⅝": (5, 8),
    "⅞": (7, 8),
    "↉": (0, 3),
}

FRACTION_SEPARATOR = "/"

_DIGITS = re.compile(r"[0-9]+")


def _strip_span(text: str, start: int, end: int) -> tuple[int, int]:
    """Narrow ``text[start:end]`` to exclude surrounding whitespace."""
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end


def parse_integer(
    text: str,
    start: int,
    end: int,
    style: NumberStyles = NumberStyles.INTEGER,
    provider: NumberFormat | None = None,
) -> int:
    """
    Read the integer token in ``text[start:end]``.

    Raises:
        ParseError: If the token is empty or is not an integer under ``style``
    """
    provider = provider or NumberFormat.invariant()
    token_start, token_end = _strip_span(text, start, end)

    if token_start == token_end:
        raise ParseError(text, (start, end), "expected an integer", provider)

    if token_start > start and not style & NumberStyles.ALLOW_LEADING_WHITE:
        raise ParseError(text, (start, token_start), "leading whitespace not allowed", provider)
    if token_end < end and not style & NumberStyles.ALLOW_TRAILING_WHITE:
        raise ParseError(text, (token_end, end), "trailing whitespace not allowed", provider)

    token = text[token_start:token_end]
    negative = False
    offset = 0
    for symbol, is_negative in ((provider.negative_sign, True), (provider.positive_sign, False)):
        if symbol and token.startswith(symbol):
            if not style & NumberStyles.ALLOW_LEADING_SIGN:
                raise ParseError(
                    text, (token_start, token_start + len(symbol)), "sign not allowed", provider
                )
            negative = is_negative
            offset = len(symbol)
            break

    digits = token[offset:]
    if style & NumberStyles.ALLOW_THOUSANDS and provider.group_separator:
        separator = provider.group_separator
        if digits.startswith(separator):
            raise ParseError(text, (token_start, token_end), "misplaced group separator", provider)
        digits = digits.replace(separator, "")

    if not _DIGITS.fullmatch(digits):
        raise ParseError(text, (token_start, token_end), "not an integer", provider)

    value = int(digits)
    return -value if negative else value


def parse_fraction(
    text: str,
    style: NumberStyles = NumberStyles.INTEGER,
    provider: NumberFormat | None = None,
) -> tuple[int, int]:
    """
    Split ``text`` into a (numerator, denominator) pair.

    The pair is returned exactly as written; reduction is the caller's job.

    Raises:
        ParseError: On any structural mismatch or non-integer token
    """
    provider = provider or NumberFormat.invariant()

    if len(text) == 1 and text in VULGAR_FRACTIONS:
        return VULGAR_FRACTIONS[text]

    slash = text.find(FRACTION_SEPARATOR)
    if slash < 0:
        return parse_integer(text, 0, len(text), style, provider), 1

    extra = text.find(FRACTION_SEPARATOR, slash + 1)
    if extra >= 0:
        raise ParseError(text, (extra, extra + 1), "unexpected second '/'", provider)

    numerator = parse_integer(text, 0, slash, style | NumberStyles.ALLOW_TRAILING_WHITE, provider)
    denominator = parse_integer(
        text, slash + 1, len(text), style | NumberStyles.ALLOW_LEADING_WHITE, provider
    )
    return numerator, denominator
