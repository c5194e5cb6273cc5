"""Sign / integer / decimal splitting of a normalized numeric string."""

from __future__ import annotations

from .models import NumberParts
from .readings import Sign


def split_sign(text: str) -> tuple[Sign, str]:
    """Strip one leading "+" or "-" and return it with the remainder."""
    if text.startswith("-"):
        return Sign.NEGATIVE, text[1:]
    if text.startswith("+"):
        return Sign.POSITIVE, text[1:]
    return Sign.NONE, text


def split_number(text: str) -> NumberParts:
    """Split a normalized, single-dot numeric string into its parts.

    "-12.50" → sign NEGATIVE, integer "12", decimal "50"
    "7"      → sign NONE, integer "7", decimal None
    ".5"     → sign NONE, integer "", decimal "5"
    """
    sign, unsigned = split_sign(text)
    integer_part, dot, decimal_part = unsigned.partition(".")
    return NumberParts(
        sign=sign,
        integer_part=integer_part,
        decimal_part=decimal_part if dot else None,
    )
