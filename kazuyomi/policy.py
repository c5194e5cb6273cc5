"""
Reading-mode policy — decides structured vs. literal reading.

Checks run in a fixed order, and the order matters:

  1. Two or more dots → literal over the ORIGINAL input (separators kept;
     they simply have no reading). "127.0.0.1" is an address, not a number.
  2. Otherwise strip separators and look at the integer part (after the
     sign, before the dot):
       - 2+ characters starting with "0" → literal ("0120" is a code)
       - longer than MAX_INTEGER_DIGITS  → literal (no tier word beyond ケイ)
     The literal target is the separator-stripped string without its sign;
     the sign word is still read in front of it.
  3. Everything else is read structurally.
"""

from __future__ import annotations

from .models import LiteralReason, ReadingMode, ReadingPlan
from .splitter import split_sign
from .validators import strip_separators

# Integer parts strictly longer than this have no place-value reading
# (the highest tier, ケイ, covers 10^16 .. 10^20 - 1).
MAX_INTEGER_DIGITS = 20


def classify(text: str) -> ReadingPlan:
    """Choose the reading mode for an already-validated numeric string."""
    if text.count(".") >= 2:
        return ReadingPlan(
            mode=ReadingMode.LITERAL,
            reason=LiteralReason.MULTIPLE_DOTS,
            target=text,
        )

    normalized = strip_separators(text)
    _, unsigned = split_sign(normalized)
    integer_part = unsigned.partition(".")[0]

    if len(integer_part) >= 2 and integer_part.startswith("0"):
        return ReadingPlan(
            mode=ReadingMode.LITERAL,
            reason=LiteralReason.LEADING_ZERO,
            target=unsigned,
        )
    if len(integer_part) > MAX_INTEGER_DIGITS:
        return ReadingPlan(
            mode=ReadingMode.LITERAL,
            reason=LiteralReason.TOO_MANY_DIGITS,
            target=unsigned,
        )

    return ReadingPlan(mode=ReadingMode.STRUCTURED, target=normalized)
