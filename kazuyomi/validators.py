"""
Input validation and separator stripping — the gate in front of the reader.

A numeric string is an optional single leading sign followed by one or
more digits, commas, underscores or dots, in any order:

    ^(-|\\+)?[0-9,_.]+$

Anything else is refused with NotNumericStringError. We never try to
repair an input; a rejected string carries a reason code explaining why.
"""

from __future__ import annotations

import logging
import re

from .exceptions import NotNumericStringError

logger = logging.getLogger(__name__)


# ─── Constants ───────────────────────────────────────────────────────

NUMERIC_STRING_PATTERN = re.compile(r"^(-|\+)?[0-9,_.]+$")

SEPARATORS: frozenset[str] = frozenset({",", "_"})

_BODY_CHARS: frozenset[str] = frozenset("0123456789,_.")
_SIGN_CHARS: frozenset[str] = frozenset("+-")


# ─── Validator ───────────────────────────────────────────────────────


def is_numeric_string(text: str) -> bool:
    """Return True if ``text`` matches the numeric-string grammar."""
    # fullmatch: "$" alone would accept a trailing newline
    return NUMERIC_STRING_PATTERN.fullmatch(text) is not None


def ensure_numeric_string(text: str) -> str:
    """Return ``text`` unchanged if it is a numeric string.

    Raises:
        NotNumericStringError: With ``details["reason"]`` set to one of
            EMPTY_INPUT, MISPLACED_SIGN or INVALID_CHARACTERS.
    """
    if is_numeric_string(text):
        return text

    details = _describe_rejection(text)
    logger.debug("Rejected %r: %s", text, details["reason"])
    raise NotNumericStringError(
        f"Input {text!r} is not a numeric string ({details['reason']})",
        details,
    )


def _describe_rejection(text: str) -> dict:
    """Work out which part of the grammar ``text`` breaks."""
    body = text[1:] if text[:1] in _SIGN_CHARS else text

    if not body:
        return {"input": text, "reason": "EMPTY_INPUT"}

    invalid = sorted({ch for ch in body if ch not in _BODY_CHARS})
    if invalid and set(invalid) <= _SIGN_CHARS:
        return {"input": text, "reason": "MISPLACED_SIGN"}
    return {
        "input": text,
        "reason": "INVALID_CHARACTERS",
        "invalid_chars": "".join(invalid),
    }


# ─── Normalizer ──────────────────────────────────────────────────────


def strip_separators(text: str) -> str:
    """Remove grouping separators ("," and "_"); signs and dots pass through."""
    return "".join(ch for ch in text if ch not in SEPARATORS)
