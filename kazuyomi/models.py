"""
Pydantic models for the reading pipeline — typed, immutable values.

Every intermediate result is a frozen model. Nothing is mutated after
construction, so a report can be handed around freely.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .readings import Sign


# ─── Reading Modes ───────────────────────────────────────────────────


class ReadingMode(str, Enum):
    """How a numeric string is read."""

    STRUCTURED = "STRUCTURED"  # Place-value reading: 1234 → センニヒャクサンジュウヨン
    LITERAL = "LITERAL"  # Digit by digit: 0120 → ゼロイチニゼロ


class LiteralReason(str, Enum):
    """Why the classifier refused a structured reading."""

    MULTIPLE_DOTS = "MULTIPLE_DOTS"  # e.g. "127.0.0.1"
    LEADING_ZERO = "LEADING_ZERO"  # e.g. "0120"
    TOO_MANY_DIGITS = "TOO_MANY_DIGITS"  # Beyond the ケイ tier


# ─── Pipeline Values ─────────────────────────────────────────────────


class ReadingPlan(BaseModel):
    """Classifier output: which path to take and which string it reads."""

    model_config = ConfigDict(frozen=True)

    mode: ReadingMode
    reason: Optional[LiteralReason] = None
    target: str


class NumberParts(BaseModel):
    """A normalized numeric string split into sign, integer and decimal parts.

    ``decimal_part`` is None when the string has no dot, and "" when the
    dot is trailing ("1.").
    """

    model_config = ConfigDict(frozen=True)

    sign: Sign = Sign.NONE
    integer_part: str
    decimal_part: Optional[str] = None


class ReadingReport(BaseModel):
    """The full account of one conversion."""

    model_config = ConfigDict(frozen=True)

    input: str
    normalized: str
    mode: ReadingMode
    reason: Optional[LiteralReason] = None
    parts: Optional[NumberParts] = None  # Only set for structured readings
    reading: str
