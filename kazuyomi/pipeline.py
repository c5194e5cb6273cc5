"""
Main reading pipeline — orchestrates the full conversion.

Flow:
  ┌────────────────┐
  │ Numeric string │
  └───────┬────────┘
          │
   ┌──────▼──────┐
   │  Validator  │   ← Grammar check, NotNumericStringError on failure
   └──────┬──────┘
          │
   ┌──────▼──────┐
   │   Policy    │   ← Multi-dot check on the raw input, then strip
   └──┬───────┬──┘     separators and check the integer part
      │       │
      │  ┌────▼─────┐
      │  │ Literal  │   ← Digit by digit (sign word first, if any)
      │  └──────────┘
      │
   ┌──▼─────────────┐
   │ Split + Groups │   ← Sign word, 4-digit groups, tier suffixes
   └──┬─────────────┘
      │
   ┌──▼──────────┐
   │  Decimals   │   ← Sokuon / レイ before テン, decimals digit by digit
   └─────────────┘

Design principles:
  - Every stage is a pure function of its input; no state survives a call.
  - Only the validator raises. Everything downstream is total.
  - The numeric adapters build their own decimal text, so they cannot
    produce an input the validator would refuse.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal

from .euphony import contract_before_decimal_point
from .groups import read_integer_part
from .literal import read_literal
from .models import LiteralReason, NumberParts, ReadingMode, ReadingPlan, ReadingReport
from .policy import classify
from .readings import DECIMAL_POINT
from .splitter import split_number, split_sign
from .validators import ensure_numeric_string, strip_separators

logger = logging.getLogger(__name__)


class NumberReader:
    """Turns numeric strings into katakana readings.

    Usage:
        reader = NumberReader()
        report = reader.run("1,234.5")
        report.reading   # "センニヒャクサンジュウヨンテンゴ"

    The reader holds no state, so one instance can be shared across threads.
    """

    def run(self, text: str) -> ReadingReport:
        """Execute the full pipeline on a numeric string.

        Raises:
            NotNumericStringError: If ``text`` fails the grammar check.
        """
        # ── Step 1: Validate ────────────────────────────────────────
        ensure_numeric_string(text)

        # ── Step 2: Classify (multi-dot check sees the raw input) ───
        plan = classify(text)
        logger.debug("Reading %r in %s mode", text, plan.mode.value)

        # ── Step 3: Read ────────────────────────────────────────────
        if plan.mode is ReadingMode.LITERAL:
            return self._read_literal(text, plan)
        return self._read_structured(text, plan)

    # ─── Literal Mode ───────────────────────────────────────────────

    def _read_literal(self, text: str, plan: ReadingPlan) -> ReadingReport:
        """Digit-by-digit reading of the plan's target string.

        For single-dot inputs the sign was removed from the target and is
        read in front of it; multi-dot inputs are read raw, sign included,
        and the sign has no reading there.
        """
        logger.debug("Literal fallback for %r: %s", text, plan.reason.value)
        normalized = strip_separators(text)
        sign_reading = ""
        if plan.reason is not LiteralReason.MULTIPLE_DOTS:
            sign, _ = split_sign(normalized)
            sign_reading = sign.reading

        return ReadingReport(
            input=text,
            normalized=normalized,
            mode=plan.mode,
            reason=plan.reason,
            reading=sign_reading + read_literal(plan.target),
        )

    # ─── Structured Mode ────────────────────────────────────────────

    def _read_structured(self, text: str, plan: ReadingPlan) -> ReadingReport:
        parts = split_number(plan.target)
        return ReadingReport(
            input=text,
            normalized=plan.target,
            mode=plan.mode,
            parts=parts,
            reading=parts.sign.reading + self._read_parts(parts),
        )

    @staticmethod
    def _read_parts(parts: NumberParts) -> str:
        """Read the unsigned integer and decimal parts."""
        integer_reading = read_integer_part(parts.integer_part)

        # Integer, or trailing dot with nothing after it ("1.")
        if not parts.decimal_part:
            return integer_reading

        return (
            contract_before_decimal_point(integer_reading)
            + DECIMAL_POINT
            + read_literal(parts.decimal_part)
        )


# ─── Public API ──────────────────────────────────────────────────────

_READER = NumberReader()


def explain(text: str) -> ReadingReport:
    """Return the full ReadingReport for ``text`` (mode, reason, parts, reading)."""
    return _READER.run(text)


def read_string(text: str) -> str:
    """Return the katakana reading of a numeric string.

    The string may carry one leading sign and use "," or "_" as separators,
    which are ignored. It is read digit by digit instead when it has
    several dots ("1.2.3"), an integer part over 20 digits, or an integer
    part with a leading zero other than a lone "0".

    Raises:
        NotNumericStringError: If ``text`` does not match ^(-|\\+)?[0-9,_.]+$
    """
    return _READER.run(text).reading


def read_int(value: int) -> str:
    """Return the katakana reading of an integer: -1 → マイナスイチ."""
    return read_string(str(int(value)))


def read_uint(value: int) -> str:
    """Return the katakana reading of a non-negative integer.

    Raises:
        ValueError: If ``value`` is negative.
    """
    if value < 0:
        raise ValueError(f"read_uint() expects a non-negative integer, got {value}")
    return read_string(str(int(value)))


def read_float(value: float) -> str:
    """Return the katakana reading of a float: 3.14 → サンテンイチヨン.

    Uses the shortest text that round-trips (``repr``), written out without
    an exponent; integral floats drop their ".0" (3.0 → サン).

    Raises:
        ValueError: If ``value`` is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot read a non-finite float: {value!r}")
    return read_string(format(Decimal(repr(float(value))).normalize(), "f"))


def read_decimal(value: Decimal) -> str:
    """Return the katakana reading of a Decimal, keeping its exact digits.

    Trailing zeros are significant here: Decimal("0.10") → レイテンイチゼロ.

    Raises:
        ValueError: If ``value`` is NaN or infinite.
    """
    if not value.is_finite():
        raise ValueError(f"Cannot read a non-finite decimal: {value!r}")
    return read_string(format(value, "f"))

