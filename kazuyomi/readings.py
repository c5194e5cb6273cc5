"""
Katakana lookup tables for digits, places, tiers and signs.

All tables are built once at import time and exposed read-only.
Nothing in the package mutates them.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping

# ─── Basic Digit Readings ────────────────────────────────────────────
# Also the literal-mode table: "." is read as the decimal-point word.

DECIMAL_POINT = "テン"
ZERO = "ゼロ"
ALTERNATE_ZERO = "レイ"  # Zero before the decimal point: 0.5 → レイテンゴ

BASIC_READINGS: Mapping[str, str] = MappingProxyType({
    "0": ZERO,
    "1": "イチ",
    "2": "ニ",
    "3": "サン",
    "4": "ヨン",
    "5": "ゴ",
    "6": "ロク",
    "7": "ナナ",
    "8": "ハチ",
    "9": "キュウ",
    ".": DECIMAL_POINT,
})


# ─── Place Slots ─────────────────────────────────────────────────────


class Slot(IntEnum):
    """Position of a digit inside a 4-digit group, counted from the right.

    A digit at index ``i`` of a group of length ``n`` sits at ``Slot(n - i)``,
    so a single-digit group is always read in the UNITS slot.
    """

    UNITS = 1
    TENS = 2
    HUNDREDS = 3
    THOUSANDS = 4

    @classmethod
    def for_index(cls, group_length: int, index: int) -> "Slot":
        return cls(group_length - index)


PLACE_WORDS: Mapping[Slot, str] = MappingProxyType({
    Slot.UNITS: "",
    Slot.TENS: "ジュウ",
    Slot.HUNDREDS: "ヒャク",
    Slot.THOUSANDS: "セン",
})

# Irregular (digit, slot) readings that replace "basic reading + place word".
SPECIAL_READINGS: Mapping[tuple[str, Slot], str] = MappingProxyType({
    ("1", Slot.THOUSANDS): "セン",
    ("1", Slot.HUNDREDS): "ヒャク",
    ("1", Slot.TENS): "ジュウ",
    ("3", Slot.THOUSANDS): "サンゼン",
    ("3", Slot.HUNDREDS): "サンビャク",
    ("6", Slot.HUNDREDS): "ロッピャク",
    ("8", Slot.THOUSANDS): "ハッセン",
    ("8", Slot.HUNDREDS): "ハッピャク",
})


# ─── Magnitude Tiers ─────────────────────────────────────────────────


class Tier(IntEnum):
    """Base-10000 magnitude of a digit group (0 = least significant)."""

    BASE = 0  # 10^0
    MAN = 1  # 10^4
    OKU = 2  # 10^8
    CHO = 3  # 10^12
    KEI = 4  # 10^16


TIER_SUFFIXES: Mapping[Tier, str] = MappingProxyType({
    Tier.BASE: "",
    Tier.MAN: "マン",
    Tier.OKU: "オク",
    Tier.CHO: "チョウ",
    Tier.KEI: "ケイ",
})

# Tiers whose suffix triggers a sokuon contraction of the group reading.
CONTRACTING_TIERS: frozenset[Tier] = frozenset({Tier.CHO, Tier.KEI})

GROUP_SIZE = 4


# ─── Signs ───────────────────────────────────────────────────────────


class Sign(str, Enum):
    """Optional leading sign of a numeric string."""

    NONE = ""
    POSITIVE = "+"
    NEGATIVE = "-"

    @property
    def reading(self) -> str:
        return SIGN_READINGS[self]


SIGN_READINGS: Mapping[Sign, str] = MappingProxyType({
    Sign.NONE: "",
    Sign.POSITIVE: "プラス",
    Sign.NEGATIVE: "マイナス",
})
