"""
Place-value reading of the integer part.

Japanese groups digits in fours (万進法), not threes:

    "1234_5678" → [1234][5678]
               → センニヒャクサンジュウヨン マン ゴセンロッピャクナナジュウハチ

Supported patterns:
    "0"                 → ゼロ
    "100"               → ヒャク            (no イチ before ヒャク)
    "666"               → ロッピャクロクジュウロク
    "1_0000_0000"       → イチオク          (empty マン group elided)
    "1_0000_0000_0000"  → イッチョウ        (sokuon before チョウ)
"""

from __future__ import annotations

from .euphony import contract
from .readings import (
    BASIC_READINGS,
    CONTRACTING_TIERS,
    GROUP_SIZE,
    PLACE_WORDS,
    SPECIAL_READINGS,
    TIER_SUFFIXES,
    ZERO,
    Slot,
    Tier,
)


# ─── Grouping ────────────────────────────────────────────────────────


def split_groups(digits: str) -> list[tuple[Tier, str]]:
    """Cut ``digits`` into 4-digit groups from the right.

    Returns (tier, group) pairs, most significant first. The leftmost group
    may be shorter than four digits.

    Raises:
        ValueError: If there are more groups than tiers (over 20 digits).
    """
    groups: list[tuple[Tier, str]] = []
    end = len(digits)
    tier = 0
    while end > 0:
        if tier > max(Tier):
            raise ValueError(f"Too many digits for a place-value reading: {digits!r}")
        start = max(end - GROUP_SIZE, 0)
        groups.append((Tier(tier), digits[start:end]))
        end = start
        tier += 1
    groups.reverse()
    return groups


# ─── Group Reader ────────────────────────────────────────────────────


def read_group(group: str) -> str:
    """Read a group of 1-4 digits, e.g. "3300" → サンゼンサンビャク.

    Each non-zero digit gets its irregular reading if the (digit, slot) pair
    has one, else its basic reading plus the slot's place word. An all-zero
    group reads as "".
    """
    parts: list[str] = []
    for index, digit in enumerate(group):
        if digit == "0":
            continue
        slot = Slot.for_index(len(group), index)
        special = SPECIAL_READINGS.get((digit, slot))
        if special is not None:
            parts.append(special)
        else:
            parts.append(BASIC_READINGS[digit] + PLACE_WORDS[slot])
    return "".join(parts)


def read_integer_part(digits: str) -> str:
    """Read a whole integer part, tier by tier.

    ``digits`` must not carry a leading zero unless it is exactly "0".
    An empty integer part (".5") reads as "".

    Algorithm:
        For each group, most significant first:
        - read the group; skip it entirely if it is all zeros
        - on the チョウ and ケイ tiers, contract the group reading first
        - append the tier suffix (none for the base tier)
    """
    if digits == "":
        return ""
    if digits == "0":
        return ZERO

    parts: list[str] = []
    for tier, group in split_groups(digits):
        reading = read_group(group)
        if not reading:
            continue
        if tier in CONTRACTING_TIERS:
            reading = contract(reading)
        parts.append(reading + TIER_SUFFIXES[tier])
    return "".join(parts)
