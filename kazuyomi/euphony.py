"""
Euphonic contraction (促音便, sokuon) at suffix boundaries.

Before チョウ, ケイ and the decimal point テン, a reading that ends in
イチ, ハチ or ジュウ is clipped to its geminated form:

    イッチョウ   (1 trillion)     not イチチョウ
    ハッケイ     (8 quadrillion)  not ハチケイ
    ジッテンゴ   (10.5)           not ジュウテンゴ

Exactly these three endings contract; any other reading is returned as is.
"""

from __future__ import annotations

from .readings import ALTERNATE_ZERO, ZERO

# Checked in order; the first matching ending wins.
_CONTRACTIONS: tuple[tuple[str, str], ...] = (
    ("イチ", "イッ"),
    ("ハチ", "ハッ"),
    ("ジュウ", "ジッ"),
)


def contract(reading: str) -> str:
    """Apply the sokuon contraction to the end of ``reading``."""
    for ending, contracted in _CONTRACTIONS:
        if reading.endswith(ending):
            return reading[: -len(ending)] + contracted
    return reading


def contract_before_decimal_point(integer_reading: str) -> str:
    """Prepare an integer-part reading to be followed by テン.

    A bare zero is read レイ in front of the decimal point (0.5 → レイテンゴ).
    """
    if integer_reading == ZERO:
        integer_reading = ALTERNATE_ZERO
    return contract(integer_reading)
