"""Digit-by-digit (literal) reading, the fallback for out-of-policy inputs."""

from __future__ import annotations

from .readings import BASIC_READINGS


def read_literal(text: str) -> str:
    """Read every digit and dot of ``text`` in order: "0120" → ゼロイチニゼロ.

    Characters without a reading (signs, separators) are skipped; callers
    only pass validated numeric strings, so nothing else can appear.
    """
    return "".join(BASIC_READINGS.get(ch, "") for ch in text)
