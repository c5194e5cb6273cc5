"""
Kazuyomi — katakana readings for numeric strings.

Architecture: Validate → Strip separators → Classify → (Split → Group read → Contract | Literal read)
Philosophy:  Every stage is a pure function. Nothing is guessed, nothing is cached.
"""

from .exceptions import KazuyomiError, NotNumericStringError
from .models import LiteralReason, NumberParts, ReadingMode, ReadingReport
from .pipeline import (
    NumberReader,
    explain,
    read_decimal,
    read_float,
    read_int,
    read_string,
    read_uint,
)

__version__ = "1.0.0"

__all__ = [
    "KazuyomiError",
    "LiteralReason",
    "NotNumericStringError",
    "NumberParts",
    "NumberReader",
    "ReadingMode",
    "ReadingReport",
    "explain",
    "read_decimal",
    "read_float",
    "read_int",
    "read_string",
    "read_uint",
]
