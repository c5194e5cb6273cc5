"""
Custom exception hierarchy for numeric reading.

Each exception carries a machine-readable code and a details dict,
so callers can report exactly why an input was refused.
"""

from __future__ import annotations


class KazuyomiError(Exception):
    """Base exception for all kazuyomi failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class NotNumericStringError(KazuyomiError, ValueError):
    """The input does not match the numeric-string grammar."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("NOT_NUMERIC_STRING", message, details)
