"""Errors raised when a constraint cannot be converted."""

from __future__ import annotations


class ConversionError(ValueError):
    """Base error for constraints that cannot be represented in the target grammar.

    Carries the full original input and the offending segment so callers can
    report exactly which part of a compound constraint was rejected.
    """

    def __init__(self, message: str, constraint: str, element: str) -> None:
        super().__init__(f"{message}: {element!r} in {constraint!r}")
        self.reason = message
        self.constraint = constraint
        self.element = element


class ParseError(ConversionError):
    """Raised when a segment does not match the atom grammar of the source format."""


class UnsupportedConstraint(ConversionError):
    """Raised when a segment parses but has no mapping in the target grammar."""
