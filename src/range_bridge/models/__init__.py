"""Data models for constraint conversion."""

from __future__ import annotations

from .constraint_atom import (
    COMPARISON_OPERATORS,
    ConstraintAtom,
    HashicorpOperator,
    NpmOperator,
    Version,
)

__all__ = [
    "COMPARISON_OPERATORS",
    "ConstraintAtom",
    "HashicorpOperator",
    "NpmOperator",
    "Version",
]
