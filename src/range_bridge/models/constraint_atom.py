"""Constraint atom model shared by both conversion directions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


_COMPONENT_RE = re.compile(r"[0-9]+")
_SUFFIX_RE = re.compile(r"[-+][A-Za-z0-9_.]+")


class HashicorpOperator(str, Enum):
    """Operators accepted by the HashiCorp constraint grammar."""

    UNSPECIFIED = ""
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    PESSIMISTIC = "~>"


class NpmOperator(str, Enum):
    """Operators accepted by the supported subset of npm ranges."""

    UNSPECIFIED = ""
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    TILDE = "~"
    CARET = "^"


# Operators with identical meaning in both grammars.
COMPARISON_OPERATORS = frozenset({">", "<", ">=", "<="})


@dataclass(frozen=True, slots=True)
class Version:
    """A version core of 1 to 3 numeric components plus an opaque suffix.

    Components keep their spelling as written so output reproduces the input
    text exactly. ``suffix`` includes its leading ``-`` or ``+``.
    """

    components: tuple[str, ...]
    suffix: str = ""

    def __post_init__(self) -> None:
        if not 1 <= len(self.components) <= 3:
            raise ValueError("Version core must have between 1 and 3 components")
        if any(not _COMPONENT_RE.fullmatch(c) for c in self.components):
            raise ValueError("Version components must be non-negative integers")
        if self.suffix and not _SUFFIX_RE.fullmatch(self.suffix):
            raise ValueError(f"Invalid version suffix: {self.suffix!r}")

    def __str__(self) -> str:
        return self.base + self.suffix

    @property
    def base(self) -> str:
        """Return the version core without its suffix."""
        return ".".join(self.components)

    @property
    def separator(self) -> str:
        return self.suffix[:1]

    @property
    def build_metadata(self) -> str:
        """Return the ``+...`` suffix, or an empty string for pre-releases."""
        return self.suffix if self.separator == "+" else ""

    @classmethod
    def from_parts(cls, core: str, suffix: str | None = None) -> Version:
        return cls(components=tuple(core.split(".")), suffix=suffix or "")


@dataclass(frozen=True, slots=True)
class ConstraintAtom:
    """A single ``(operator, version)`` constraint."""

    operator: HashicorpOperator | NpmOperator
    version: Version

    def __post_init__(self) -> None:
        if not isinstance(self.operator, (HashicorpOperator, NpmOperator)):
            raise TypeError(f"Unknown constraint operator: {self.operator!r}")
        if not isinstance(self.version, Version):
            raise TypeError("Constraint version must be a Version")

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"
