"""Parse the supported subset of npm ranges, e.g. ``>=1.2.3 <2.0.0``.

Only space-separated comparator sets are accepted. Wildcards (``*``, ``x``,
``1.x.x``), hyphen ranges and ``||`` unions are rejected.
"""

from __future__ import annotations

import re

from ..diagnostics import DiagnosticSink, log_diagnostic
from ..errors import ParseError
from ..models import ConstraintAtom, NpmOperator, Version


ATOM_RE = re.compile(r"(|>|<|>=|<=|~|\^)v?([0-9]+(?:\.[0-9]+){0,2})([-+][A-Za-z0-9_.]+)?\s*")
OR_COMBINATOR = "||"


def parse(constraint: str, on_error: DiagnosticSink = log_diagnostic) -> list[ConstraintAtom]:
    """Return the atoms of a space-separated npm range, in order."""
    if OR_COMBINATOR in constraint:
        on_error("Invalid npm constraint", constraint=constraint, element=OR_COMBINATOR)
        raise ParseError("Invalid npm constraint", constraint, OR_COMBINATOR)

    atoms: list[ConstraintAtom] = []
    for element in constraint.split(" "):
        m = ATOM_RE.fullmatch(element)
        if not m:
            on_error("Invalid npm constraint", constraint=constraint, element=element)
            raise ParseError("Invalid npm constraint", constraint, element)
        version = Version.from_parts(m.group(2), m.group(3))
        atoms.append(ConstraintAtom(NpmOperator(m.group(1)), version))
    return atoms
