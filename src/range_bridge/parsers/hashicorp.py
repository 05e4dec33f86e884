"""Parse HashiCorp compound constraints such as ``>= 1.2.3, < 2.0.0``."""

from __future__ import annotations

import re

from ..diagnostics import DiagnosticSink, log_diagnostic
from ..errors import ParseError, UnsupportedConstraint
from ..models import ConstraintAtom, HashicorpOperator, Version


# Alternation order matters: ">" is tried before ">=" and backtracks.
# Digits and suffix characters are ASCII only; surrounding whitespace is not.
ATOM_RE = re.compile(
    r"\s*(|=|!=|>|<|>=|<=|~>)\s*v?([0-9]+(?:\.[0-9]+){0,2})([-+][A-Za-z0-9_.]+)?\s*"
)


def parse(constraint: str, on_error: DiagnosticSink = log_diagnostic) -> list[ConstraintAtom]:
    """Return the atoms of a comma-separated HashiCorp constraint, in order.

    Raises ParseError for a malformed segment and UnsupportedConstraint for
    ``!=``, which has no npm equivalent. The first bad segment aborts parsing.
    """
    atoms: list[ConstraintAtom] = []
    for element in constraint.split(","):
        m = ATOM_RE.fullmatch(element)
        if not m:
            on_error("Invalid hashicorp constraint", constraint=constraint, element=element)
            raise ParseError("Invalid hashicorp constraint", constraint, element)

        operator = HashicorpOperator(m.group(1))
        if operator is HashicorpOperator.NE:
            on_error("Unsupported hashicorp constraint", constraint=constraint, element=element)
            raise UnsupportedConstraint("Unsupported hashicorp constraint", constraint, element)

        version = Version.from_parts(m.group(2), m.group(3))
        atoms.append(ConstraintAtom(operator, version))
    return atoms
