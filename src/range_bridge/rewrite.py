"""Per-atom rewriting between the HashiCorp and npm grammars."""

from __future__ import annotations

from .diagnostics import DiagnosticSink, log_diagnostic
from .errors import UnsupportedConstraint
from .models import COMPARISON_OPERATORS, ConstraintAtom, HashicorpOperator, NpmOperator


def to_npm(
    atom: ConstraintAtom,
    constraint: str | None = None,
    on_error: DiagnosticSink = log_diagnostic,
) -> str:
    """Rewrite a HashiCorp atom as an npm range atom.

    ``constraint`` is the compound input the atom came from and defaults to the
    atom itself. The parser already rejects ``!=``, so the UnsupportedConstraint
    raised here is only reached for atoms built by hand.
    """
    operator = HashicorpOperator(atom.operator)
    version = atom.version

    if operator in (HashicorpOperator.UNSPECIFIED, HashicorpOperator.EQ):
        return str(version)

    if operator is HashicorpOperator.PESSIMISTIC:
        size = len(version.components)
        if size == 1:
            # No caret/tilde form bumps a lone major; widen to a lower bound.
            return f">={version}"
        if size == 2:
            return f"^{version}"
        return f"~{version}"

    if operator.value in COMPARISON_OPERATORS:
        return f"{operator.value}{version}"

    element = str(atom)
    constraint = constraint or element
    on_error("Unsupported hashicorp constraint", constraint=constraint, element=element)
    raise UnsupportedConstraint("Unsupported hashicorp constraint", constraint, element)


def to_hashicorp(atom: ConstraintAtom) -> str:
    """Rewrite an npm range atom as a HashiCorp atom."""
    operator = NpmOperator(atom.operator)
    version = atom.version

    if operator is NpmOperator.CARET:
        components = version.components
        # Only "+" metadata survives; pre-release labels are dropped here.
        metadata = version.build_metadata
        if len(components) == 1:
            return f"~> {version}.0"
        if len(components) == 2:
            return f"~> {version.base}.0{metadata}"
        return f"~> {components[0]}.{components[1]}{metadata}"

    if operator is NpmOperator.TILDE:
        if not version.suffix and len(version.components) < 3:
            return f"~> {version}.0"
        return f"~> {version}"

    if operator is NpmOperator.UNSPECIFIED:
        return str(version)

    return f"{operator.value} {version}"
