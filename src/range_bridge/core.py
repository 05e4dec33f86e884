"""Conversion entrypoints.

Both functions are pure: each call parses its input into fresh atoms,
rewrites them and joins the result. No state is shared between calls, so
they are safe to use from any number of threads.
"""

from __future__ import annotations

from .diagnostics import DiagnosticSink, log_diagnostic
from .parsers.hashicorp import parse as parse_hashicorp
from .parsers.npm_range import parse as parse_npm_range
from .rewrite import to_hashicorp, to_npm


def hashicorp_to_npm(constraint: str, on_error: DiagnosticSink | None = None) -> str:
    """Convert a HashiCorp constraint (``~> 1.2, != 1.2.5``) to an npm range.

    Params:
        constraint: comma-separated HashiCorp constraint; returned as-is when empty
        on_error: sink called with the input and offending element right before
            an error is raised; defaults to logging a warning

    Raises ParseError for malformed segments and UnsupportedConstraint for
    ``!=``. ``~> X`` is widened to ``>=X`` since npm cannot express it exactly.
    """
    if not constraint:
        return constraint
    sink = on_error or log_diagnostic
    atoms = parse_hashicorp(constraint, sink)
    return " ".join(to_npm(atom, constraint, sink) for atom in atoms)


def npm_to_hashicorp(constraint: str, on_error: DiagnosticSink | None = None) -> str:
    """Convert an npm range (``>=1.2.3 <2.0.0``) to a HashiCorp constraint.

    Accepts every form hashicorp_to_npm produces. Wildcards, hyphen ranges
    and ``||`` raise ParseError.
    """
    if not constraint:
        return constraint
    atoms = parse_npm_range(constraint, on_error or log_diagnostic)
    return ", ".join(to_hashicorp(atom) for atom in atoms)
