"""Convert version constraints between HashiCorp and npm range syntax.

``hashicorp_to_npm`` and ``npm_to_hashicorp`` are the whole public surface;
both raise a ConversionError subclass when a constraint cannot be converted.
"""

from .core import hashicorp_to_npm, npm_to_hashicorp
from .diagnostics import DiagnosticSink, ignore_diagnostic, log_diagnostic
from .errors import ConversionError, ParseError, UnsupportedConstraint

__all__ = [
    "hashicorp_to_npm",
    "npm_to_hashicorp",
    "ConversionError",
    "ParseError",
    "UnsupportedConstraint",
    "DiagnosticSink",
    "ignore_diagnostic",
    "log_diagnostic",
]
