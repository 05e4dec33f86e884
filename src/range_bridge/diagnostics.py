"""Diagnostic sink invoked right before a conversion error is raised."""

from __future__ import annotations

import logging
from typing import Protocol


logger = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    """Structural protocol for failure-path diagnostics."""

    def __call__(self, message: str, *, constraint: str, element: str) -> None: ...


def log_diagnostic(message: str, *, constraint: str, element: str) -> None:
    """Default sink: emit a warning carrying the constraint and the bad element."""
    logger.warning(
        "%s: element=%r constraint=%r",
        message,
        element,
        constraint,
        extra={"constraint": constraint, "element": element},
    )


def ignore_diagnostic(message: str, *, constraint: str, element: str) -> None:
    """Sink that drops diagnostics, for callers that only care about the raised error."""
