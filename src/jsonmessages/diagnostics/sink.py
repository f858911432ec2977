"""Diagnostics sink protocol and the default logging implementation.

Sinks are fire-and-forget: they never influence control flow.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from jsonmessages.enums import Severity

from .codes import Diagnostic

__all__ = [
    "DiagnosticsSink",
    "LoggingDiagnosticsSink",
    "report",
]

LOGGER_NAME = "jsonmessages"


class DiagnosticsSink(Protocol):
    """Receiver for missing-file and missing-translation conditions.

    Example:
        >>> class ListSink:
        ...     def __init__(self) -> None:
        ...         self.lines: list[str] = []
        ...     def warn(self, message: str) -> None:
        ...         self.lines.append(message)
        ...     def error(self, message: str) -> None:
        ...         self.lines.append(message)
    """

    def warn(self, message: str) -> None:
        """Record a warning-level condition."""

    def error(self, message: str) -> None:
        """Record an error-level condition."""


@dataclass(frozen=True, slots=True)
class LoggingDiagnosticsSink:
    """DiagnosticsSink forwarding to a standard library logger.

    Attributes:
        logger: Target logger (defaults to the "jsonmessages" logger)
    """

    logger: logging.Logger = field(default_factory=lambda: logging.getLogger(LOGGER_NAME))

    def warn(self, message: str) -> None:
        self.logger.warning("%s", message)

    def error(self, message: str) -> None:
        self.logger.error("%s", message)


def report(sink: DiagnosticsSink, diagnostic: Diagnostic) -> None:
    """Route a diagnostic to the sink method matching its severity."""
    match diagnostic.severity:
        case Severity.WARNING:
            sink.warn(diagnostic.format_error())
        case _:
            sink.error(diagnostic.format_error())
