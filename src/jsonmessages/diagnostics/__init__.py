"""Diagnostic system for message sources.

Provides the exception hierarchy, structured diagnostics with codes and
hints, and the sink protocol through which non-fatal load conditions are
reported.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import InvalidLanguageCodeError, MessageSourceError, UnresolvableAliasError
from .sink import DiagnosticsSink, LoggingDiagnosticsSink, report
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticsSink",
    "ErrorTemplate",
    "InvalidLanguageCodeError",
    "LoggingDiagnosticsSink",
    "MessageSourceError",
    "UnresolvableAliasError",
    "report",
]
