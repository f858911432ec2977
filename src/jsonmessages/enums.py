"""Enumerations for jsonmessages type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of reading one message file.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File existed and produced a message table (possibly empty)."""

    NOT_FOUND = "not_found"
    """File does not exist. Expected for languages lacking a category."""

    ERROR = "error"
    """Loader raised while reading the file; treated as an empty table."""


class Severity(StrEnum):
    """Severity of a non-fatal diagnostic.

    Selects which DiagnosticsSink method receives the formatted message.
    """

    WARNING = "warning"
    ERROR = "error"


__all__ = [
    "LoadStatus",
    "Severity",
]
