"""Diagnostic codes and data structures.

Defines error codes and the structured Diagnostic record carried by
exceptions and handed to diagnostics sinks.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

from jsonmessages.enums import Severity

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]

# Control characters are escaped so file names and message keys taken from
# disk cannot forge extra log lines.
_CONTROL_ESCAPES = str.maketrans({
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\x1b": "\\x1b",
    "\x00": "\\x00",
})


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Fatal resolution errors (raised to the caller)
        2000-2999: Load conditions (non-fatal, reported to the sink)
    """

    # Resolution errors (1000-1999)
    INVALID_LANGUAGE_CODE = 1001
    UNRESOLVABLE_ALIAS = 1002
    MALFORMED_ALIAS = 1003

    # Load conditions (2000-2999)
    MISSING_FILE = 2001
    MISSING_TRANSLATION = 2002
    MALFORMED_FILE = 2003
    FILE_TOO_LARGE = 2004
    LOAD_FAILED = 2005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        hint: Suggestion for fixing the condition
        location: File path or aliased path the diagnostic refers to
        severity: WARNING or ERROR; selects the sink method
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    severity: Severity = Severity.ERROR

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            warning[MISSING_FILE]: Message file for category 'app' does not exist
              --> messages/de/app.json
              = help: Create the file or map the category in file_map

        Returns:
            Formatted, control-character-escaped message
        """
        parts = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.location:
            parts.append(f"  --> {_escape(self.location)}")
        if self.hint:
            parts.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(parts)


def _escape(text: str) -> str:
    return text.translate(_CONTROL_ESCAPES)
