"""Message source exception hierarchy with structured diagnostics.

Only two conditions are fatal: a malformed language code and an aliased
path that cannot be resolved. Missing files and missing translations are
steady-state conditions reported through a DiagnosticsSink instead.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidLanguageCodeError",
    "MessageSourceError",
    "UnresolvableAliasError",
]


class MessageSourceError(Exception):
    """Base exception for all message source errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageSourceError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidLanguageCodeError(MessageSourceError, ValueError):
    """Language code contains characters outside [A-Za-z0-9_-].

    Raised before any file access so a hostile code can never reach the
    file system as a path component.

    Attributes:
        language: The rejected language code
    """

    def __init__(self, message: str | Diagnostic, *, language: str = "") -> None:
        super().__init__(message)
        self.language = language


class UnresolvableAliasError(MessageSourceError, LookupError):
    """No prefix of an aliased path is known to the AliasResolver.

    Also raised for aliased file_map entries that lack the trailing
    language slot and file name segments.

    Attributes:
        alias: The aliased path that failed to resolve
    """

    def __init__(self, message: str | Diagnostic, *, alias: str = "") -> None:
        super().__init__(message)
        self.alias = alias
