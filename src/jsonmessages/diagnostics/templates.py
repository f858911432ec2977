"""Diagnostic templates.

Centralized message construction for every fatal error and every
non-fatal load condition, so wording stays consistent and testable.

Python 3.13+. Zero external dependencies.
"""

from jsonmessages.enums import Severity

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostic text is created here; callers never build messages
    inline in exception constructors.
    """

    @staticmethod
    def invalid_language_code(language: str) -> Diagnostic:
        """Language code failed validation.

        Args:
            language: The rejected language code

        Returns:
            Diagnostic for INVALID_LANGUAGE_CODE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE_CODE,
            message=f"Invalid language code: {language!r}",
            hint="Language codes may only contain letters, digits, '_' and '-'",
        )

    @staticmethod
    def unresolvable_alias(alias: str) -> Diagnostic:
        """No prefix of an aliased path resolved.

        Args:
            alias: The aliased path

        Returns:
            Diagnostic for UNRESOLVABLE_ALIAS
        """
        return Diagnostic(
            code=DiagnosticCode.UNRESOLVABLE_ALIAS,
            message=f"Alias cannot be resolved: {alias!r}",
            hint="Register the alias root with the AliasResolver",
            location=alias,
        )

    @staticmethod
    def malformed_alias(alias: str) -> Diagnostic:
        """Aliased file_map entry lacks the language slot and file name.

        Args:
            alias: The aliased path

        Returns:
            Diagnostic for MALFORMED_ALIAS
        """
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_ALIAS,
            message=f"Aliased path must end with a language slot and a file name: {alias!r}",
            hint="Use the form '@root/.../{language}/file.json'",
            location=alias,
        )

    @staticmethod
    def missing_file(category: str, path: str) -> Diagnostic:
        """Message file for a category does not exist.

        Args:
            category: Message category
            path: Resolved location that was tried

        Returns:
            Warning diagnostic for MISSING_FILE
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_FILE,
            message=f"The message file for category '{category}' does not exist",
            location=path,
            hint="Create the file or map the category in file_map",
            severity=Severity.WARNING,
        )

    @staticmethod
    def missing_translation(category: str, path: str, fallback_path: str) -> Diagnostic:
        """Neither the message file nor its fallback exists.

        Args:
            category: Message category
            path: Primary location
            fallback_path: Fallback language location

        Returns:
            Error diagnostic for MISSING_TRANSLATION
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_TRANSLATION,
            message=(
                f"The message file for category '{category}' does not exist: {path}. "
                f"Fallback file does not exist as well: {fallback_path}"
            ),
            location=path,
        )

    @staticmethod
    def malformed_file(path: str, reason: str) -> Diagnostic:
        """Message file is not a JSON object of strings.

        Args:
            path: File path
            reason: Parser or type error description

        Returns:
            Error diagnostic for MALFORMED_FILE
        """
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_FILE,
            message=f"Message file is malformed and was ignored: {reason}",
            location=path,
            hint="Message files must contain a UTF-8 JSON object of strings",
        )

    @staticmethod
    def file_too_large(path: str, size: int, limit: int) -> Diagnostic:
        """Message file exceeds the loader's size limit.

        Args:
            path: File path
            size: Actual size in bytes
            limit: Configured maximum in bytes

        Returns:
            Error diagnostic for FILE_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.FILE_TOO_LARGE,
            message=f"Message file is {size} bytes, limit is {limit} bytes",
            location=path,
        )

    @staticmethod
    def load_failed(path: str, error: Exception) -> Diagnostic:
        """File loader raised while reading a location.

        Args:
            path: File path
            error: Exception raised by the loader

        Returns:
            Error diagnostic for LOAD_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.LOAD_FAILED,
            message=f"Failed to load message file: {type(error).__name__}: {error}",
            location=path,
        )
