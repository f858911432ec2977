"""Language code utilities.

Centralizes validation of language codes, derivation of the primary
subtag used for fallback, and detection of the system language.

Python 3.13+.
"""

from __future__ import annotations

import os

from jsonmessages.constants import (
    DEFAULT_SOURCE_LANGUAGE,
    LANGUAGE_CODE_PATTERN,
    PRIMARY_SUBTAG_LENGTH,
)
from jsonmessages.diagnostics import ErrorTemplate, InvalidLanguageCodeError

__all__ = [
    "get_system_language",
    "is_valid_language_code",
    "normalize_language",
    "primary_subtag",
    "validate_language_code",
]


def is_valid_language_code(language: str) -> bool:
    """Check whether a language code is empty or matches [A-Za-z0-9_-]+.

    Example:
        >>> is_valid_language_code("en-US")
        True
        >>> is_valid_language_code("")
        True
        >>> is_valid_language_code("../etc")
        False
    """
    return language == "" or LANGUAGE_CODE_PATTERN.fullmatch(language) is not None


def validate_language_code(language: str) -> str:
    """Validate a language code, returning it unchanged.

    Args:
        language: Language code; empty means "unspecified/root"

    Returns:
        The same language code

    Raises:
        InvalidLanguageCodeError: If the code is non-empty and contains
            characters outside [A-Za-z0-9_-]
    """
    if not is_valid_language_code(language):
        raise InvalidLanguageCodeError(
            ErrorTemplate.invalid_language_code(language), language=language
        )
    return language


def primary_subtag(language: str) -> str:
    """Derive the generic language family from a language code.

    The subtag is the leading two characters, or the whole code when it is
    shorter. No registry lookup is involved.

    Example:
        >>> primary_subtag("en-US")
        'en'
        >>> primary_subtag("de")
        'de'
        >>> primary_subtag("")
        ''
    """
    return language[:PRIMARY_SUBTAG_LENGTH]


def normalize_language(language: str) -> str:
    """Convert a POSIX locale name to the hyphenated form used for directories.

    Strips any encoding or modifier suffix ("de_DE.UTF-8", "sr_RS@latin").

    Example:
        >>> normalize_language("de_DE.UTF-8")
        'de-DE'
        >>> normalize_language("en")
        'en'
    """
    base = language.split(".", 1)[0].split("@", 1)[0]
    return base.replace("_", "-")


def get_system_language(*, raise_on_failure: bool = False) -> str:
    """Detect the system language from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out the "C" and "POSIX" pseudo-locales and values that do not
    form a valid language code after normalization.

    Args:
        raise_on_failure: If True, raise RuntimeError when no language can
            be determined. If False (default), return "en-US".

    Returns:
        Detected language code in hyphenated form

    Raises:
        RuntimeError: If raise_on_failure is True and detection fails
    """
    import locale as locale_module  # noqa: PLC0415

    candidates: list[str] = []
    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale:
        candidates.append(system_locale)

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            candidates.append(value)

    for candidate in candidates:
        language = normalize_language(candidate)
        if language in ("", "C", "POSIX"):
            continue
        if is_valid_language_code(language):
            return language

    if raise_on_failure:
        msg = (
            "Could not determine system language. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_SOURCE_LANGUAGE
