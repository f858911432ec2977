"""Shared constants for jsonmessages.

Single source of truth for file naming, alias syntax, language-code rules
and loader limits. Kept in a leaf module so every subpackage can import it
without creating cycles.

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # File layout
    "MESSAGE_FILE_SUFFIX",
    "PATH_SEPARATOR",
    # Alias syntax
    "DEFAULT_ALIAS_MARKER",
    # Language codes
    "LANGUAGE_CODE_PATTERN",
    "PRIMARY_SUBTAG_LENGTH",
    "DEFAULT_SOURCE_LANGUAGE",
    # Loader limits
    "MAX_FILE_SIZE",
]

# ============================================================================
# FILE LAYOUT
# ============================================================================

# Default message file name: <base_path>/<language>/<category>.json
MESSAGE_FILE_SUFFIX: str = ".json"

# Separator used in every generated location, regardless of platform.
PATH_SEPARATOR: str = "/"

# ============================================================================
# ALIAS SYNTAX
# ============================================================================

# A file_map entry (or base_path) starting with this character is looked up
# through the AliasResolver instead of being joined under base_path.
DEFAULT_ALIAS_MARKER: str = "@"

# ============================================================================
# LANGUAGE CODES
# ============================================================================

# Non-empty language codes must match this pattern in full. The empty code
# is accepted separately and means "unspecified/root".
LANGUAGE_CODE_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z0-9_-]+")

# The generic language family is the leading slice of this many characters
# ("en-US" -> "en", "pt_BR" -> "pt").
PRIMARY_SUBTAG_LENGTH: int = 2

# Language the untranslated strings are written in, unless configured.
DEFAULT_SOURCE_LANGUAGE: str = "en-US"

# ============================================================================
# LOADER LIMITS
# ============================================================================

# Largest message file JsonFileLoader will read (10 MB). Larger files are
# reported and treated as empty tables.
MAX_FILE_SIZE: int = 10 * 1024 * 1024
