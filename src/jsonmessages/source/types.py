"""Type aliases for the message source domain.

Provides semantic type aliases used throughout the source package and by
user code when annotating JsonMessageSource call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "CategoryName",
    "FileMapEntry",
    "LanguageCode",
    "MessageTable",
    "ResolvedLocation",
]

LanguageCode: TypeAlias = str
"""Language code (e.g., 'en', 'en-US', 'pt_BR'); empty means unspecified."""

CategoryName: TypeAlias = str
"""Message category (e.g., 'app', 'modules/billing', 'modules\\\\billing')."""

FileMapEntry: TypeAlias = str | tuple[str, ...]
"""Configured file for a category: one path or an ordered tuple of paths."""

MessageTable: TypeAlias = dict[str, str]
"""Original message -> translated message."""

ResolvedLocation: TypeAlias = str | list[str]
"""Concrete file path, or ordered paths that jointly form one table."""
