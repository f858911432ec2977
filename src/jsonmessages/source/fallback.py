"""Fallback merging of message tables across language variants.

A table for a specific language ('en-US') is completed from its generic
family ('en'); a generic language that is the family of the source
language ('en' when the source language is 'en-GB') is completed from the
source language's own file. Translations from the more specific table
always win; fallback values only fill keys that are absent or empty.

At most one fallback branch runs per language, but the generic family is
itself loaded with fallback, so 'en-US' with source language 'en-GB'
yields en-US over en over en-GB.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from jsonmessages.constants import DEFAULT_SOURCE_LANGUAGE
from jsonmessages.diagnostics import (
    DiagnosticsSink,
    ErrorTemplate,
    LoggingDiagnosticsSink,
    report,
)
from jsonmessages.language import primary_subtag, validate_language_code

if TYPE_CHECKING:
    from jsonmessages.source.paths import PathResolver
    from jsonmessages.source.types import (
        CategoryName,
        LanguageCode,
        MessageTable,
        ResolvedLocation,
    )

__all__ = [
    "FallbackMerger",
    "LoadFile",
    "describe_location",
    "merge_tables",
]

logger = logging.getLogger(__name__)

LoadFile: TypeAlias = "Callable[[str], MessageTable | None]"
"""Callback reading one path; returns None when the file does not exist."""


def merge_tables(primary: Mapping[str, str], fallback: Mapping[str, str]) -> MessageTable:
    """Fill absent or empty entries of primary from fallback.

    Non-empty primary values are never overwritten, and empty fallback
    values are never copied.

    Example:
        >>> merge_tables({"x": "X", "y": ""}, {"x": "X2", "y": "Y2", "z": "Z2"})
        {'x': 'X', 'y': 'Y2', 'z': 'Z2'}

    Returns:
        New table; inputs are not modified
    """
    merged: MessageTable = dict(primary)
    for key, value in fallback.items():
        if value and not merged.get(key):
            merged[key] = value
    return merged


def describe_location(location: ResolvedLocation) -> str:
    """Render a resolved location for diagnostics."""
    if isinstance(location, str):
        return location
    return ", ".join(location)


@dataclass(frozen=True, slots=True)
class FallbackMerger:
    """Loads a category's table for a language, completed from fallbacks.

    Stateless apart from its configuration: file reads go through the
    ``load_file`` callback supplied per call, and missing-file conditions
    are reported to the diagnostics sink without failing the call.

    Example:
        >>> merger = FallbackMerger(PathResolver("/srv/messages"), source_language="en-GB")
        >>> merger.load_with_fallback("app", "en-US", JsonFileLoader().load)
        {'a': '1'}

    Attributes:
        resolver: Path resolver for primary and fallback locations
        source_language: Language the untranslated strings are written in
        diagnostics: Sink for missing-file/missing-translation reports
    """

    resolver: PathResolver
    source_language: LanguageCode = DEFAULT_SOURCE_LANGUAGE
    diagnostics: DiagnosticsSink = field(default_factory=LoggingDiagnosticsSink)

    def __post_init__(self) -> None:
        """Validate the source language.

        Raises:
            InvalidLanguageCodeError: If source_language is malformed
        """
        validate_language_code(self.source_language)

    def load_with_fallback(
        self,
        category: CategoryName,
        language: LanguageCode,
        load_file: LoadFile,
    ) -> MessageTable:
        """Load the merged table for a category and language.

        Args:
            category: Message category
            language: Target language code (may be empty)
            load_file: Reads one path; None when the file does not exist

        Returns:
            Merged message table; empty when nothing was found

        Raises:
            InvalidLanguageCodeError: If language is malformed
            UnresolvableAliasError: If an aliased location cannot be resolved
        """
        table, _ = self._load(category, language, load_file, report_missing=True)
        if table is None:
            return {}
        logger.debug("Loaded %d messages for %s/%s", len(table), language, category)
        return table

    def load_location(self, location: ResolvedLocation, load_file: LoadFile) -> MessageTable | None:
        """Load every file of a resolved location.

        Later files override keys of earlier ones.

        Returns:
            Combined table, or None if no file of the location exists
        """
        if isinstance(location, str):
            return load_file(location)

        combined: MessageTable | None = None
        for path in location:
            table = load_file(path)
            if table is None:
                continue
            if combined is None:
                combined = {}
            combined.update(table)
        return combined

    def _load(
        self,
        category: CategoryName,
        language: LanguageCode,
        load_file: LoadFile,
        *,
        report_missing: bool,
    ) -> tuple[MessageTable | None, ResolvedLocation]:
        location = self.resolver.resolve(category, language)
        primary = self.load_location(location, load_file)

        subtag = primary_subtag(language)
        source_subtag = primary_subtag(self.source_language)

        if subtag and subtag != language:
            fallback, fallback_location = self._load(
                category, subtag, load_file, report_missing=False
            )
            merged = self._merge(category, subtag, primary, fallback, location, fallback_location)
            return merged, location

        if source_subtag and language == source_subtag and language != self.source_language:
            fallback_location = self.resolver.resolve(category, self.source_language)
            fallback = self.load_location(fallback_location, load_file)
            merged = self._merge(
                category, self.source_language, primary, fallback, location, fallback_location
            )
            return merged, location

        if primary is None and report_missing:
            report(
                self.diagnostics,
                ErrorTemplate.missing_file(category, describe_location(location)),
            )
        return primary, location

    def _merge(
        self,
        category: CategoryName,
        fallback_language: LanguageCode,
        primary: MessageTable | None,
        fallback: MessageTable | None,
        location: ResolvedLocation,
        fallback_location: ResolvedLocation,
    ) -> MessageTable | None:
        if primary is None and fallback is None:
            # Falling back towards the source language is expected to find
            # nothing: its strings are the untranslated originals.
            if fallback_language != self.source_language and not self.source_language.startswith(
                fallback_language
            ):
                report(
                    self.diagnostics,
                    ErrorTemplate.missing_translation(
                        category,
                        describe_location(location),
                        describe_location(fallback_location),
                    ),
                )
            return None
        return merge_tables(primary or {}, fallback or {})
