"""JSON message source: resolution, fallback loading, caching and lookup.

JsonMessageSource composes the standalone components of this package:

- PathResolver turns (category, language) into file locations
- FileLoader reads each location (JsonFileLoader by default)
- FallbackMerger completes a table from generic and source languages

On top of them it keeps a per-(language, category) cache of merged
tables, answers ``translate`` lookups, records every file load for
diagnostics, and lets an ``on_missing_translation`` handler supply
translations that are not on disk.

Error policy:
    InvalidLanguageCodeError and UnresolvableAliasError propagate to the
    caller. Missing files, malformed files and loader I/O errors never do:
    they are reported to the diagnostics sink, recorded in the load
    summary, and degrade to empty or partial tables.

Concurrency:
    Cached tables sit behind an RWLock. Loads run outside it, one per
    (language, category) at a time, so a FileLoader or DiagnosticsSink may
    call back into the source while a table is loading.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from jsonmessages.diagnostics import ErrorTemplate, LoggingDiagnosticsSink, report
from jsonmessages.enums import LoadStatus
from jsonmessages.language import get_system_language, validate_language_code
from jsonmessages.rwlock import RWLock
from jsonmessages.source.fallback import FallbackMerger
from jsonmessages.source.loading import JsonFileLoader, LoadSummary, ResourceLoadResult
from jsonmessages.source.paths import PathResolver

if TYPE_CHECKING:
    from collections.abc import Callable

    from jsonmessages.diagnostics import DiagnosticsSink
    from jsonmessages.source.config import MessageSourceConfig
    from jsonmessages.source.loading import FileLoader
    from jsonmessages.source.paths import AliasResolver
    from jsonmessages.source.types import (
        CategoryName,
        LanguageCode,
        MessageTable,
        ResolvedLocation,
    )

__all__ = [
    "JsonMessageSource",
    "MessageSource",
    "MissingTranslationEvent",
]

logger = logging.getLogger(__name__)


class MessageSource(Protocol):
    """Minimal interface of a message source facade."""

    def resolve(self, category: CategoryName, language: LanguageCode) -> ResolvedLocation:
        """Resolve the file location(s) for a category and language."""

    def load_with_fallback(self, category: CategoryName, language: LanguageCode) -> MessageTable:
        """Load the fallback-merged table for a category and language."""


@dataclass(frozen=True, slots=True)
class MissingTranslationEvent:
    """A message had no (or an empty) translation.

    Passed to the ``on_missing_translation`` handler. A handler returning a
    string supplies the translation; returning None keeps the original
    message.

    Example:
        >>> def mark_missing(event: MissingTranslationEvent) -> str | None:
        ...     return f"@@{event.message}@@"
        >>> source = JsonMessageSource(config, on_missing_translation=mark_missing)

    Attributes:
        category: Message category
        message: Original (untranslated) message
        language: Language the translation was requested in
    """

    category: CategoryName
    message: str
    language: LanguageCode


class JsonMessageSource:
    """Message source backed by per-language, per-category JSON files.

    Files live at ``<base_path>/<language>/<category>.json`` unless the
    configuration's ``file_map`` says otherwise. Each file is a JSON object
    mapping original messages to translations.

    Example:
        >>> config = MessageSourceConfig("/srv/messages", source_language="en-US")
        >>> source = JsonMessageSource(config, language="de-AT")
        >>> source.translate("Hello", "app")
        'Servus'
        >>> source.translate("Untranslated", "app")
        'Untranslated'

    Attributes:
        config: Immutable configuration
        language: Default target language for translate()
        force_translation: Translate even when the target language is the
            source language
    """

    __slots__ = (
        "_config",
        "_diagnostics",
        "_file_loader",
        "_force_translation",
        "_language",
        "_load_locks",
        "_load_locks_guard",
        "_load_results",
        "_lock",
        "_merger",
        "_messages",
        "_on_missing_translation",
        "_resolver",
        "_results_lock",
    )

    def __init__(
        self,
        config: MessageSourceConfig,
        *,
        language: LanguageCode | None = None,
        alias_resolver: AliasResolver | None = None,
        file_loader: FileLoader | None = None,
        diagnostics: DiagnosticsSink | None = None,
        on_missing_translation: Callable[[MissingTranslationEvent], str | None] | None = None,
        force_translation: bool = False,
    ) -> None:
        """Initialize the message source.

        Args:
            config: Base path, file map, source language and alias marker
            language: Default target language; detected from the system
                when None
            alias_resolver: Resolver for aliased paths (None disables aliases)
            file_loader: Loader for message files (JsonFileLoader when None)
            diagnostics: Sink for non-fatal conditions (logging when None)
            on_missing_translation: Handler invoked for missing translations
            force_translation: Translate even into the source language

        Raises:
            InvalidLanguageCodeError: If language is malformed
            UnresolvableAliasError: If the configured base path is aliased
                and cannot be resolved
        """
        self._config = config
        self._diagnostics: DiagnosticsSink = diagnostics or LoggingDiagnosticsSink()
        self._resolver = PathResolver.from_config(config, alias_resolver)
        self._merger = FallbackMerger(self._resolver, config.source_language, self._diagnostics)
        self._file_loader: FileLoader = file_loader or JsonFileLoader(
            diagnostics=self._diagnostics
        )
        self._language = (
            get_system_language() if language is None else validate_language_code(language)
        )
        self._on_missing_translation = on_missing_translation
        self._force_translation = force_translation

        # Merged tables keyed by (language, category)
        self._messages: dict[tuple[LanguageCode, CategoryName], MessageTable] = {}
        self._lock = RWLock()
        self._load_locks: dict[tuple[LanguageCode, CategoryName], threading.RLock] = {}
        self._load_locks_guard = threading.Lock()

        self._load_results: list[ResourceLoadResult] = []
        self._results_lock = threading.Lock()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"JsonMessageSource(base_path={self._config.base_path!r}, "
            f"language={self._language!r}, "
            f"source_language={self._config.source_language!r})"
        )

    @property
    def config(self) -> MessageSourceConfig:
        return self._config

    @property
    def language(self) -> LanguageCode:
        return self._language

    @property
    def source_language(self) -> LanguageCode:
        return self._config.source_language

    @property
    def force_translation(self) -> bool:
        return self._force_translation

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    def resolve(self, category: CategoryName, language: LanguageCode) -> ResolvedLocation:
        """Resolve the file location(s) for a category and language.

        Raises:
            InvalidLanguageCodeError: If language is malformed
            UnresolvableAliasError: If an aliased entry cannot be resolved
        """
        return self._resolver.resolve(category, language)

    def load_with_fallback(self, category: CategoryName, language: LanguageCode) -> MessageTable:
        """Load the fallback-merged table, bypassing the cache.

        Every file read is recorded in the load summary.

        Raises:
            InvalidLanguageCodeError: If language is malformed
            UnresolvableAliasError: If an aliased entry cannot be resolved
        """
        return self._merger.load_with_fallback(category, language, self._load_file)

    def get_messages(
        self,
        category: CategoryName,
        language: LanguageCode | None = None,
    ) -> MessageTable:
        """Return a copy of the cached, fallback-merged table.

        Args:
            category: Message category
            language: Target language (default: the source's language)
        """
        table = self._get_table(category, self._language if language is None else language)
        with self._lock.read():
            return dict(table)

    def translate(
        self,
        message: str,
        category: CategoryName,
        language: LanguageCode | None = None,
    ) -> str:
        """Translate a message, returning the original when untranslated.

        Messages are returned unchanged when the target language is the
        source language, unless force_translation is set.

        Args:
            message: Original message (the table key)
            category: Message category
            language: Target language (default: the source's language)

        Returns:
            Translation, handler-supplied translation, or the original message

        Raises:
            InvalidLanguageCodeError: If language is malformed
            UnresolvableAliasError: If an aliased entry cannot be resolved
        """
        target = self._language if language is None else language
        if not self._force_translation and target == self._config.source_language:
            return message

        table = self._get_table(category, target)
        with self._lock.read():
            translation = table.get(message)
        if translation:
            return translation

        if self._on_missing_translation is not None:
            supplied = self._on_missing_translation(
                MissingTranslationEvent(category=category, message=message, language=target)
            )
            if supplied is not None:
                with self._lock.write():
                    table[message] = supplied
                return supplied

        logger.debug("Missing translation for %r in %s/%s", message, target, category)
        return message

    def clear_cache(self) -> None:
        """Drop all cached tables; the next lookup reloads from disk."""
        with self._lock.write():
            self._messages.clear()
        logger.debug("Message cache cleared")

    def get_load_summary(self) -> LoadSummary:
        """Summarize every file load attempted so far.

        Example:
            >>> summary = source.get_load_summary()
            >>> if summary.has_errors:
            ...     for result in summary.get_errors():
            ...         print(f"Error loading {result.path}: {result.error}")
        """
        with self._results_lock:
            return LoadSummary(results=tuple(self._load_results))

    def _get_table(self, category: CategoryName, language: LanguageCode) -> MessageTable:
        validate_language_code(language)
        key = (language, category)
        with self._lock.read():
            table = self._messages.get(key)
        if table is not None:
            return table

        # Cache lock is not held while loading; one load per key at a time.
        with self._load_lock_for(key):
            with self._lock.read():
                table = self._messages.get(key)
            if table is not None:
                return table
            loaded = self.load_with_fallback(category, language)
            with self._lock.write():
                return self._messages.setdefault(key, loaded)

    def _load_lock_for(self, key: tuple[LanguageCode, CategoryName]) -> threading.RLock:
        with self._load_locks_guard:
            return self._load_locks.setdefault(key, threading.RLock())

    def _load_file(self, path: str) -> MessageTable | None:
        try:
            table = self._file_loader.load(path)
        except (OSError, ValueError) as e:
            report(self._diagnostics, ErrorTemplate.load_failed(path, e))
            self._record(ResourceLoadResult(path, LoadStatus.ERROR, error=e))
            return {}

        if table is None:
            self._record(ResourceLoadResult(path, LoadStatus.NOT_FOUND))
            return None
        self._record(ResourceLoadResult(path, LoadStatus.SUCCESS, message_count=len(table)))
        return table

    def _record(self, result: ResourceLoadResult) -> None:
        with self._results_lock:
            self._load_results.append(result)
