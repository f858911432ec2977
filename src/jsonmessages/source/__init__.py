"""JSON message source package.

Provides the full message-source stack: type aliases, configuration,
path resolution, file loading, fallback merging, and the facade that
ties them together.

Submodules:
    types        - PEP 695 type aliases (LanguageCode, MessageTable, ...)
    config       - MessageSourceConfig
    paths        - AliasResolver protocol, AliasRegistry, PathResolver
    loading      - FileLoader protocol, JsonFileLoader, ResourceLoadResult,
                   LoadSummary
    fallback     - FallbackMerger, merge_tables
    orchestrator - JsonMessageSource, MissingTranslationEvent

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from jsonmessages.enums import LoadStatus
from jsonmessages.source.types import (
    CategoryName,
    FileMapEntry,
    LanguageCode,
    MessageTable,
    ResolvedLocation,
)
from jsonmessages.source.config import MessageSourceConfig
from jsonmessages.source.paths import AliasRegistry, AliasResolver, PathResolver, expand_alias
from jsonmessages.source.loading import (
    FileLoader,
    JsonFileLoader,
    LoadSummary,
    ResourceLoadResult,
)
from jsonmessages.source.fallback import FallbackMerger, LoadFile, merge_tables
from jsonmessages.source.orchestrator import (
    JsonMessageSource,
    MessageSource,
    MissingTranslationEvent,
)

__all__ = [
    # Facade
    "JsonMessageSource",
    "MessageSource",
    "MissingTranslationEvent",
    # Configuration
    "MessageSourceConfig",
    # Path resolution
    "AliasResolver",
    "AliasRegistry",
    "PathResolver",
    "expand_alias",
    # Loading
    "FileLoader",
    "JsonFileLoader",
    "LoadFile",
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Fallback
    "FallbackMerger",
    "merge_tables",
    # Type aliases for user code type annotations
    "CategoryName",
    "FileMapEntry",
    "LanguageCode",
    "MessageTable",
    "ResolvedLocation",
]
