"""jsonmessages - per-language JSON message tables with fallback merging.

Resolves (category, language) pairs to JSON message files, optionally
redirected through a file map and path aliases, and merges each table with
its generic language family and the source language.

Public API:
    JsonMessageSource - Cached, fallback-aware message source facade
    MessageSourceConfig - Immutable base path / file map / source language
    PathResolver - Category and language to file location(s)
    FallbackMerger - Fallback loading and merging of message tables
    AliasRegistry - In-memory alias resolver ('@app' -> '/srv/app')
    JsonFileLoader - Permissive JSON message file reader

Exceptions:
    MessageSourceError - Base exception class
    InvalidLanguageCodeError - Malformed language code
    UnresolvableAliasError - Aliased path with no resolvable prefix

Submodules:
    jsonmessages.source - Components, protocols and type aliases
    jsonmessages.diagnostics - Error types, diagnostic codes and sinks
    jsonmessages.language - Language code helpers
"""

from .diagnostics import InvalidLanguageCodeError, MessageSourceError, UnresolvableAliasError
from .source import (
    AliasRegistry,
    FallbackMerger,
    JsonFileLoader,
    JsonMessageSource,
    MessageSourceConfig,
    PathResolver,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jsonmessages")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AliasRegistry",
    "FallbackMerger",
    "InvalidLanguageCodeError",
    "JsonFileLoader",
    "JsonMessageSource",
    "MessageSourceConfig",
    "MessageSourceError",
    "PathResolver",
    "UnresolvableAliasError",
    "__version__",
]
