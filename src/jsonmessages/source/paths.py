"""Message file path resolution.

Turns a (category, language) pair into the concrete file location(s) that
hold its translations. Categories follow the default layout
``<base_path>/<language>/<category>.json`` unless ``file_map`` redirects
them to a relative file, an aliased file, or an ordered list of files.

Aliased paths start with the alias marker and end with a language slot and
a file name::

    @root/sub1/sub2/{language}/file.json

The leading segments are resolved by asking the AliasResolver for the
longest prefix first and shrinking it from the right until one resolves.
Segments peeled off while shrinking are reattached, in order, between the
resolved base and ``<language>/<file>``.

Components:
    AliasResolver - Protocol for alias lookup (structural typing)
    AliasRegistry - Immutable in-memory AliasResolver
    PathResolver - Category/language -> ResolvedLocation
    expand_alias - Shrink-prefix alias expansion for whole paths

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol

from jsonmessages.constants import DEFAULT_ALIAS_MARKER, MESSAGE_FILE_SUFFIX, PATH_SEPARATOR
from jsonmessages.diagnostics import ErrorTemplate, UnresolvableAliasError
from jsonmessages.language import validate_language_code

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jsonmessages.source.config import MessageSourceConfig
    from jsonmessages.source.types import (
        CategoryName,
        FileMapEntry,
        LanguageCode,
        ResolvedLocation,
    )

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "AliasResolver",
    # Concrete resolver
    "AliasRegistry",
    # Path resolution
    "PathResolver",
    "expand_alias",
    "strip_trailing_separator",
]

logger = logging.getLogger(__name__)


class AliasResolver(Protocol):
    """Protocol for resolving alias prefixes to absolute directories.

    Implementations return None for prefixes they do not know; they must
    not raise for unknown prefixes.

    Example:
        >>> class EnvAliases:
        ...     def resolve(self, alias: str) -> str | None:
        ...         return {"@app": "/srv/app"}.get(alias)
    """

    def resolve(self, alias: str) -> str | None:
        """Resolve an alias prefix such as '@app' or '@app/vendor'.

        Args:
            alias: Prefix of an aliased path, marker included

        Returns:
            Absolute base path, or None if the prefix is not registered
        """


@dataclass(frozen=True, slots=True)
class AliasRegistry:
    """Immutable mapping of alias prefixes to absolute directories.

    Lookup is exact: '@app/vendor' resolves only when registered itself.
    Unregistered deeper prefixes fall back to shorter ones through the
    shrink loop in PathResolver, not here.

    Example:
        >>> registry = AliasRegistry({"@app": "/srv/app"})
        >>> registry.resolve("@app")
        '/srv/app'
        >>> registry.resolve("@app/vendor") is None
        True
        >>> registry.with_alias("@vendor", "/opt/vendor").resolve("@vendor")
        '/opt/vendor'

    Attributes:
        aliases: Alias prefix -> directory (trailing separators stripped)
    """

    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate and freeze the alias table.

        Raises:
            ValueError: If an alias name is empty or ends with a separator
        """
        frozen: dict[str, str] = {}
        for name, path in self.aliases.items():
            if not name or name.endswith(("/", "\\")):
                msg = f"Alias name must be non-empty without trailing separator: {name!r}"
                raise ValueError(msg)
            frozen[name] = strip_trailing_separator(path)
        object.__setattr__(self, "aliases", MappingProxyType(frozen))

    def resolve(self, alias: str) -> str | None:
        return self.aliases.get(alias)

    def with_alias(self, name: str, path: str) -> AliasRegistry:
        """Return a new registry with one alias added or replaced."""
        return AliasRegistry({**self.aliases, name: path})


def strip_trailing_separator(path: str) -> str:
    """Strip trailing '/' and '\\', keeping a bare root such as '/'."""
    stripped = path.rstrip("/\\")
    return stripped or path[:1]


def _shrink_resolve(
    segments: Sequence[str],
    alias_resolver: AliasResolver | None,
    original: str,
) -> tuple[str, list[str]]:
    """Resolve the longest resolvable prefix of segments.

    Returns:
        (resolved base, peeled segments in original order)

    Raises:
        UnresolvableAliasError: If no prefix resolves
    """
    if alias_resolver is not None:
        for cut in range(len(segments), 0, -1):
            prefix = PATH_SEPARATOR.join(segments[:cut])
            base = alias_resolver.resolve(prefix)
            if base is not None:
                peeled = list(segments[cut:])
                logger.debug("Alias %s resolved via %s -> %s", original, prefix, base)
                return strip_trailing_separator(base), peeled
    raise UnresolvableAliasError(ErrorTemplate.unresolvable_alias(original), alias=original)


def _join(base: str, *parts: str) -> str:
    if base == PATH_SEPARATOR:
        return base + PATH_SEPARATOR.join(parts)
    return PATH_SEPARATOR.join((base, *parts))


def expand_alias(path: str, alias_resolver: AliasResolver | None) -> str:
    """Expand an aliased path with no language slot (e.g., an aliased base path).

    Example:
        >>> expand_alias("@app/messages", AliasRegistry({"@app": "/srv/app"}))
        '/srv/app/messages'

    Raises:
        UnresolvableAliasError: If no prefix of the path resolves
    """
    segments = path.split(PATH_SEPARATOR)
    base, peeled = _shrink_resolve(segments, alias_resolver, path)
    return _join(base, *peeled) if peeled else base


@dataclass(frozen=True, slots=True)
class PathResolver:
    """Resolves (category, language) pairs to message file locations.

    Pure function of its configuration plus the injected AliasResolver.
    An aliased base_path is expanded once at construction.

    Example:
        >>> resolver = PathResolver(
        ...     "/srv/messages",
        ...     {"core": "core.json", "ext": ("a.json", "@vendor/x/{lang}/b.json")},
        ...     AliasRegistry({"@vendor": "/opt/vendor"}),
        ... )
        >>> resolver.resolve("admin\\\\users", "de")
        '/srv/messages/de/admin/users.json'
        >>> resolver.resolve("core", "de")
        '/srv/messages/de/core.json'
        >>> resolver.resolve("ext", "de")
        ['/srv/messages/de/a.json', '/opt/vendor/x/de/b.json']

    Attributes:
        base_path: Root directory, possibly aliased
        file_map: Category -> FileMapEntry
        alias_resolver: Collaborator for aliased paths (None disables aliases)
        alias_marker: Leading character of aliased paths
    """

    base_path: str
    file_map: Mapping[CategoryName, FileMapEntry] = field(default_factory=dict)
    alias_resolver: AliasResolver | None = None
    alias_marker: str = DEFAULT_ALIAS_MARKER
    _resolved_base: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Expand an aliased base_path.

        Raises:
            UnresolvableAliasError: If base_path is aliased and unresolvable
        """
        base = self.base_path
        if base.startswith(self.alias_marker):
            base = expand_alias(base, self.alias_resolver)
        object.__setattr__(self, "_resolved_base", strip_trailing_separator(base))

    @classmethod
    def from_config(
        cls,
        config: MessageSourceConfig,
        alias_resolver: AliasResolver | None = None,
    ) -> PathResolver:
        """Build a resolver from a MessageSourceConfig."""
        return cls(
            config.base_path,
            config.file_map,
            alias_resolver,
            config.alias_marker,
        )

    @property
    def resolved_base_path(self) -> str:
        """Base path with any alias expanded."""
        return self._resolved_base

    def resolve(self, category: CategoryName, language: LanguageCode) -> ResolvedLocation:
        """Resolve the file location(s) for a category in a language.

        Args:
            category: Message category ('/' or '\\' separated)
            language: Target language code (may be empty)

        Returns:
            One path, or a list of paths in file_map order

        Raises:
            InvalidLanguageCodeError: If language is malformed
            UnresolvableAliasError: If an aliased entry cannot be resolved
        """
        validate_language_code(language)

        entry = self.file_map.get(category)
        if not entry:
            normalized = category.replace("\\", PATH_SEPARATOR)
            return _join(self._resolved_base, language, normalized + MESSAGE_FILE_SUFFIX)
        if isinstance(entry, str):
            return self.resolve_entry(entry, language)
        return [self.resolve_entry(path, language) for path in entry]

    def resolve_entry(self, path: str, language: LanguageCode) -> str:
        """Resolve one file_map path (relative or aliased) for a language."""
        if path.startswith(self.alias_marker):
            return self.expand_aliased_entry(path, language)
        return _join(self._resolved_base, language, path)

    def expand_aliased_entry(self, path: str, language: LanguageCode) -> str:
        """Expand '@root/.../{language-slot}/file' for a language.

        The language slot segment is replaced by ``language`` whatever its
        placeholder text.

        Raises:
            UnresolvableAliasError: If the path lacks a language slot and
                file name, or no prefix of its leading segments resolves
        """
        segments = path.split(PATH_SEPARATOR)
        if len(segments) < 3:
            raise UnresolvableAliasError(ErrorTemplate.malformed_alias(path), alias=path)
        *leading, _slot, filename = segments
        base, peeled = _shrink_resolve(leading, self.alias_resolver, path)
        return _join(base, *peeled, language, filename)
