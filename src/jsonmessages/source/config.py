"""Message source configuration.

Provides a single frozen dataclass holding the settings a message source
reads during every resolution: where files live, how categories map to
files, and which language the untranslated strings are written in.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from jsonmessages.constants import DEFAULT_ALIAS_MARKER, DEFAULT_SOURCE_LANGUAGE
from jsonmessages.language import validate_language_code
from jsonmessages.source.paths import strip_trailing_separator
from jsonmessages.source.types import CategoryName, FileMapEntry

__all__ = ["MessageSourceConfig"]

# Accepted spellings for from_mapping(); camelCase mirrors common PHP/JS configs.
_KEY_ALIASES: dict[str, str] = {
    "base_path": "base_path",
    "basePath": "base_path",
    "file_map": "file_map",
    "fileMap": "file_map",
    "source_language": "source_language",
    "sourceLanguage": "source_language",
    "alias_marker": "alias_marker",
    "aliasMarker": "alias_marker",
}


@dataclass(frozen=True, slots=True)
class MessageSourceConfig:
    """Immutable configuration for a JSON message source.

    Example:
        >>> config = MessageSourceConfig(
        ...     "@app/messages",
        ...     file_map={"core": "core.json", "ext": ["ext/a.json", "@vendor/x/{lang}/b.json"]},
        ...     source_language="en-GB",
        ... )
        >>> config.file_map["ext"]
        ('ext/a.json', '@vendor/x/{lang}/b.json')

    Attributes:
        base_path: Root directory (may itself be aliased) holding
            <language>/<category>.json files. Trailing separators are stripped; a bare root is kept.
        file_map: Category -> file path or sequence of file paths. Stored
            read-only, with sequences converted to tuples.
        source_language: Language of the untranslated strings.
        alias_marker: Single character marking aliased paths.
    """

    base_path: str
    file_map: Mapping[CategoryName, FileMapEntry] = field(default_factory=dict)
    source_language: str = DEFAULT_SOURCE_LANGUAGE
    alias_marker: str = DEFAULT_ALIAS_MARKER

    def __post_init__(self) -> None:
        """Validate and freeze configuration values.

        Raises:
            ValueError: If base_path is empty, alias_marker is not a single
                character, or a file_map entry is neither a string nor a
                sequence of strings
            InvalidLanguageCodeError: If source_language is malformed
        """
        if not self.base_path:
            msg = f"base_path must be a non-empty path, got {self.base_path!r}"
            raise ValueError(msg)
        if len(self.alias_marker) != 1:
            msg = f"alias_marker must be a single character, got {self.alias_marker!r}"
            raise ValueError(msg)
        validate_language_code(self.source_language)

        frozen: dict[CategoryName, FileMapEntry] = {}
        for category, entry in self.file_map.items():
            frozen[category] = _freeze_entry(category, entry)

        object.__setattr__(self, "base_path", strip_trailing_separator(self.base_path))
        object.__setattr__(self, "file_map", MappingProxyType(frozen))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MessageSourceConfig:
        """Build a configuration from a plain mapping (e.g., parsed settings).

        Accepts snake_case and camelCase keys.

        Raises:
            ValueError: If a key is unknown or base_path is missing
        """
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key)
            if name is None:
                msg = f"Unknown message source setting: {key!r}"
                raise ValueError(msg)
            kwargs[name] = value
        if "base_path" not in kwargs:
            msg = "Message source settings require 'base_path'"
            raise ValueError(msg)
        if kwargs.get("file_map") is None:
            kwargs.pop("file_map", None)
        return cls(**kwargs)


def _freeze_entry(category: CategoryName, entry: object) -> FileMapEntry:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Sequence) and all(isinstance(item, str) for item in entry):
        return tuple(entry)
    msg = (
        f"file_map entry for category {category!r} must be a string or a "
        f"sequence of strings, got {type(entry).__name__}"
    )
    raise ValueError(msg)
