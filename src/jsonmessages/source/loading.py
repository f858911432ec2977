"""Message file loading infrastructure.

Provides the protocol for message file loaders, a JSON file implementation
with a permissive read policy, and result/summary data structures for
tracking load attempts.

Components:
    FileLoader - Protocol for loading message tables (structural typing)
    JsonFileLoader - Disk-based loader for UTF-8 JSON objects
    ResourceLoadResult - Immutable result of a single file load attempt
    LoadSummary - Immutable aggregate of load results

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from jsonmessages.constants import MAX_FILE_SIZE
from jsonmessages.diagnostics import (
    DiagnosticsSink,
    ErrorTemplate,
    LoggingDiagnosticsSink,
    report,
)
from jsonmessages.enums import LoadStatus

if TYPE_CHECKING:
    from jsonmessages.source.types import MessageTable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "FileLoader",
    # Concrete loader
    "JsonFileLoader",
    # Load result types
    "ResourceLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


class FileLoader(Protocol):
    """Protocol for loading a message table from a resolved path.

    Implementations return None when the file does not exist. Unreadable
    or malformed content should surface as an empty table rather than an
    exception; OSError and ValueError raised anyway are recorded by
    JsonMessageSource as load errors and treated as empty tables.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, files: dict[str, dict[str, str]]) -> None:
        ...         self.files = files
        ...     def load(self, path: str) -> dict[str, str] | None:
        ...         table = self.files.get(path)
        ...         return None if table is None else dict(table)
    """

    def load(self, path: str) -> MessageTable | None:
        """Load the message table stored at path.

        Args:
            path: Concrete file path produced by PathResolver

        Returns:
            Fresh message table, or None if the file does not exist
        """


@dataclass(frozen=True, slots=True)
class JsonFileLoader:
    """File system loader for JSON message files.

    Each file holds one JSON object mapping original messages to
    translations. Reading is permissive: invalid UTF-8, invalid JSON (or
    JSON nested beyond the parser's recursion limit), a
    non-object document, or an oversized file yields an empty table plus
    an error diagnostic. Entries whose value is not a string are dropped.

    Example:
        >>> loader = JsonFileLoader()
        >>> loader.load("messages/de/app.json")
        {'Hello': 'Hallo'}

    Attributes:
        max_file_size: Largest file read, in bytes
        diagnostics: Sink for malformed/oversized file reports
    """

    max_file_size: int = MAX_FILE_SIZE
    diagnostics: DiagnosticsSink = field(default_factory=LoggingDiagnosticsSink)

    def __post_init__(self) -> None:
        """Validate configuration.

        Raises:
            ValueError: If max_file_size is not positive
        """
        if self.max_file_size <= 0:
            msg = "max_file_size must be positive"
            raise ValueError(msg)

    def load(self, path: str) -> MessageTable | None:
        """Read and parse a message file.

        Args:
            path: File path

        Returns:
            Message table, empty table for unusable content, or None if
            the path is not an existing file
        """
        file_path = Path(path)
        if not file_path.is_file():
            return None

        size = file_path.stat().st_size
        if size > self.max_file_size:
            report(self.diagnostics, ErrorTemplate.file_too_large(path, size, self.max_file_size))
            return {}

        try:
            data = json.loads(file_path.read_bytes().decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            report(self.diagnostics, ErrorTemplate.malformed_file(path, str(e)))
            return {}
        except RecursionError:
            report(self.diagnostics, ErrorTemplate.malformed_file(path, "nesting too deep"))
            return {}

        if not isinstance(data, dict):
            reason = f"top-level value is {type(data).__name__}, expected object"
            report(self.diagnostics, ErrorTemplate.malformed_file(path, reason))
            return {}

        table: MessageTable = {}
        for key, value in data.items():
            if isinstance(value, str):
                table[key] = value
            else:
                logger.debug("Dropped non-string translation %r in %s", key, path)
        return table


@dataclass(frozen=True, slots=True)
class ResourceLoadResult:
    """Result of loading a single message file.

    Attributes:
        path: Resolved file path
        status: Load status (success, not_found, error)
        message_count: Number of entries loaded (0 unless SUCCESS)
        error: Exception if status is ERROR, None otherwise
    """

    path: str
    status: LoadStatus
    message_count: int = 0
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if the file was not found (expected for partial translations)."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the loader failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of message file load results.

    All statistics are computed properties derived from ``results``.

    Example:
        >>> summary = source.get_load_summary()
        >>> for result in summary.get_not_found():
        ...     print(f"Missing: {result.path}")

    Attributes:
        results: Individual load results in load order
    """

    results: tuple[ResourceLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of files not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[ResourceLoadResult, ...]:
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[ResourceLoadResult, ...]:
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[ResourceLoadResult, ...]:
        return tuple(r for r in self.results if r.is_success)

    @property
    def has_errors(self) -> bool:
        """Check if any file failed to load with an error."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every attempted file existed and loaded.

        Returns:
            True if errors == 0 and not_found == 0
        """
        return self.errors == 0 and self.not_found == 0
