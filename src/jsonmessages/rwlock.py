"""Readers-writer lock guarding the message table cache.

Allows any number of concurrent lookups (readers) while loading a table
or recording a handler-supplied translation (writers) gets exclusive
access. Waiting writers block new readers so a steady stream of lookups
cannot starve a load.

Read-to-write upgrades raise RuntimeError instead of deadlocking; callers
release the read lock and re-check under the write lock.

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = ("_condition", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        # Thread id -> number of read locks held (reentrant reads)
        self._readers: dict[int, int] = {}
        self._writer: int | None = None
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Generator[None]:
        """Hold a shared lock for the duration of the block.

        Raises:
            RuntimeError: If the calling thread holds the write lock
        """
        me = threading.get_ident()
        with self._condition:
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)
            if me not in self._readers:
                while self._writer is not None or self._waiting_writers:
                    self._condition.wait()
            self._readers[me] = self._readers.get(me, 0) + 1
        try:
            yield
        finally:
            with self._condition:
                self._readers[me] -= 1
                if not self._readers[me]:
                    del self._readers[me]
                    if not self._readers:
                        self._condition.notify_all()

    @contextmanager
    def write(self) -> Generator[None]:
        """Hold the exclusive lock for the duration of the block.

        Raises:
            RuntimeError: If the calling thread already holds a read or
                write lock
        """
        me = threading.get_ident()
        with self._condition:
            if me in self._readers:
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Write lock is not reentrant"
                raise RuntimeError(msg)
            self._waiting_writers += 1
            try:
                while self._readers or self._writer is not None:
                    self._condition.wait()
                self._writer = me
            finally:
                # Readers spin on _waiting_writers; wake them if this was the last one.
                self._waiting_writers -= 1
                self._condition.notify_all()
        try:
            yield
        finally:
            with self._condition:
                self._writer = None
                self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding read locks."""
        with self._condition:
            return len(self._readers)

    @property
    def writer_active(self) -> bool:
        """True if a thread currently holds the write lock."""
        with self._condition:
            return self._writer is not None
