"""
Module: editor.history

Purpose:
    Generic undo/redo container over immutable snapshots.
    Stores a flat list of entries plus a cursor; writing while the cursor
    is behind the end prunes the redo branch.

Key Classes:
    - HistoryStore: Undoable value holder

Dependencies:
    - typing (std)

Used By:
    - editor.session: Grid snapshot history

Invariants:
    - entries is never empty (seeded with an initial value)
    - 0 <= cursor < len(entries)
    - An overwrite commit leaves exactly one entry, so undo cannot cross
      into a previous activity or grid size
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HistoryStore(Generic[T]):
    """
    Undo/redo history of immutable values.

    Not thread-safe; intended to be driven from a single UI event loop.

    Example:
        >>> history = HistoryStore(0)
        >>> history.commit(1)
        >>> history.commit(lambda v: v + 1)
        >>> history.undo()
        >>> history.current()
        1
    """

    def __init__(self, initial: T) -> None:
        self._entries: list[T] = [initial]
        self._cursor = 0

    @property
    def entries(self) -> tuple[T, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def current(self) -> T:
        """Value at the cursor."""
        return self._entries[self._cursor]

    def commit(self, producer: Union[T, Callable[[T], T]], overwrite: bool = False) -> None:
        """
        Record a new value.

        Args:
            producer: New value, or a function mapping the current value to
                the new one
            overwrite: Replace the whole history with the new value

        Equal values are ignored unless overwrite is set.
        """
        current = self.current()
        new_value = producer(current) if callable(producer) else producer

        if overwrite:
            self._entries = [new_value]
            self._cursor = 0
            logger.debug("History overwritten")
            return

        if new_value == current:
            return

        del self._entries[self._cursor + 1:]
        self._entries.append(new_value)
        self._cursor = len(self._entries) - 1
        logger.debug(f"History commit: {len(self._entries)} entries")

    def undo(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def redo(self) -> None:
        if self._cursor < len(self._entries) - 1:
            self._cursor += 1
