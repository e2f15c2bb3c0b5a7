"""
Traversal protocol: a single-use cursor that can remove what it just produced.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import IntEnum
from typing import Generic, TypeVar

from collectionkit.models.exceptions import InvalidTraversalStateError

E = TypeVar("E")


class TraversalState(IntEnum):
    """Removal state of a traversal cursor."""

    IDLE = 0  # Nothing produced yet
    ADVANCED = 1  # An element was just produced
    REMOVED = 2  # The element just produced has been removed


class Traversal(ABC, Iterator[E], Generic[E]):
    """
    Protocol for forward-only cursors over a container's contents.

    Implementations must support:
    - Python iteration via __iter__/__next__ (StopIteration when exhausted)
    - Look-ahead via has_next()
    - Removal of the element most recently produced via remove_current()

    A traversal is owned by the call that created it. Mutating the
    container through any other channel while it is active invalidates it.
    """

    def __iter__(self) -> "Traversal[E]":
        return self

    @abstractmethod
    def __next__(self) -> E:
        """Advance the cursor and return the element under it."""
        pass

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if another call to __next__ will produce an element."""
        pass

    @abstractmethod
    def remove_current(self) -> None:
        """
        Remove the element most recently produced by this traversal.

        Raises:
            InvalidTraversalStateError: If nothing has been produced yet, or
                the current element was already removed.
        """
        pass


class StatefulTraversal(Traversal[E]):
    """
    Traversal that enforces the removal state machine.

        IDLE --next--> ADVANCED --remove_current--> REMOVED --next--> ADVANCED

    Running out of elements leaves the state alone, so the last element can
    still be removed after StopIteration. Subclasses supply the storage
    walk through _has_next, _advance and _remove.
    """

    def __init__(self) -> None:
        self._state = TraversalState.IDLE
        self._current: E | None = None

    @property
    def state(self) -> TraversalState:
        return self._state

    def __next__(self) -> E:
        if not self._has_next():
            raise StopIteration

        element = self._advance()
        self._current = element
        self._state = TraversalState.ADVANCED
        return element

    def has_next(self) -> bool:
        return self._has_next()

    def remove_current(self) -> None:
        if self._state != TraversalState.ADVANCED:
            raise InvalidTraversalStateError(self._state)

        self._remove(self._current)
        self._current = None
        self._state = TraversalState.REMOVED

    @abstractmethod
    def _has_next(self) -> bool:
        """Check whether the underlying walk has more elements."""
        pass

    @abstractmethod
    def _advance(self) -> E:
        """Move the underlying walk forward and return the new element."""
        pass

    @abstractmethod
    def _remove(self, element: E) -> None:
        """
        Remove the element just produced from the underlying store.

        Args:
            element: The element returned by the latest _advance().
        """
        pass
