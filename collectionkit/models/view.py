"""
ReadOnlyView - read-only container over any sized Python iterable.
"""

from collections.abc import Collection, Iterable
from typing import Any, TypeVar

from collectionkit.base.read_only import ReadOnlyContainerBase
from collectionkit.interfaces.traversal import StatefulTraversal
from collectionkit.models.exceptions import UnsupportedTraversalOperationError

E = TypeVar("E")

_NO_LOOKAHEAD = object()


class ReadOnlyView(ReadOnlyContainerBase[E]):
    """
    Read-only container backed by a Python collection.

    Supports:
    - Everything ReadOnlyContainerBase derives (contains, describe, ...)
    - Live view: changes to the source are visible on the next call

    Traversals refuse remove_current().
    """

    def __init__(self, source: Collection[E]) -> None:
        """
        Initialize ReadOnlyView.

        Args:
            source: The backing collection (list, set, dict keys, another container).

        Raises:
            ValueError: If source does not support both len() and iteration.
        """
        if not isinstance(source, Collection):
            raise ValueError(
                f"source must be a sized iterable, got {type(source).__name__}"
            )
        self._source = source

    def size(self) -> int:
        return len(self._source)

    def traverse(self) -> "IteratorTraversal[E]":
        return IteratorTraversal(self._source, owner=type(self).__name__)


class IteratorTraversal(StatefulTraversal[E]):
    """
    Adapts a plain Python iterator to the Traversal protocol.

    has_next() needs one element of look-ahead, which is buffered.
    """

    def __init__(self, source: Iterable[E], owner: str = "Read-only") -> None:
        super().__init__()
        self._iterator = iter(source)
        self._lookahead: Any = _NO_LOOKAHEAD
        self._owner = owner

    def _has_next(self) -> bool:
        if self._lookahead is _NO_LOOKAHEAD:
            try:
                self._lookahead = next(self._iterator)
            except StopIteration:
                return False
        return True

    def _advance(self) -> E:
        element = self._lookahead
        self._lookahead = _NO_LOOKAHEAD
        return element

    def _remove(self, element: E) -> None:
        raise UnsupportedTraversalOperationError(self._owner)
