"""
ArrayBag - list-backed container allowing duplicates, kept in insertion order.
"""

from collections.abc import Iterable
from typing import TypeVar

from collectionkit.base.mutable import MutableContainerBase
from collectionkit.interfaces.traversal import StatefulTraversal

E = TypeVar("E")


class ArrayBag(MutableContainerBase[E]):
    """
    Multiset stored in a Python list.

    insert() appends and always reports a change. Traversal order is
    insertion order.
    """

    def __init__(self, elements: Iterable[E] | None = None) -> None:
        """
        Initialize ArrayBag.

        Args:
            elements: Optional initial contents, inserted in order.
        """
        self._items: list[E] = []
        if elements is not None:
            self.insert_all(elements)

    def insert(self, element: E) -> bool:
        self._items.append(element)
        return True

    def size(self) -> int:
        return len(self._items)

    def traverse(self) -> "_ArrayTraversal[E]":
        return _ArrayTraversal(self._items)


class _ArrayTraversal(StatefulTraversal[E]):
    """Index cursor over an ArrayBag's list."""

    def __init__(self, items: list[E]) -> None:
        super().__init__()
        self._items = items
        self._index = 0

    def _has_next(self) -> bool:
        return self._index < len(self._items)

    def _advance(self) -> E:
        element = self._items[self._index]
        self._index += 1
        return element

    def _remove(self, element: E) -> None:
        # The produced element sits just behind the cursor
        self._index -= 1
        del self._items[self._index]
