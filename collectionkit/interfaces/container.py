"""
Container abstract base classes: the capabilities a concrete store must supply.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from collectionkit.interfaces.traversal import Traversal

E = TypeVar("E")


class Container(ABC, Generic[E]):
    """
    Abstract base class for read-only element containers.

    A concrete container supplies only a count and a traversal. Everything
    else (membership, display, materialization) is derived from those two
    by ReadOnlyContainerBase.

    Implementations:
    - ArrayBag: list-backed, insertion ordered, duplicates allowed
    - RedBlackTreeSet: sorted, unique elements
    - ReadOnlyView: wraps any sized Python iterable
    """

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of elements.

        Returns:
            The count of elements; equals the length of a fresh traversal.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def traverse(self) -> Traversal[E]:
        """
        Return a fresh cursor over the current contents.

        Returns:
            A single-use Traversal owned by the caller.
        """
        pass


class MutableContainer(Container[E]):
    """
    Abstract base class for containers that accept insertions.

    Traversals produced by a mutable container must support
    remove_current(); bulk removal is built on that.
    """

    @abstractmethod
    def insert(self, element: E) -> bool:
        """
        Add an element.

        Args:
            element: The element to add.

        Returns:
            True if the contents changed, False if the element was rejected
            (for example, already present in a set).
        """
        pass
