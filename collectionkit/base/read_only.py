"""
ReadOnlyContainerBase - query operations derived from size() and traverse().
"""

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from collectionkit.base.materialize import collection_to_list, collection_to_list_into
from collectionkit.interfaces.container import Container

E = TypeVar("E")


class ReadOnlyContainerBase(Container[E]):
    """
    Skeletal implementation of the read-only container contract.

    Subclasses implement size() and traverse(); this class derives:
    - is_empty() - O(1), no traversal
    - contains(target) - linear scan using the element's ==
    - contains_all(others) - contains() per element, short-circuits
    - describe() - "[e1, e2, ...]" in traversal order
    - materialize() / materialize_into(destination) - copy into a list

    It also wires the Python protocols: len(), iter(), `in`, str() and repr().
    """

    # Rendered in place of an element that is the container itself
    SELF_REFERENCE_PLACEHOLDER = "(this Collection)"

    SEPARATOR = ", "

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains(self, target: Any) -> bool:
        """
        Check if an element equal to target is present.

        Args:
            target: The element to look for.

        Returns:
            True on the first element that compares equal, False otherwise.

        Time complexity: O(N)
        """
        for element in self.traverse():
            if element == target:
                return True
        return False

    def contains_all(self, others: Iterable[Any]) -> bool:
        """
        Check if every element of others is present.

        Each element is looked up separately with contains(), so this is
        O(N * M). Stops at the first missing element.

        Args:
            others: Elements to look for.

        Returns:
            True if all are present (vacuously True for an empty iterable).
        """
        for target in others:
            if not self.contains(target):
                return False
        return True

    def describe(self) -> str:
        """
        Render the contents as "[e1, e2, ..., en]" in traversal order.

        An element that is this very container (identity, not equality)
        is rendered as SELF_REFERENCE_PLACEHOLDER.
        """
        parts = []
        for element in self.traverse():
            if element is self:
                parts.append(self.SELF_REFERENCE_PLACEHOLDER)
            else:
                parts.append(str(element))
        return "[" + self.SEPARATOR.join(parts) + "]"

    def materialize(self) -> list[E]:
        """
        Copy all elements into a new list sized to size().

        Raises:
            ContainerSizeMismatchError: If traversal disagrees with size().
        """
        return collection_to_list(self)

    def materialize_into(self, destination: list[Any]) -> list[Any]:
        """
        Copy all elements into destination, or into a new list if it is too small.

        Args:
            destination: Caller-supplied buffer. If larger than size(), the
                slot right after the last element is set to None.

        Returns:
            destination if it was large enough, otherwise a new list.

        Raises:
            ContainerSizeMismatchError: If traversal disagrees with size().
        """
        return collection_to_list_into(self, destination)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[E]:
        return self.traverse()

    def __contains__(self, target: Any) -> bool:
        return self.contains(target)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()})"
