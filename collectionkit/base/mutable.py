"""
MutableContainerBase - bulk mutation derived from insert() and traversal removal.
"""

import logging
from collections.abc import Callable, Container as Membership, Iterable
from typing import Any, TypeVar

from collectionkit.base.read_only import ReadOnlyContainerBase
from collectionkit.interfaces.container import MutableContainer

logger = logging.getLogger(__name__)

E = TypeVar("E")


class MutableContainerBase(ReadOnlyContainerBase[E], MutableContainer[E]):
    """
    Skeletal implementation of the mutable container contract.

    Subclasses implement size(), traverse() and insert(), and their
    traversals must support remove_current(). Every removal here goes
    through the traversal that produced the element; failures raised by the
    traversal propagate unchanged and leave the container partially
    modified.
    """

    def insert_all(self, source: Iterable[E]) -> bool:
        """
        Insert every element of source, in order.

        Every element is offered even after a rejected insert.

        Args:
            source: Elements to insert.

        Returns:
            True if at least one insert() changed the container.
        """
        changed = False
        inserted = 0
        for element in source:
            if self.insert(element):
                changed = True
                inserted += 1

        logger.debug(f"{type(self).__name__}.insert_all changed {inserted} elements")
        return changed

    def remove_one(self, target: Any) -> bool:
        """
        Remove a single occurrence of target, if present.

        Args:
            target: The element to remove (compared with ==).

        Returns:
            True if an element was removed, False if none matched.
        """
        traversal = self.traverse()
        for element in traversal:
            if element == target:
                traversal.remove_current()
                return True
        return False

    def remove_all(self, targets: Membership[Any]) -> bool:
        """
        Remove every element that is a member of targets.

        Membership is decided by targets (`element in targets`), so targets
        must implement it correctly; for library containers that is
        targets.contains().

        Args:
            targets: The elements to remove.

        Returns:
            True if at least one element was removed.
        """
        return self.remove_if(lambda element: element in targets)

    def retain_all(self, targets: Membership[Any]) -> bool:
        """
        Remove every element that is not a member of targets.

        Args:
            targets: The elements to keep.

        Returns:
            True if at least one element was removed.
        """
        return self.retain_if(lambda element: element in targets)

    def remove_if(self, predicate: Callable[[E], bool]) -> bool:
        """
        Remove every element for which predicate returns True.

        Args:
            predicate: Called once per element, in traversal order.

        Returns:
            True if at least one element was removed.
        """
        return self._filter_in_place(predicate, remove_matching=True)

    def retain_if(self, predicate: Callable[[E], bool]) -> bool:
        """Remove every element for which predicate returns False."""
        return self._filter_in_place(predicate, remove_matching=False)

    def clear(self) -> None:
        """Remove every element through a single traversal."""
        traversal = self.traverse()
        removed = 0
        for _ in traversal:
            traversal.remove_current()
            removed += 1

        logger.debug(f"{type(self).__name__}.clear removed {removed} elements")

    def _filter_in_place(self, predicate: Callable[[E], bool], remove_matching: bool) -> bool:
        traversal = self.traverse()
        removed = 0
        for element in traversal:
            if bool(predicate(element)) == remove_matching:
                traversal.remove_current()
                removed += 1

        if removed:
            logger.debug(f"{type(self).__name__} filtered out {removed} elements")
        return removed > 0
